"""Unit tests for interpreter.models invariants."""

from datetime import date, datetime

import pytest

from conftest import VANCOUVER
from interpreter import WEEKDAY_NAMES, WEEKDAYS, MeetingBlock, RecurringEvent

pytestmark = [pytest.mark.unit]


def make_event(**overrides) -> RecurringEvent:
    values = dict(
        weekday=1,
        first_occurrence_start=datetime(2024, 9, 3, 10, 0, tzinfo=VANCOUVER),
        first_occurrence_end=datetime(2024, 9, 3, 11, 0, tzinfo=VANCOUVER),
        until_date=date(2024, 12, 6),
        title="CPSC 110",
        description="CPSC 110 (Lecture)",
        location="UBC Okanagan",
    )
    values.update(overrides)
    return RecurringEvent(**values)


def test_weekday_tables_agree() -> None:
    assert WEEKDAYS["Mon"] == 0
    assert WEEKDAYS["Sun"] == 6
    assert [WEEKDAY_NAMES[WEEKDAYS[name]] for name in WEEKDAY_NAMES] == list(WEEKDAY_NAMES)
    with pytest.raises(TypeError):
        WEEKDAYS["Xyz"] = 7  # type: ignore[index]


def test_meeting_block_rejects_inverted_range() -> None:
    with pytest.raises(ValueError):
        MeetingBlock(
            range_start=date(2024, 12, 6),
            range_end=date(2024, 9, 3),
            day_tokens=("Mon",),
            start_time="9:00",
            end_time="10:00",
        )


def test_meeting_block_location_requires_building_and_room() -> None:
    block = MeetingBlock(date(2024, 9, 3), date(2024, 9, 3), ("Tue",), "9:00", "10:00",
                         building="Arts Building")

    assert block.has_location is False


def test_recurring_event_valid() -> None:
    event = make_event()

    assert event.weekday_name == "Tue"
    assert event.interval_weeks == 1


@pytest.mark.parametrize("overrides", [
    {"weekday": 7},
    {"weekday": 2},
    {"interval_weeks": 3},
    {"first_occurrence_end": datetime(2024, 9, 3, 9, 0, tzinfo=VANCOUVER)},
    {"first_occurrence_end": datetime(2024, 9, 4, 11, 0, tzinfo=VANCOUVER)},
    {"until_date": date(2024, 9, 2)},
])
def test_recurring_event_invariants(overrides) -> None:
    with pytest.raises(ValueError):
        make_event(**overrides)
