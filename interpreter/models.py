"""Data models for meeting patterns and recurring events."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from types import MappingProxyType
from typing import Optional


WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Abbreviation -> ordinal, same numbering as date.weekday()
WEEKDAYS = MappingProxyType({name: idx for idx, name in enumerate(WEEKDAY_NAMES)})


@dataclass(frozen=True)
class CourseRow:
    """One course row taken from the schedule export."""

    course_name: str
    pattern_text: str
    format_type: Optional[str] = None
    row_index: int = 0


@dataclass(frozen=True)
class MeetingBlock:
    """One date range / day list / time range unit of a meeting pattern."""

    range_start: date
    range_end: date  # inclusive
    day_tokens: tuple[str, ...]
    start_time: str
    end_time: str
    building: Optional[str] = None
    room: Optional[str] = None
    alternate_weeks: bool = False

    def __post_init__(self) -> None:
        if self.range_start > self.range_end:
            raise ValueError(
                f"Range start {self.range_start} is after range end {self.range_end}"
            )

    @property
    def has_location(self) -> bool:
        return bool(self.building and self.room)


@dataclass(frozen=True)
class RecurringEvent:
    """A weekly or biweekly event anchored on its first occurrence."""

    weekday: int  # 0-6: Monday-Sunday
    first_occurrence_start: datetime
    first_occurrence_end: datetime
    until_date: date
    title: str
    description: str
    location: str
    interval_weeks: int = field(default=1)  # 1 = weekly, 2 = alternate weeks

    def __post_init__(self) -> None:
        if not 0 <= self.weekday <= 6:
            raise ValueError(f"Weekday must be 0-6 (Mon-Sun), got {self.weekday}")
        if self.interval_weeks not in (1, 2):
            raise ValueError(f"Interval must be 1 or 2 weeks, got {self.interval_weeks}")
        start, end = self.first_occurrence_start, self.first_occurrence_end
        if start > end:
            raise ValueError("Start time must not be after end time")
        if start.date() != end.date():
            raise ValueError("Start and end must fall on the same day")
        if start.date() > self.until_date:
            raise ValueError("First occurrence falls after the until date")
        if start.weekday() != self.weekday:
            raise ValueError(
                f"First occurrence {start.date()} is not a {WEEKDAY_NAMES[self.weekday]}"
            )

    @property
    def weekday_name(self) -> str:
        return WEEKDAY_NAMES[self.weekday]

    @property
    def until(self) -> datetime:
        """Inclusive end-of-day bound for the recurrence, in the event's zone."""
        return datetime.combine(
            self.until_date,
            time(23, 59, 59),
            tzinfo=self.first_occurrence_start.tzinfo
        )
