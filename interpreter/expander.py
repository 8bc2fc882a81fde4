"""Expansion of meeting blocks into recurring event descriptors."""

import logging
import re
from datetime import date, datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from .models import WEEKDAYS, CourseRow, MeetingBlock, RecurringEvent

logger = logging.getLogger(__name__)


class RecurrenceExpander:
    """Turns a MeetingBlock into one RecurringEvent per distinct weekday."""

    DEFAULT_TIMEZONE = "America/Vancouver"
    DEFAULT_LOCATION = "UBC Okanagan"

    # Tried in order; start and end must both parse under the same format
    TIME_FORMATS = ("%H:%M", "%I:%M %p")

    _MERIDIEM = re.compile(r"\s*([ap])\.?\s*m\.?$", re.IGNORECASE)

    def __init__(
        self,
        timezone: str = DEFAULT_TIMEZONE,
        default_location: str = DEFAULT_LOCATION
    ) -> None:
        """Initialize the expander.

        Args:
            timezone: Zone identifier all occurrences are expressed in.
            default_location: Location used when a block names no room.
        """
        self._timezone = ZoneInfo(timezone)
        self._default_location = default_location

    @property
    def timezone(self) -> ZoneInfo:
        """Zone all produced occurrences are expressed in."""
        return self._timezone

    def expand(self, block: MeetingBlock, row: CourseRow) -> list[RecurringEvent]:
        """Expand a meeting block into recurring events.

        Args:
            block: Meeting block produced by the tokenizer.
            row: Metadata of the row the block came from.

        Returns:
            Events in order of each weekday's first appearance in the block.
            Weekdays that never occur in the range, and occurrences whose
            times cannot be resolved, contribute nothing.
        """
        interval = 2 if block.alternate_weeks else 1
        location = self._compose_location(block)
        description = self._compose_description(block, row)

        events: list[RecurringEvent] = []
        for weekday in self._distinct_weekdays(block.day_tokens):
            first_date = self._find_first_occurrence(
                weekday, block.range_start, block.range_end
            )
            if first_date is None:
                logger.debug(
                    "Row %d: weekday %d never occurs in %s..%s",
                    row.row_index, weekday, block.range_start, block.range_end
                )
                continue

            times = self.resolve_times(first_date, block.start_time, block.end_time)
            if times is None:
                logger.debug(
                    "Row %d: cannot resolve times %r - %r",
                    row.row_index, block.start_time, block.end_time
                )
                continue

            try:
                events.append(RecurringEvent(
                    weekday=weekday,
                    first_occurrence_start=times[0],
                    first_occurrence_end=times[1],
                    until_date=block.range_end,
                    title=row.course_name,
                    description=description,
                    location=location,
                    interval_weeks=interval
                ))
            except ValueError as e:
                logger.debug("Row %d: skipping invalid occurrence: %s", row.row_index, e)

        return events

    @staticmethod
    def _distinct_weekdays(day_tokens: tuple[str, ...]) -> list[int]:
        """Map day tokens to weekday ordinals, dropping repeats.

        Args:
            day_tokens: Weekday abbreviations as they appeared in the block.

        Returns:
            Distinct ordinals in order of first appearance.
        """
        weekdays: list[int] = []
        for token in day_tokens:
            weekday = WEEKDAYS.get(token.capitalize())
            if weekday is not None and weekday not in weekdays:
                weekdays.append(weekday)
        return weekdays

    @staticmethod
    def _find_first_occurrence(
        weekday: int,
        range_start: date,
        range_end: date
    ) -> Optional[date]:
        """Find the first date on or after range_start falling on weekday.

        Args:
            weekday: Target weekday, 0 = Monday.
            range_start: First date of the range.
            range_end: Last date of the range (inclusive).

        Returns:
            The matching date, or None if the range ends first.
        """
        cursor = range_start
        while cursor <= range_end and cursor.weekday() != weekday:
            cursor += timedelta(days=1)

        if cursor > range_end:
            return None
        return cursor

    def resolve_times(
        self,
        day: date,
        start_str: str,
        end_str: str
    ) -> Optional[tuple[datetime, datetime]]:
        """Combine a date with a start/end time pair.

        Each format in TIME_FORMATS is tried in turn and the first one that
        parses both strings wins. Mixed formats never resolve.

        Returns:
            Tuple of zone-aware (start, end), or None if no format fits.
        """
        start_str = self._normalize(start_str)
        end_str = self._normalize(end_str)

        for fmt in self.TIME_FORMATS:
            try:
                start = datetime.strptime(start_str, fmt).time()
                end = datetime.strptime(end_str, fmt).time()
            except ValueError:
                continue
            return (
                datetime.combine(day, start, tzinfo=self._timezone),
                datetime.combine(day, end, tzinfo=self._timezone)
            )
        return None

    @classmethod
    def _normalize(cls, time_str: str) -> str:
        """Rewrite meridiem spellings, "4:00 p.m." / "4:00pm" -> "4:00 PM"."""
        time_str = time_str.strip()
        match = cls._MERIDIEM.search(time_str)
        if not match:
            return time_str
        return f"{time_str[:match.start()]} {match.group(1).upper()}M"

    def _compose_location(self, block: MeetingBlock) -> str:
        """Build the event location.

        Args:
            block: Meeting block, possibly carrying a building and room.

        Returns:
            "<building> Room <room>", or the default location.
        """
        if block.has_location:
            return f"{block.building} Room {block.room}"
        return self._default_location

    @staticmethod
    def _compose_description(block: MeetingBlock, row: CourseRow) -> str:
        """Build the event description.

        Args:
            block: Meeting block, used for the alternate-weeks suffix.
            row: Row supplying the course name and instructional format.

        Returns:
            Course name, format in parentheses if present, and
            " - Alternate Weeks" for biweekly blocks.
        """
        description = row.course_name
        if row.format_type:
            description = f"{description} ({row.format_type})"
        if block.alternate_weeks:
            description = f"{description} - Alternate Weeks"
        return description
