"""Tokenizer that splits meeting-pattern text into meeting blocks."""

import logging
import re
from datetime import date, datetime
from typing import Iterator, Optional

from .models import MeetingBlock

logger = logging.getLogger(__name__)


class PatternTokenizer:
    """Finds every meeting block inside a Workday meeting-pattern field.

    A single field may hold several blocks back to back, e.g.::

        2024-09-03 - 2024-12-06 | Mon Wed Fri | 10:00 - 11:00 | ... |
        Arts Building (ART) | Floor: 2 | Room: 204

    Text that does not fit the grammar is skipped.
    """

    _TIME = r"\d{1,2}:\d{2}(?:\s*[ap]\.?m\.?)?"

    BLOCK_PATTERN = re.compile(
        r"(?P<start_date>\d{4}-\d{2}-\d{2})\s*-\s*(?P<end_date>\d{4}-\d{2}-\d{2})"
        r"\s*\|\s*(?P<days>[\w\s()]+?)"
        rf"\s*\|\s*(?P<start_time>{_TIME})\s*-\s*(?P<end_time>{_TIME})"
        r"(?:\s*\|\s*[^|]*\|\s*(?P<building>[^|]+?)"
        r"\s*\|\s*Floor:\s*\d+\s*\|\s*Room:\s*(?P<room>\w+))?",
        re.IGNORECASE
    )
    DAY_PATTERN = re.compile(r"\b(Mon|Tue|Wed|Thu|Fri|Sat|Sun)\b", re.IGNORECASE)
    ALTERNATE_WEEKS_PATTERN = re.compile(r"\(\s*Alternate\s+weeks?\s*\)", re.IGNORECASE)
    BUILDING_ABBREVIATION = re.compile(r"\s*\([^)]*\)\s*$")

    def extract_blocks(self, pattern_text: str) -> Iterator[MeetingBlock]:
        """Yield meeting blocks in order of appearance.

        Args:
            pattern_text: Raw "Meeting Patterns" cell text.

        Yields:
            MeetingBlock for each well-formed match. Matches with invalid
            dates, no weekday or an inverted date range are dropped.
        """
        for match in self.BLOCK_PATTERN.finditer(pattern_text):
            block = self._build_block(match)
            if block is not None:
                yield block

    def _build_block(self, match: re.Match) -> Optional[MeetingBlock]:
        """Validate one regex match and turn it into a meeting block.

        Args:
            match: Match of BLOCK_PATTERN.

        Returns:
            MeetingBlock, or None if the match has invalid dates, no
            weekday or an inverted range.
        """
        range_start = self._parse_date(match.group("start_date"))
        range_end = self._parse_date(match.group("end_date"))
        if range_start is None or range_end is None:
            logger.debug("Dropping block with invalid date: %r", match.group(0))
            return None

        days_text = match.group("days")
        day_tokens = tuple(
            token.capitalize() for token in self.DAY_PATTERN.findall(days_text)
        )
        if not day_tokens:
            logger.debug("Dropping block without weekdays: %r", days_text)
            return None

        building = match.group("building")
        room = match.group("room")
        if building and room:
            building = self.clean_building(building)
        else:
            building = room = None

        try:
            return MeetingBlock(
                range_start=range_start,
                range_end=range_end,
                day_tokens=day_tokens,
                start_time=match.group("start_time").strip(),
                end_time=match.group("end_time").strip(),
                building=building,
                room=room,
                alternate_weeks=bool(self.ALTERNATE_WEEKS_PATTERN.search(days_text))
            )
        except ValueError as e:
            logger.debug("Dropping block with zero occurrences: %s", e)
            return None

    @staticmethod
    def _parse_date(date_str: str) -> Optional[date]:
        """Parse a strict YYYY-MM-DD date, returning None when invalid."""
        try:
            return datetime.strptime(date_str, "%Y-%m-%d").date()
        except ValueError:
            return None

    @classmethod
    def clean_building(cls, building: str) -> str:
        """Strip a trailing abbreviation, "Arts Building (ART)" -> "Arts Building"."""
        return cls.BUILDING_ABBREVIATION.sub("", building).strip()
