"""Row-level driver for the meeting-pattern interpreter."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional

from .expander import RecurrenceExpander
from .models import CourseRow, RecurringEvent
from .tokenizer import PatternTokenizer

logger = logging.getLogger(__name__)


class ScheduleInterpreter:
    """Runs each course row through the tokenizer and the expander.

    Rows share no state, so they can be fanned out across worker threads;
    results always come back in row order.
    """

    def __init__(
        self,
        tokenizer: Optional[PatternTokenizer] = None,
        expander: Optional[RecurrenceExpander] = None
    ) -> None:
        self._tokenizer = tokenizer or PatternTokenizer()
        self._expander = expander or RecurrenceExpander()

    def interpret_row(self, row: CourseRow) -> list[RecurringEvent]:
        """Return every recurring event described by one row's meeting pattern."""
        events: list[RecurringEvent] = []
        block_count = 0
        for block in self._tokenizer.extract_blocks(row.pattern_text):
            block_count += 1
            events.extend(self._expander.expand(block, row))

        if block_count == 0:
            logger.debug("Row %d: no meeting blocks in %r", row.row_index, row.pattern_text)
        return events

    def interpret_rows(
        self,
        rows: Iterable[CourseRow],
        max_workers: int = 1
    ) -> list[RecurringEvent]:
        """Interpret many rows.

        Args:
            rows: Course rows in sheet order.
            max_workers: Number of worker threads; 1 runs inline.

        Returns:
            All events, grouped by row in the original row order.
        """
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")

        if max_workers == 1:
            per_row = [self.interpret_row(row) for row in rows]
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                per_row = list(executor.map(self.interpret_row, rows))

        return [event for row_events in per_row for event in row_events]
