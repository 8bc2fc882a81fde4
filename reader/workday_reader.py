"""Reader for Workday "View My Courses" spreadsheet exports."""

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import pandas as pd

from interpreter.models import CourseRow

logger = logging.getLogger(__name__)


class SheetNotFoundError(ValueError):
    """Raised when the workbook has no sheet with the expected name."""


class WorkdayReader:
    """Reader extracting course rows from a Workday course export.

    The export starts with a few title/header rows, followed by one row per
    registered section. Only three columns matter here: the course listing,
    the instructional format and the meeting patterns.
    """

    SHEET_NAME = "View My Courses"
    HEADER_ROWS = 3
    MIN_COLUMNS = 14
    COURSE_COLUMN = 1   # B: Course Listing
    FORMAT_COLUMN = 9   # J: Instructional Format
    PATTERN_COLUMN = 11  # L: Meeting Patterns

    def __init__(self, sheet_name: str = SHEET_NAME) -> None:
        """Initialize the reader.

        Args:
            sheet_name: Name of the worksheet holding the course list.
        """
        self._sheet_name = sheet_name
        self.rows_processed = 0

    def load(self, path: Union[str, Path]) -> list[CourseRow]:
        """Read the workbook and return its course rows.

        Args:
            path: Path to the .xlsx export.

        Returns:
            List of CourseRow objects in sheet order.

        Raises:
            SheetNotFoundError: If the expected sheet is missing.
        """
        with pd.ExcelFile(path) as workbook:
            if self._sheet_name not in workbook.sheet_names:
                raise SheetNotFoundError(f"Sheet not found: {self._sheet_name}")
            frame = workbook.parse(self._sheet_name, header=None)

        return self.parse_rows(frame.itertuples(index=False, name=None))

    def parse_rows(self, raw_rows: Iterable[Iterable[Any]]) -> list[CourseRow]:
        """Convert raw cell rows into course rows.

        Header rows, rows that are too short and rows without a course name or
        meeting pattern are skipped. rows_processed counts the rest.

        Args:
            raw_rows: Rows of cell values, header rows included.

        Returns:
            List of CourseRow objects.
        """
        self.rows_processed = 0
        rows: list[CourseRow] = []

        for row_index, raw_row in enumerate(raw_rows):
            if row_index < self.HEADER_ROWS:
                continue

            cells = self._trim(raw_row)
            if len(cells) < self.MIN_COLUMNS:
                continue

            course_name = self._cell_text(cells[self.COURSE_COLUMN])
            pattern_text = self._cell_text(cells[self.PATTERN_COLUMN])
            if not course_name or not pattern_text:
                logger.debug("Row %d: missing course name or meeting pattern", row_index)
                continue

            self.rows_processed += 1
            rows.append(CourseRow(
                course_name=course_name,
                pattern_text=pattern_text,
                format_type=self._cell_text(cells[self.FORMAT_COLUMN]),
                row_index=row_index
            ))

        return rows

    @classmethod
    def _trim(cls, raw_row: Iterable[Any]) -> list[Any]:
        """Drop trailing empty cells so short rows are recognised as such."""
        cells = [None if cls._is_empty(value) else value for value in raw_row]
        while cells and cells[-1] is None:
            cells.pop()
        return cells

    @staticmethod
    def _is_empty(value: Any) -> bool:
        """Check whether a cell value counts as blank.

        Args:
            value: Raw cell value (None, string, number or NaN).

        Returns:
            True for None, whitespace-only strings and NaN.
        """
        if value is None:
            return True
        if isinstance(value, str):
            return not value.strip()
        return bool(pd.isna(value))

    @staticmethod
    def _cell_text(value: Any) -> Optional[str]:
        """Convert a cell value to stripped text.

        Args:
            value: Cell value after trimming.

        Returns:
            Stripped string, or None when blank.
        """
        if value is None:
            return None
        text = str(value).strip()
        return text or None
