"""Shared fixtures for the workday-2-cal test suite."""

from zoneinfo import ZoneInfo

import pytest

from interpreter import CourseRow, PatternTokenizer, RecurrenceExpander

VANCOUVER = ZoneInfo("America/Vancouver")


@pytest.fixture
def tokenizer() -> PatternTokenizer:
    return PatternTokenizer()


@pytest.fixture
def expander() -> RecurrenceExpander:
    return RecurrenceExpander(timezone="America/Vancouver", default_location="UBC Okanagan")


@pytest.fixture
def course_row() -> CourseRow:
    return CourseRow(
        course_name="COSC 111_O01 - Computer Programming I",
        pattern_text="",
        format_type="Lecture",
        row_index=3,
    )


def header_rows() -> list[list[str]]:
    """Three title/header rows as they appear at the top of the export."""
    return [
        ["View My Courses"],
        [],
        ["", "Course Listing", "Credits", "Grading Basis", "Section", "", "", "", "",
         "Instructional Format", "Delivery Mode", "Meeting Patterns", "Registration Status",
         "Instructor"],
    ]


def course_cells(course: str, fmt: str, pattern: str) -> list[str]:
    """A 14-column course row with the interesting columns filled in."""
    cells = [""] * 14
    cells[0] = "Registered"
    cells[1] = course
    cells[9] = fmt
    cells[11] = pattern
    cells[13] = "Instructor Name"
    return cells
