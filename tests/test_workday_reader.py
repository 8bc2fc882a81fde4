"""
Tests for reader.workday_reader.WorkdayReader

Covers:
- header and structurally incomplete rows are skipped
- column mapping for course name / format / pattern
- loading the named sheet from an .xlsx workbook
"""

import pandas as pd
import pytest

from conftest import course_cells, header_rows
from reader import SheetNotFoundError, WorkdayReader

PATTERN = "2024-09-03 - 2024-12-06 | Mon Wed Fri | 10:00 - 11:00"


@pytest.mark.unit
def test_parse_rows_maps_columns() -> None:
    reader = WorkdayReader()
    raw = header_rows() + [course_cells("CPSC 110", "Lecture", PATTERN)]

    rows = reader.parse_rows(raw)

    assert len(rows) == 1
    assert rows[0].course_name == "CPSC 110"
    assert rows[0].format_type == "Lecture"
    assert rows[0].pattern_text == PATTERN
    assert rows[0].row_index == 3
    assert reader.rows_processed == 1


@pytest.mark.unit
def test_parse_rows_skips_incomplete_rows() -> None:
    reader = WorkdayReader()
    short_row = course_cells("CPSC 110", "Lecture", PATTERN)[:12]
    missing_course = course_cells("", "Lecture", PATTERN)
    missing_pattern = course_cells("MATH 100", "Lecture", "   ")
    raw = header_rows() + [
        short_row,
        missing_course,
        missing_pattern,
        course_cells("PHYS 111", "", PATTERN),
    ]

    rows = reader.parse_rows(raw)

    assert [r.course_name for r in rows] == ["PHYS 111"]
    assert rows[0].format_type is None
    assert rows[0].row_index == 6
    assert reader.rows_processed == 1


@pytest.mark.unit
def test_parse_rows_trailing_empty_cells_make_row_short() -> None:
    cells = course_cells("CPSC 110", "Lecture", PATTERN)
    cells[12] = ""
    cells[13] = float("nan")

    assert WorkdayReader().parse_rows(header_rows() + [cells]) == []


@pytest.mark.integration
def test_load_reads_named_sheet(tmp_path) -> None:
    path = tmp_path / "courses.xlsx"
    frame = pd.DataFrame(header_rows()[2:] * 3 + [course_cells("CPSC 110", "Lecture", PATTERN)])
    frame.to_excel(path, sheet_name="View My Courses", header=False, index=False)

    reader = WorkdayReader()
    rows = reader.load(path)

    assert [r.course_name for r in rows] == ["CPSC 110"]
    assert rows[0].pattern_text == PATTERN


@pytest.mark.integration
def test_load_missing_sheet(tmp_path) -> None:
    path = tmp_path / "courses.xlsx"
    pd.DataFrame([["x"]]).to_excel(path, sheet_name="Other", header=False, index=False)

    with pytest.raises(SheetNotFoundError, match="Sheet not found: View My Courses"):
        WorkdayReader().load(path)
