"""
Turns the cell grid of one workbook sheet into per-class weekly timetables.

Grids are lists of rows of strings. Rows may be ragged or missing entirely;
any cell outside the grid reads as "".
"""

from __future__ import annotations

from cell_classifier import classify_cell
from layout import (
    CLASS_COLUMN_OFFSET,
    CLASS_HEADER_ROW,
    COLOR_HEADER,
    DAYS_OF_WEEK,
    EXCLUDED_HEADER_LABELS,
    WEEKDAY_COUNT,
    slot_rows,
    time_slot_label,
)


def _cell(grid: list[list[str]], row: int, col: int) -> str:
    if row >= len(grid):
        return ""
    cells = grid[row] or []
    if col >= len(cells):
        return ""
    value = cells[col]
    return value if value is not None else ""


def extract_classes(grid: list[list[str]]) -> list[str]:
    """
    Class names from the header row, left to right.

    Excluded labels are compared exactly against the raw cell, before
    trimming. A whitespace-only cell is kept and trims to "".
    """
    header = grid[CLASS_HEADER_ROW] if len(grid) > CLASS_HEADER_ROW else []
    return [
        str(cell).strip()
        for cell in header or []
        if cell and cell not in EXCLUDED_HEADER_LABELS
    ]


def header_row() -> list[dict]:
    return [{"course": day, "color": COLOR_HEADER} for day in DAYS_OF_WEEK]


def extract_timetable_for_class(
    grid: list[list[str]],
    class_index: int,
    course_names: dict | None = None,
) -> list[list[dict]]:
    """Header row followed by one row per scanned time-slot row."""
    first_col = class_index + CLASS_COLUMN_OFFSET
    timetable = [header_row()]

    for row_index in slot_rows():
        row = [{"course": time_slot_label(row_index), "color": COLOR_HEADER}]
        for offset in range(WEEKDAY_COUNT):
            row.append(classify_cell(_cell(grid, row_index, first_col + offset), course_names))
        timetable.append(row)

    return timetable


def process_sheet(grid: list[list[str]], course_names: dict | None = None) -> dict:
    """Class name -> timetable. A repeated class name overwrites the earlier one."""
    return {
        class_name: extract_timetable_for_class(grid, class_index, course_names)
        for class_index, class_name in enumerate(extract_classes(grid))
    }


def process_workbook(
    sheets: list[tuple[str, list[list[str]]]],
    course_names: dict | None = None,
) -> dict:
    """Sheet name -> processed sheet, in workbook order."""
    return {name: process_sheet(grid, course_names) for name, grid in sheets}
