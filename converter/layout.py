"""
Fixed layout of the source timetable workbook.

Every sheet is expected to look like this (0-indexed rows/columns):

    row 3    | SR NO | DAY | HOURS | ... | <class A> | <class B> | ...
    row 6    | ...   |     | 8:00am| ... | Mon  Tue  Wed  Thu  Fri  (class 0: cols 4..8)
    row 8    | ...                          next time slot
    ...
    row 146  | ...                          last scanned row

Class names are collected left to right from row 3. The n-th collected class
reads its five weekday cells from columns n + 4 .. n + 8 on every other row
from 6 through 146.
"""

CLASS_HEADER_ROW = 3

FIRST_SLOT_ROW = 6
LAST_SLOT_ROW = 146
SLOT_ROW_STEP = 2

CLASS_COLUMN_OFFSET = 4
WEEKDAY_COUNT = 5

EXCLUDED_HEADER_LABELS = frozenset({"DAY", "HOURS", "SR NO", "SR.NO", "TUTORIAL"})

DAYS_OF_WEEK = [
    "Timings",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
]

# Only 14 labels for 71 scanned rows; later rows get an empty label.
TIME_SLOTS = [
    "8:00am",
    "8:50am",
    "9:40am",
    "10:30am",
    "11:20am",
    "12:10pm",
    "1:00pm",
    "1:50pm",
    "2:40pm",
    "3:30pm",
    "4:20pm",
    "5:10pm",
    "6:00pm",
    "6:50pm",
]

# ── Display colors ────────────────────────────────────────────────────────────
COLOR_HEADER = "dark"
COLOR_DEFAULT = "success"
COLOR_LECTURE = "danger"
COLOR_TUTORIAL = "primary"
COLOR_COMBINED_LECTURE = "info"

COLORS = frozenset({
    COLOR_HEADER,
    COLOR_DEFAULT,
    COLOR_LECTURE,
    COLOR_TUTORIAL,
    COLOR_COMBINED_LECTURE,
})


def slot_rows() -> range:
    """Source row indices scanned for time slots (6, 8, ..., 146)."""
    return range(FIRST_SLOT_ROW, LAST_SLOT_ROW + 1, SLOT_ROW_STEP)


def time_slot_label(row_index: int) -> str:
    slot_index = (row_index - FIRST_SLOT_ROW) // SLOT_ROW_STEP
    if 0 <= slot_index < len(TIME_SLOTS):
        return TIME_SLOTS[slot_index]
    return ""


TIMETABLE_ROW_COUNT = 1 + len(slot_rows())
TIMETABLE_ROW_WIDTH = len(DAYS_OF_WEEK)
