import re

from layout import (
    COLOR_COMBINED_LECTURE,
    COLOR_DEFAULT,
    COLOR_LECTURE,
    COLOR_TUTORIAL,
)

# Matched with re.match: anchored at the start, trailing text is ignored.
LECTURE = re.compile(r'[A-Z]{3}[0-9]{3}\s?L')
TUTORIAL = re.compile(r'[A-Z]{3}[0-9]{3}\s?T')
COMBINED_LECTURE = re.compile(r'[A-Z]{3}[0-9]{3}(/[A-Z]{3}[0-9]{3})+\s?L')

_STRIP_CHARS = re.compile(r'[/\s]')
_SESSION_SUFFIXES = ("L", "P", "T")
_BARE_CODE_LENGTH = 6

# First match wins.
_COLOR_RULES = (
    (LECTURE, COLOR_LECTURE),
    (TUTORIAL, COLOR_TUTORIAL),
    (COMBINED_LECTURE, COLOR_COMBINED_LECTURE),
)


def clean_course_code(raw: str) -> str:
    """
    Strips '/' and whitespace, then drops a single trailing L/P/T session
    marker when the remainder is longer than a bare code.
    'CSE101 L' -> 'CSE101', 'CSE101/CSE102 L' -> 'CSE101CSE102'.
    """
    cleaned = _STRIP_CHARS.sub("", raw)
    if len(cleaned) > _BARE_CODE_LENGTH and cleaned.endswith(_SESSION_SUFFIXES):
        cleaned = cleaned[:-1]
    return cleaned


def normalize_course_code(raw: str, course_names: dict | None = None) -> str:
    """
    Returns the full course name mapped to the cleaned code, or the raw input
    unchanged when the code has no (non-empty) mapping.
    """
    if not course_names:
        return raw
    return course_names.get(clean_course_code(raw)) or raw


def classify_color(raw: str) -> str:
    for pattern, color in _COLOR_RULES:
        if pattern.match(raw):
            return color
    return COLOR_DEFAULT


def classify_cell(value, course_names: dict | None = None) -> dict:
    """
    Maps one raw timetable cell to {"course", "color"}.

    Blank cells become an empty default-colored entry. The color is decided on
    the untrimmed value, so leading whitespace falls through to the default.
    """
    if value is None:
        value = ""
    elif not isinstance(value, str):
        value = str(value)

    if not value.strip():
        return {"course": "", "color": COLOR_DEFAULT}

    return {
        "course": normalize_course_code(value, course_names),
        "color": classify_color(value),
    }
