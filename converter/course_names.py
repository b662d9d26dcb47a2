import os

import pandas as pd

from cell_classifier import clean_course_code

REQUIRED_COLUMNS = ("course_code", "course_name")


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Lower-case and snake_case column headers ('Course Code' -> 'course_code')."""
    df = df.copy()
    df.columns = [str(c).strip().lower().replace(" ", "_") for c in df.columns]
    return df


def load_course_names(path: str | None) -> dict[str, str]:
    """
    Load the course-code -> full-name mapping from a CSV file.

    Keys are cleaned the same way timetable cells are before lookup, so
    'CSE101 L' and 'CSE101' in the CSV both map cells like 'CSE101L'.
    No path means no mapping; cells then keep their original text.
    """
    if not path:
        return {}
    if not os.path.isfile(path):
        raise FileNotFoundError(path)

    df = _normalize_columns(pd.read_csv(path, dtype=str, keep_default_na=False))
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(
            f"Course names file {path} is missing column(s): {', '.join(missing)}"
        )

    names: dict[str, str] = {}
    for code, name in zip(df["course_code"], df["course_name"]):
        key = clean_course_code(str(code))
        name = str(name).strip()
        if key and name:
            names[key] = name
    return names
