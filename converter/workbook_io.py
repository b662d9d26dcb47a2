"""Workbook reading and JSON writing for the timetable converter."""

from __future__ import annotations

import json
import os

import pandas as pd

OUTPUT_INDENT = 2


def _cell_text(value) -> str:
    """Render one parsed cell as text; blanks become ""."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def frame_to_grid(df: pd.DataFrame) -> list[list[str]]:
    """Convert a header-less sheet frame into rows of text cells."""
    return [[_cell_text(v) for v in row] for row in df.itertuples(index=False, name=None)]


def load_sheet_grids(path: str) -> list[tuple[str, list[list[str]]]]:
    """
    Return (sheet name, grid) pairs in workbook order.

    Every row of every sheet is read, no header row is assumed, and text
    such as "NA" is kept literally instead of becoming a missing value.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(path)

    with pd.ExcelFile(path, engine="openpyxl") as xl:
        return [
            (
                name,
                frame_to_grid(
                    xl.parse(name, header=None, dtype=object, keep_default_na=False)
                ),
            )
            for name in xl.sheet_names
        ]


def write_json(data: dict, out_dir: str, filename: str) -> str:
    """Write `data` as indented UTF-8 JSON into out_dir (created if absent)."""
    os.makedirs(out_dir, exist_ok=True)
    output_path = os.path.join(out_dir, filename)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=OUTPUT_INDENT)
    return output_path
