"""
Shape checks for converted timetable data.

Pure functions over the nested dict produced by the sheet transformer; no
workbook or filesystem access.
"""

from __future__ import annotations

from layout import COLORS, TIMETABLE_ROW_COUNT, TIMETABLE_ROW_WIDTH
from sheet_transformer import header_row


class ValidationResult:
    """Collects errors and warnings for one converted workbook."""

    def __init__(self, label: str = "timetable"):
        self.label = label
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def error(self, msg: str) -> None:
        self.errors.append(msg)

    def warn(self, msg: str) -> None:
        self.warnings.append(msg)

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        lines = [f"[{status}] {self.label}"]
        for e in self.errors:
            lines.append(f"  [ERROR] {e}")
        for w in self.warnings:
            lines.append(f"  [WARN]  {w}")
        if self.passed and not self.warnings:
            lines.append("  All checks passed.")
        return "\n".join(lines)


def check_entry(where: str, entry, result: ValidationResult) -> None:
    if not isinstance(entry, dict) or not isinstance(entry.get("course"), str):
        result.error(f"{where}: entry has no course text.")
        return
    color = entry.get("color")
    if color not in COLORS:
        result.error(f"{where}: unknown color {color!r}.")


def check_class_timetable(
    sheet_name: str,
    class_name: str,
    timetable: list,
    result: ValidationResult,
) -> None:
    """Row count, row width, fixed header, and every entry's course/color."""
    where = f"{sheet_name} / {class_name!r}"
    if len(timetable) != TIMETABLE_ROW_COUNT:
        result.error(
            f"{where}: expected {TIMETABLE_ROW_COUNT} rows, found {len(timetable)}."
        )
    if timetable and timetable[0] != header_row():
        result.error(f"{where}: header row does not match the day header.")

    for row_index, row in enumerate(timetable):
        if len(row) != TIMETABLE_ROW_WIDTH:
            result.error(
                f"{where} row {row_index}: expected {TIMETABLE_ROW_WIDTH} entries, "
                f"found {len(row)}."
            )
        for col_index, entry in enumerate(row):
            check_entry(f"{where} row {row_index} col {col_index}", entry, result)


def validate_timetable(data: dict, label: str = "timetable") -> ValidationResult:
    result = ValidationResult(label)
    for sheet_name, classes in data.items():
        if not classes:
            result.warn(f"Sheet '{sheet_name}' produced no classes.")
            continue
        for class_name, timetable in classes.items():
            if class_name == "":
                result.warn(f"Sheet '{sheet_name}' has a blank class header cell.")
            check_class_timetable(sheet_name, class_name, timetable, result)
    return result
