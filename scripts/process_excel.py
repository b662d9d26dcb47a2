"""
Convert the class timetable workbook into the JSON consumed by the front end.

Usage:
    python scripts/process_excel.py
    python scripts/process_excel.py --src path/to/timetable.xlsx --out src/data
    python scripts/process_excel.py --course-names course_names.csv --check

Defaults (overridable through the environment or a .env file):
    --src           TIMETABLE_XLSX_PATH   ./timetable.xlsx
    --out           TIMETABLE_OUTPUT_DIR  ./src/data
    --course-names  COURSE_NAMES_PATH     (none)
    output file     TIMETABLE_OUTPUT_FILE timetable.json
"""

import argparse
import os
import sys

# Make converter/ modules importable when run as a plain script
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "converter"))

from course_names import load_course_names
from settings import load_settings
from sheet_transformer import process_workbook
from validators import validate_timetable
from workbook_io import load_sheet_grids, write_json


def report(data: dict, output_path: str) -> None:
    print(f"[OK] Data processed successfully -> {output_path}")
    print(f"[INFO] Generated data for {len(data)} sheets")
    for sheet_name, classes in data.items():
        print(f"   - {sheet_name}: {len(classes)} classes")


def convert(input_path: str, output_dir: str, output_file: str, course_names_path=None):
    """Load, transform and write. Returns (data, output_path)."""
    course_names = load_course_names(course_names_path)
    sheets = load_sheet_grids(input_path)
    data = process_workbook(sheets, course_names)
    output_path = write_json(data, output_dir, output_file)
    return data, output_path


def main(args=None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert a timetable workbook into per-class JSON timetables.",
    )
    parser.add_argument("--src", type=str, default=None, help="Source xlsx workbook.")
    parser.add_argument("--out", type=str, default=None, help="Output directory for the JSON file.")
    parser.add_argument(
        "--course-names", type=str, default=None,
        help="Optional CSV (course_code, course_name) used to expand course codes.",
    )
    parser.add_argument(
        "--check", action="store_true",
        help="Validate the generated timetables and fail on shape errors.",
    )
    opts = parser.parse_args(args)

    settings = load_settings(opts.src, opts.out, opts.course_names)

    if not os.path.isfile(settings.input_path):
        print(f"[ERROR] Excel file not found: {settings.input_path}", file=sys.stderr)
        print(
            f"[INFO] Please add your {os.path.basename(settings.input_path)} file "
            f"to the project root"
        )
        return 0

    print(f"[INFO] Processing Excel file: {settings.input_path}")
    try:
        data, output_path = convert(
            settings.input_path,
            settings.output_dir,
            settings.output_file,
            settings.course_names_path,
        )
    except Exception as exc:
        print(f"[FATAL] Error processing Excel file: {exc}", file=sys.stderr)
        return 1

    report(data, output_path)

    if opts.check:
        result = validate_timetable(data, label=output_path)
        print(result.summary())
        if not result.passed:
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
