"""
Runtime settings for the converter.

Values come from the environment (a local .env file is honored) and fall
back to the layout the front-end project expects: the workbook at the project
root and the JSON under src/data/.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_INPUT_PATH = "./timetable.xlsx"
DEFAULT_OUTPUT_DIR = "./src/data"
DEFAULT_OUTPUT_FILE = "timetable.json"


@dataclass(frozen=True)
class Settings:
    input_path: str
    output_dir: str
    output_file: str
    course_names_path: str | None = None

    @property
    def output_path(self) -> str:
        return os.path.join(self.output_dir, self.output_file)


def _env_str(name: str, default: str | None) -> str | None:
    raw = os.environ.get(name, "").strip()
    return raw or default


def load_settings(
    input_path: str | None = None,
    output_dir: str | None = None,
    course_names_path: str | None = None,
) -> Settings:
    """Explicit arguments win over environment variables, which win over defaults."""
    load_dotenv()
    return Settings(
        input_path=input_path or _env_str("TIMETABLE_XLSX_PATH", DEFAULT_INPUT_PATH),
        output_dir=output_dir or _env_str("TIMETABLE_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        output_file=_env_str("TIMETABLE_OUTPUT_FILE", DEFAULT_OUTPUT_FILE),
        course_names_path=course_names_path or _env_str("COURSE_NAMES_PATH", None),
    )
