import os

import pytest

from settings import (
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OUTPUT_FILE,
    load_settings,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("TIMETABLE_XLSX_PATH", "TIMETABLE_OUTPUT_DIR", "TIMETABLE_OUTPUT_FILE", "COURSE_NAMES_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = load_settings()
    assert s.input_path == DEFAULT_INPUT_PATH
    assert s.output_dir == DEFAULT_OUTPUT_DIR
    assert s.output_file == DEFAULT_OUTPUT_FILE
    assert s.course_names_path is None
    assert s.output_path == os.path.join("./src/data", "timetable.json")


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("TIMETABLE_XLSX_PATH", "data/tt.xlsx")
    monkeypatch.setenv("COURSE_NAMES_PATH", "names.csv")
    s = load_settings()
    assert s.input_path == "data/tt.xlsx"
    assert s.course_names_path == "names.csv"


def test_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("TIMETABLE_OUTPUT_DIR", "from_env")
    assert load_settings(output_dir="from_arg").output_dir == "from_arg"


def test_blank_environment_value_ignored(monkeypatch):
    monkeypatch.setenv("TIMETABLE_OUTPUT_FILE", "   ")
    assert load_settings().output_file == DEFAULT_OUTPUT_FILE
