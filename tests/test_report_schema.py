"""Report records must satisfy report.schema.json."""

from __future__ import annotations

from pathlib import Path

import jsonschema
import pytest

from docblock_checker.api import scan_project
from docblock_checker.contracts.load import load_schema, validate_instance

FIXTURE = Path(__file__).resolve().parent / "fixtures" / "repos" / "php_project"


def test_fixture_report_is_valid():
    run = scan_project(FIXTURE)
    assert len(run.report()) == 4
    validate_instance(run.report(), "report.schema.json")


def test_schema_is_an_array_of_records():
    schema = load_schema("report.schema.json")
    assert schema["type"] == "array"
    assert set(schema["items"]["required"]) == {"type", "file", "class", "line"}


@pytest.mark.parametrize(
    "record",
    [
        {"type": "method", "file": "a.php", "class": "A", "line": 1},
        {"type": "class", "file": "a.php", "class": "A", "method": "x", "line": 1},
        {"type": "function", "file": "a.php", "class": "A", "line": 1},
        {"type": "class", "file": "a.php", "class": "A", "line": 0},
    ],
)
def test_malformed_records_are_rejected(record: dict):
    with pytest.raises(jsonschema.ValidationError):
        validate_instance([record], "report.schema.json")
