"""Tests for the canonical JSON report serialization."""

import json

from docblock_checker.utils.json_norm import stable_json_dumps


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    assert s.index('"a"') < s.index('"b"')


def test_report_records_keep_non_ascii_names():
    record = {"type": "class", "file": "src/Café.php", "class": "Café", "line": 3}
    s = stable_json_dumps([record])
    assert "Café" in s
    assert json.loads(s) == [record]


def test_compact_output():
    assert stable_json_dumps([], indent=None) == "[]\n"
