"""Tests for the JSON export of validation results."""

import json
from pathlib import Path

from adapters.json_exporter import export_result_json, result_to_json
from core.domain.models import ValidationResult


def test_result_to_json_is_stable() -> None:
    result = ValidationResult(doctype="Foo.dtd", warnings=("w",), errors=("Line 1: e",))

    text = result_to_json(result)

    assert json.loads(text) == {
        "doctype": "Foo.dtd",
        "errors": ["Line 1: e"],
        "is_valid": False,
        "warnings": ["w"],
    }
    assert text == result_to_json(result)
    assert text.index('"doctype"') < text.index('"errors"') < text.index('"is_valid"')


def test_export_creates_parent_directories(tmp_path: Path) -> None:
    result = ValidationResult(doctype="Foo.dtd")
    target = tmp_path / "nested" / "out.json"

    written = export_result_json(result=result, output_path=target)

    assert written == target
    assert json.loads(target.read_text(encoding="utf-8"))["is_valid"] is True
