"""Tests for the ValidationResult domain model."""

import pytest
from pydantic import ValidationError

from core.domain.models import ValidationResult

DOCTYPE = "http://xml.cxml.org/schemas/cXML/1.2.014/cXML.dtd"


def test_is_valid_when_no_errors() -> None:
    result = ValidationResult(doctype=DOCTYPE, warnings=("w",))
    assert result.is_valid is True
    assert result.errors == ()


def test_is_invalid_when_errors_present() -> None:
    result = ValidationResult(doctype=DOCTYPE, errors=("Line 1: boom",))
    assert result.is_valid is False


def test_is_valid_cannot_be_passed_in() -> None:
    with pytest.raises(ValidationError):
        ValidationResult(doctype=DOCTYPE, errors=("Line 1: boom",), is_valid=True)


def test_result_is_immutable() -> None:
    result = ValidationResult(doctype=DOCTYPE)
    with pytest.raises(ValidationError):
        result.errors = ("Line 2: late",)


def test_empty_doctype_rejected() -> None:
    with pytest.raises(ValidationError):
        ValidationResult(doctype="")


def test_dump_includes_derived_flag() -> None:
    result = ValidationResult(doctype=DOCTYPE, warnings=("a", "b"), errors=("Line 3: c",))
    assert result.model_dump(mode="json") == {
        "doctype": DOCTYPE,
        "warnings": ["a", "b"],
        "errors": ["Line 3: c"],
        "is_valid": False,
    }
