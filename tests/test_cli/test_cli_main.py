"""Tests for the command-line interface (HTTP mocked)."""

import json
from pathlib import Path

import logging

import httpx
import pytest
from rich.console import Console
from typer.testing import CliRunner

import cli.main
from cli.main import app
from core.domain.models import ValidationResult

W3C_URL = "https://validator.w3.org/check"

runner = CliRunner()


def _xml_file(tmp_path: Path) -> Path:
    path = tmp_path / "order.xml"
    path.write_text('<?xml version="1.0" encoding="utf-8"?><cXML/>', encoding="utf-8")
    return path


def test_valid_file(httpx_mock, tmp_path: Path, success_html: str) -> None:
    httpx_mock.add_response(url=W3C_URL, method="POST", text=success_html)
    path = _xml_file(tmp_path)

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0
    assert f'Validating XML from path "{path.resolve()}"...' in result.output
    assert (
        "Congratulations, the provided XML is well-formed and valid, according to the DTD at "
        '"http://xml.cxml.org/schemas/cXML/1.2.014/cXML.dtd"'
    ) in result.output
    assert "However, please note the following warnings:" in result.output
    assert "  - Using Direct Input mode: UTF-8 character encoding assumed" in result.output


def test_invalid_stdin(httpx_mock, single_error_html: str) -> None:
    httpx_mock.add_response(url=W3C_URL, method="POST", text=single_error_html)

    result = runner.invoke(app, [], input='<?xml version="1.0"?><cXML>')

    assert result.exit_code == 1
    assert "Validating XML from stdin..." in result.output
    assert (
        "Unfortunately, the provided XML does not validate according to the DTD at "
        '"http://xml.cxml.org/schemas/cXML/1.2.015/cXML.dtd"'
    ) in result.output
    assert "The following errors were reported:" in result.output
    assert '  ✘ Line 46: end tag for "PunchOutOrderMessage" omitted, but OMITTAG NO was specified' in result.output
    assert "Also, please note the following warnings:" in result.output
    request = httpx_mock.get_request()
    assert b'<?xml version="1.0"?><cXML>' in request.content


def test_json_output_and_export(httpx_mock, tmp_path: Path, single_error_html: str) -> None:
    httpx_mock.add_response(url=W3C_URL, method="POST", text=single_error_html)
    out = tmp_path / "reports" / "result.json"

    result = runner.invoke(app, [str(_xml_file(tmp_path)), "--json", "--output", str(out)])

    assert result.exit_code == 1
    assert "Validating XML" not in result.output
    saved = json.loads(out.read_text(encoding="utf-8"))
    assert saved["is_valid"] is False
    assert saved["doctype"] == "http://xml.cxml.org/schemas/cXML/1.2.015/cXML.dtd"
    assert json.loads(result.output) == saved


def test_network_failure_exits_with_error(httpx_mock, tmp_path: Path) -> None:
    httpx_mock.add_exception(httpx.ConnectError("Name or service not known"), url=W3C_URL)

    result = runner.invoke(app, [str(_xml_file(tmp_path))])

    assert result.exit_code == 1
    assert "ERROR: Could not reach https://validator.w3.org/check" in result.output


def test_transport_failure_exits_with_error(httpx_mock, tmp_path: Path) -> None:
    httpx_mock.add_response(url=W3C_URL, method="POST", status_code=503)

    result = runner.invoke(app, [str(_xml_file(tmp_path))])

    assert result.exit_code == 1
    assert "ERROR: The W3C server replied with a 503 status code." in result.output


def test_empty_stdin_is_rejected_without_request(httpx_mock) -> None:
    result = runner.invoke(app, [], input="")

    assert result.exit_code == 1
    assert "ERROR: The XML input is required" in result.output
    assert httpx_mock.get_requests() == []


def test_missing_file_is_a_usage_error(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "missing.xml")])

    assert result.exit_code == 2


@pytest.fixture
def captured_validation(monkeypatch) -> dict:
    """Replaces the pipeline call and records the keyword arguments it receives."""

    calls: dict = {}

    async def fake_validate_fragment(fragment, **kwargs):
        calls["fragment"] = fragment
        calls.update(kwargs)
        return ValidationResult(doctype="Foo.dtd")

    monkeypatch.setattr(cli.main, "validate_fragment", fake_validate_fragment)
    return calls


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_timeout_option_reaches_the_pipeline(captured_validation, tmp_path: Path) -> None:
    result = runner.invoke(app, [str(_xml_file(tmp_path)), "--timeout", "3.5"])

    assert result.exit_code == 0
    assert captured_validation["timeout_seconds"] == 3.5


def test_timeout_falls_back_to_settings(captured_validation, monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("W3C_XML_VALIDATOR_HTTP_TIMEOUT_SECONDS", "7.5")

    result = runner.invoke(app, [str(_xml_file(tmp_path))])

    assert result.exit_code == 0
    assert captured_validation["timeout_seconds"] == 7.5


def test_timeout_option_overrides_settings(captured_validation, monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("W3C_XML_VALIDATOR_HTTP_TIMEOUT_SECONDS", "7.5")

    runner.invoke(app, [str(_xml_file(tmp_path)), "--timeout", "2"])

    assert captured_validation["timeout_seconds"] == 2.0


def test_debug_env_var_enables_logging(captured_validation, monkeypatch, tmp_path: Path) -> None:
    seen: list[bool] = []
    monkeypatch.setattr(cli.main, "_configure_logging", seen.append)
    monkeypatch.setenv("W3C_XML_VALIDATOR_DEBUG", "1")

    runner.invoke(app, [str(_xml_file(tmp_path))])

    assert seen == [True]


def test_debug_traces_the_exchange_on_stderr(
    httpx_mock, monkeypatch, restore_root_logging, tmp_path: Path, success_html: str
) -> None:
    httpx_mock.add_response(url=W3C_URL, method="POST", text=success_html)
    monkeypatch.setattr(cli.main, "_err_console", Console(stderr=True, width=200))

    result = runner.invoke(app, [str(_xml_file(tmp_path)), "--debug"])

    assert result.exit_code == 0
    assert f"Submitting form to {W3C_URL}..." in result.output
    assert "Found doctype: http://xml.cxml.org/schemas/cXML/1.2.014/cXML.dtd" in result.output
