"""Command-line interface for the W3C XML validator.

Reads XML from a file (or stdin when no path is given), submits it to the
W3C markup validation service and prints a human-readable report.

Exit codes:
- 0: the XML is valid.
- 1: the XML is invalid, or the validation could not be performed.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import export_result_json, result_to_json
from cli.ui_components import print_line, print_validation_report
from core.config import AppSettings
from core.domain.errors import ValidatorError
from core.services.validation_pipeline import validate_fragment

app = typer.Typer(
    add_completion=False,
    help="Validate an XML document against its DTD using the W3C markup validation service.",
)

_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _read_source(path: Path | None) -> tuple[str, bytes]:
    if path is None:
        return "Validating XML from stdin...", typer.get_binary_stream("stdin").read()
    resolved = path.resolve()
    return f'Validating XML from path "{resolved}"...', resolved.read_bytes()


@app.command()
def validate(
    path: Optional[Path] = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
        help="XML file to validate. Reads stdin when omitted.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the JSON result to this file."),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0.1, help="HTTP timeout in seconds."),
    debug: bool = typer.Option(False, "--debug", help="Trace the exchange with the W3C service on stderr."),
) -> None:
    """Validate XML from PATH (or stdin) against the DTD it references."""

    settings = AppSettings()
    _configure_logging(debug or settings.debug)

    try:
        status, source = _read_source(path)
        if not json_output:
            print_line(_console, status)

        result = asyncio.run(
            validate_fragment(
                source,
                timeout_seconds=timeout if timeout is not None else settings.http_timeout_seconds,
            )
        )
    except (ValidatorError, OSError) as exc:
        print_line(_err_console, f"ERROR: {exc}", style="bold red")
        raise typer.Exit(code=1) from exc

    if output is not None:
        export_result_json(result=result, output_path=output)

    if json_output:
        print_line(_console, result_to_json(result))
    else:
        print_validation_report(_console, result)

    if not result.is_valid:
        raise typer.Exit(code=1)


def run() -> None:
    app()
