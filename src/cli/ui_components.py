"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica del comando con detalles de presentación.
- Las líneas se imprimen con `soft_wrap` para que la salida sea estable en
  pipes y tests (sin cortes a 80 columnas).
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.domain.models import ValidationResult


def print_line(console: Console, message: str = "", *, style: str | None = None) -> None:
    """Imprime una línea literal (sin interpretar markup de Rich)."""

    console.print(Text(message, style=style or ""), soft_wrap=True)


def _print_warnings(console: Console, heading: str, warnings: tuple[str, ...]) -> None:
    if not warnings:
        return
    print_line(console)
    print_line(console, heading)
    for msg in warnings:
        print_line(console, f"  - {msg}", style="yellow")


def print_validation_report(console: Console, result: ValidationResult) -> None:
    """Presenta el `ValidationResult` en prosa para humanos."""

    print_line(console)

    if result.is_valid:
        print_line(
            console,
            "Congratulations, the provided XML is well-formed and valid, "
            f'according to the DTD at "{result.doctype}"',
            style="green",
        )
        _print_warnings(console, "However, please note the following warnings:", result.warnings)
        return

    print_line(
        console,
        f'Unfortunately, the provided XML does not validate according to the DTD at "{result.doctype}"',
        style="red",
    )
    print_line(console)
    print_line(console, "The following errors were reported:")
    for msg in result.errors:
        print_line(console, f"  ✘ {msg}", style="red")

    _print_warnings(console, "Also, please note the following warnings:", result.warnings)
