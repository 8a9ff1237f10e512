"""Guarda de entrada del pipeline.

Se ejecuta antes de crear cualquier cliente HTTP: un fragmento inválido no
debe generar tráfico de red.
"""

from __future__ import annotations

from core.domain.errors import InputError

INPUT_ERROR_MESSAGE = "The XML input is required and must be a non-empty string value (or bytes)."


def ensure_fragment(value: object) -> str | bytes:
    """Devuelve el fragmento listo para serializar o lanza `InputError`.

    Acepta `str` (codificable en UTF-8), `bytes` y `bytearray` (normalizado a
    `bytes`).
    """

    if isinstance(value, bytearray):
        value = bytes(value)
    if not isinstance(value, (str, bytes)):
        raise InputError(INPUT_ERROR_MESSAGE)
    if len(value) == 0:
        raise InputError(INPUT_ERROR_MESSAGE)
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InputError(f"The XML input is not encodable as UTF-8: {exc.reason}") from exc
    return value
