"""Construcción del cuerpo multipart/form-data (RFC 2046).

Los cinco campos se determinaron empíricamente a partir de un envío manual
del formulario "Validate by Direct Input" con un navegador.

Por qué una lista ordenada explícita:
- El orden de los campos en el cable es parte del contrato testeable, no un
  accidente de iteración de un dict.
"""

from __future__ import annotations

import secrets
import time
from dataclasses import dataclass
from typing import Iterable

CRLF = b"\r\n"

# (name, value) en el orden en que se envían, detrás de `fragment`.
W3C_FORM_FIELDS: tuple[tuple[str, str], ...] = (
    ("prefill", "0"),
    ("doctype", "Inline"),
    ("prefill_doctype", "html401"),
    ("group", "0"),
)


@dataclass(frozen=True)
class FormField:
    name: str
    value: bytes


@dataclass(frozen=True)
class MultipartPayload:
    boundary: str
    body: bytes

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"


def new_boundary() -> str:
    """Genera un boundary único por llamada (reloj + sufijo aleatorio)."""

    return f"--------------------------{time.time_ns():x}{secrets.token_hex(6)}"


def build_form_fields(fragment: str | bytes) -> list[FormField]:
    """`fragment` primero y luego los campos fijos de `W3C_FORM_FIELDS`."""

    data = fragment.encode("utf-8") if isinstance(fragment, str) else fragment
    fields = [FormField(name="fragment", value=data)]
    fields.extend(FormField(name=name, value=value.encode("ascii")) for name, value in W3C_FORM_FIELDS)
    return fields


def _collides(boundary: str, fields: list[FormField]) -> bool:
    marker = boundary.encode("ascii")
    return any(marker in f.value for f in fields)


def build_multipart_payload(
    fields: Iterable[FormField],
    *,
    boundary: str | None = None,
) -> MultipartPayload:
    """Serializa `fields` en un cuerpo multipart.

    Si el boundary generado aparece dentro de algún valor se genera otro; un
    boundary explícito que colisiona es un error del llamador (`ValueError`).
    """

    fields = list(fields)
    if boundary is None:
        boundary = new_boundary()
        while _collides(boundary, fields):
            boundary = new_boundary()
    elif _collides(boundary, fields):
        raise ValueError(f"Boundary {boundary!r} occurs inside a field value")

    marker = b"--" + boundary.encode("ascii")
    parts: list[bytes] = []
    for f in fields:
        parts.append(marker + CRLF)
        parts.append(f'Content-Disposition: form-data; name="{f.name}"'.encode("ascii") + CRLF)
        parts.append(CRLF)
        parts.append(f.value + CRLF)
    parts.append(marker + b"--" + CRLF)

    return MultipartPayload(boundary=boundary, body=b"".join(parts))
