"""Adaptador del validador de marcado W3C (validator.w3.org/check).

Por qué un paquete:
- Separa las tres piezas con riesgo distinto: serialización del formulario,
  transporte HTTP y extracción del HTML.
"""

from adapters.w3c.form_payload import (
    W3C_FORM_FIELDS,
    FormField,
    MultipartPayload,
    build_form_fields,
    build_multipart_payload,
    new_boundary,
)
from adapters.w3c.report_parser import (
    extract_doctype,
    extract_errors,
    extract_warnings,
    parse_document,
    parse_validation_report,
)
from adapters.w3c.transport import W3C_CHECK_URL, RawResponse, submit_payload

__all__ = [
    "FormField",
    "MultipartPayload",
    "RawResponse",
    "W3C_CHECK_URL",
    "W3C_FORM_FIELDS",
    "build_form_fields",
    "build_multipart_payload",
    "extract_doctype",
    "extract_errors",
    "extract_warnings",
    "new_boundary",
    "parse_document",
    "parse_validation_report",
    "submit_payload",
]
