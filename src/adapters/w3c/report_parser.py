"""Extracción del reporte HTML del validador W3C.

El servicio no ofrece una salida legible por máquina para entradas directas,
así que este módulo navega el HTML por ids estables y posiciones fijas de
nodos hijos. Todo acoplamiento a la forma de la página vive aquí.

Esquema de nodos esperados (posiciones sobre `Tag.contents`, contando nodos
de texto y omitiendo comentarios):

- `#results_container` > [4] > [0]: frase con el DOCTYPE asumido, p.ej.
  "This document was successfully checked as http://.../cXML.dtd!".
- `#warnings` > cada elemento `li` > [0] > [2]: texto de la advertencia
  (`<p><span class="err_type">..</span> <span class="msg">..</span></p>`).
- `#error_loop` > cada `li.msg_err` > [3]: "Line N, Column M"; > [5]: mensaje.
  Si `#error_loop` no existe no hay errores (caso válido normal).

Cualquier otro nodo ausente es un `ParseError`: nunca devolvemos datos vacíos
o incorrectos ante un cambio de layout.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from bs4 import BeautifulSoup, Comment, Tag
from bs4.element import PageElement

from core.domain.errors import ParseError
from core.domain.models import ValidationResult

logger = logging.getLogger(__name__)

RESULTS_CONTAINER_ID = "results_container"
WARNINGS_ID = "warnings"
ERROR_LOOP_ID = "error_loop"
ERROR_CLASS = "msg_err"

DOCTYPE_HEADING_PATH: tuple[int, ...] = (4, 0)
WARNING_MESSAGE_PATH: tuple[int, ...] = (0, 2)
ERROR_LINE_PATH: tuple[int, ...] = (3,)
ERROR_MESSAGE_PATH: tuple[int, ...] = (5,)

_WHITESPACE = re.compile(r"\s+")
_DIGITS = re.compile(r"\d+")


def parse_document(html: str) -> BeautifulSoup:
    # html.parser conserva los nodos de texto con espacios: las posiciones son estables.
    return BeautifulSoup(html, "html.parser")


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def _child_nodes(node: PageElement) -> list[PageElement]:
    if not isinstance(node, Tag):
        return []
    return [c for c in node.contents if not isinstance(c, Comment)]


def _element_children(node: Tag) -> list[Tag]:
    return [c for c in node.contents if isinstance(c, Tag)]


def _text_of(node: PageElement) -> str:
    if isinstance(node, Tag):
        return node.get_text()
    return str(node)


def _require_container(document: BeautifulSoup, element_id: str) -> Tag:
    node = document.find(id=element_id)
    if not isinstance(node, Tag):
        raise ParseError(f"an element with id '{element_id}'")
    return node


def _node_at(root: Tag, path: tuple[int, ...], what: str) -> PageElement:
    """Devuelve el nodo en `path` bajo `root` o lanza `ParseError` describiendo `what`."""

    node: PageElement = root
    for depth, index in enumerate(path):
        children = _child_nodes(node)
        if index >= len(children):
            step = "/".join(str(i) for i in path[: depth + 1])
            raise ParseError(f"{what} at child path {step} under <{root.name}>")
        node = children[index]
    return node


def extract_doctype(document: BeautifulSoup) -> str:
    container = _require_container(document, RESULTS_CONTAINER_ID)
    sentence = _collapse(_text_of(_node_at(container, DOCTYPE_HEADING_PATH, "the doctype sentence")))
    if sentence.endswith("!"):
        sentence = sentence[:-1]

    doctype = sentence[sentence.rfind(" ") + 1 :]
    if not doctype:
        raise ParseError("a doctype token at the end of the results heading")
    return doctype


def extract_warnings(document: BeautifulSoup) -> list[str]:
    container = _require_container(document, WARNINGS_ID)
    return [
        _text_of(_node_at(item, WARNING_MESSAGE_PATH, "a warning message"))
        for item in _element_children(container)
    ]


def extract_errors(document: BeautifulSoup) -> list[str]:
    container = document.find(id=ERROR_LOOP_ID)
    if container is None:
        return []
    if not isinstance(container, Tag):
        raise ParseError(f"an element with id '{ERROR_LOOP_ID}'")

    errors: list[str] = []
    for item in _element_children(container):
        if ERROR_CLASS not in item.get_attribute_list("class"):
            continue

        location = _text_of(_node_at(item, ERROR_LINE_PATH, "an error location"))
        message = _text_of(_node_at(item, ERROR_MESSAGE_PATH, "an error message"))

        line = _DIGITS.search(location.split(",", 1)[0])
        if line is None:
            raise ParseError(f"a line number before the comma in {location.strip()!r}")
        errors.append(f"Line {line.group(0)}: {_collapse(message)}")
    return errors


def parse_validation_report(
    html: str,
    *,
    trace: Callable[[str], None] | None = None,
) -> ValidationResult:
    """Convierte el HTML de `/check` en un `ValidationResult`.

    Función pura del cuerpo: el mismo HTML produce siempre el mismo resultado.
    """

    def emit(message: str) -> None:
        logger.debug(message)
        if trace is not None:
            trace(message)

    document = parse_document(html)

    doctype = extract_doctype(document)
    emit(f"Found doctype: {doctype}")

    warnings = extract_warnings(document)
    for warning in warnings:
        emit(f"Found warning: {warning}")

    errors = extract_errors(document)
    for error in errors:
        emit(f"Found error: {error}")

    return ValidationResult(doctype=doctype, warnings=tuple(warnings), errors=tuple(errors))
