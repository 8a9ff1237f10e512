"""Taxonomía de errores del dominio.

Por qué una jerarquía propia:
- La CLI (u otro consumidor) distingue el tipo de fallo sin inspeccionar
  excepciones de httpx/bs4.
- Un código HTTP no-2xx nunca debe confundirse con "XML inválido".
"""

from __future__ import annotations


class ValidatorError(Exception):
    """Base de todos los fallos de validación remota."""


class InputError(ValidatorError):
    """El fragmento XML falta, está vacío o tiene un tipo no soportado."""


class NetworkError(ValidatorError):
    """No se pudo alcanzar el servicio (DNS, conexión rechazada, timeout)."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class TransportError(ValidatorError):
    """El servicio respondió con un status HTTP fuera del rango 2xx."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"The W3C server replied with a {status_code} status code.")
        self.status_code = status_code


class ParseError(ValidatorError):
    """El HTML devuelto no tiene la estructura esperada."""

    def __init__(self, expected: str) -> None:
        super().__init__(f"Unexpected W3C report layout: expected {expected}.")
        self.expected = expected
