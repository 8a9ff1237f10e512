"""Contrato de validadores XML.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La CLI depende de la abstracción; el validador W3C (o un doble de test)
  es intercambiable.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ValidationResult


@runtime_checkable
class XMLValidator(Protocol):
    """Contrato mínimo para un validador de fragmentos XML.

    Reglas de diseño:
    - `validate` es asíncrono porque típicamente hará I/O (HTTP).
    - Devuelve un `ValidationResult` completo o lanza un `ValidatorError`;
      nunca un resultado parcial.
    """

    async def validate(self, fragment: str | bytes) -> ValidationResult:
        """Valida `fragment` y devuelve el resultado normalizado."""

        ...
