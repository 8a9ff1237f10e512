"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar el
  Core a librerías de I/O.
- Serialización estable (`model_dump`) para la salida JSON de la CLI.

Nota:
- Estos modelos describen *qué* reporta el validador, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict


class ValidationResult(BaseModel):
    """Resultado tipado de una validación remota.

    Reglas:
    - Inmutable una vez construido (`frozen`).
    - `is_valid` es derivado de `errors`; no se acepta como argumento.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    doctype: str = Field(
        ...,
        min_length=1,
        description="Identificador del DTD que el servicio asumió para el fragmento.",
    )
    warnings: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Advertencias en el orden del documento.",
    )
    errors: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Errores en el orden del documento ('Line N: mensaje').",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0
