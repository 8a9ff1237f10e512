"""Configuración de la aplicación.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) en un único contrato.
- Solo la CLI instancia `AppSettings`; el pipeline recibe argumentos planos
  y no depende del entorno.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TIMEOUT_SECONDS = 20.0


class AppSettings(BaseSettings):
    """Configuración central de la CLI.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars / `.env`) sin ensuciar el Core.
    """

    model_config = SettingsConfigDict(
        env_prefix="W3C_XML_VALIDATOR_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout de la petición al validador W3C (segundos).",
    )
    debug: bool = Field(
        default=False,
        description="Activa el trazado de depuración (stderr).",
    )
