"""Exportación JSON del resultado de validación.

Por qué JSON:
- Interoperabilidad con CI y otras herramientas (la salida en prosa de la CLI
  es para humanos).
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ValidationResult


def result_to_json(result: ValidationResult) -> str:
    """Serializa `ValidationResult` con formato estable (incluye `is_valid`)."""

    payload = result.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def export_result_json(*, result: ValidationResult, output_path: Path) -> Path:
    """Exporta `ValidationResult` a un fichero JSON UTF-8."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result_to_json(result) + "\n", encoding="utf-8")
    return output_path
