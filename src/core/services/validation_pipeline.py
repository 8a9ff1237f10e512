"""XML validation orchestration.

This module wires the four stages of a remote validation together:

    input guard -> multipart payload -> HTTP transport -> report extraction

Each call is independent: a fresh HTTP client is opened and closed per call,
nothing is cached and no state is shared between calls. Tracing is exposed
through `PipelineHooks` so UI layers can observe progress without any global
debug switch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from adapters.w3c import (
    W3C_CHECK_URL,
    build_form_fields,
    build_multipart_payload,
    parse_validation_report,
    submit_payload,
)
from core.config import DEFAULT_TIMEOUT_SECONDS
from core.domain.models import ValidationResult
from core.interfaces.validator import XMLValidator
from core.services.input_guard import ensure_fragment

logger = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (debug tracing)."""

    trace: Callable[[str], None] | None = None


class W3CValidator(XMLValidator):
    """Validates XML fragments against the W3C markup validation service."""

    def __init__(
        self,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        endpoint: str = W3C_CHECK_URL,
        hooks: PipelineHooks | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._endpoint = endpoint
        self._hooks = hooks or PipelineHooks()

    async def validate(self, fragment: str | bytes) -> ValidationResult:
        xml = ensure_fragment(fragment)

        payload = build_multipart_payload(build_form_fields(xml))
        logger.debug("Built multipart payload (%d bytes, boundary=%s)", len(payload.body), payload.boundary)

        response = await submit_payload(
            payload,
            endpoint=self._endpoint,
            timeout_seconds=self._timeout_seconds,
            trace=self._hooks.trace,
        )
        return parse_validation_report(response.body, trace=self._hooks.trace)


async def validate_fragment(
    fragment: str | bytes,
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    hooks: PipelineHooks | None = None,
) -> ValidationResult:
    """Submit `fragment` to the W3C validator and return the typed result.

    Raises one of `InputError`, `NetworkError`, `TransportError` or
    `ParseError` (all `ValidatorError`); never returns a partial result.
    """

    validator = W3CValidator(timeout_seconds=timeout_seconds, hooks=hooks)
    return await validator.validate(fragment)
