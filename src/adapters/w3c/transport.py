"""Cliente de transporte hacia el validador W3C.

Un único POST por llamada, sin reintentos. La política de reintentos (si se
desea) es responsabilidad del llamador.

Nota:
- Un status no-2xx no tiene nada que ver con la validez del XML: W3C usa los
  códigos HTTP correctamente, así que cualquier otro código es un fallo del
  transporte.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

import httpx

from adapters.http_client import build_async_client
from adapters.w3c.form_payload import MultipartPayload
from core.config import DEFAULT_TIMEOUT_SECONDS
from core.domain.errors import NetworkError, TransportError

logger = logging.getLogger(__name__)

W3C_CHECK_URL = "https://validator.w3.org/check"


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    body: str


async def submit_payload(
    payload: MultipartPayload,
    *,
    endpoint: str = W3C_CHECK_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    trace: Callable[[str], None] | None = None,
) -> RawResponse:
    """Envía `payload` al endpoint y devuelve status + cuerpo.

    Lanza:
    - `NetworkError` si no se alcanza el servidor (causa adjunta).
    - `TransportError` si el status no es 2xx.
    """

    def emit(message: str) -> None:
        logger.debug(message)
        if trace is not None:
            trace(message)

    emit(f"Submitting form to {endpoint}...")
    started = time.monotonic()

    try:
        async with build_async_client(timeout_seconds=timeout_seconds) as client:
            response = await client.post(
                endpoint,
                content=payload.body,
                headers={"Content-Type": payload.content_type},
            )
    except httpx.TransportError as exc:
        raise NetworkError(f"Could not reach {endpoint}: {type(exc).__name__}: {exc}", cause=exc) from exc

    body = response.text
    emit(f"Received response in {time.monotonic() - started:.2f} sec")
    emit(f"    code: {response.status_code}")
    emit(f"    length: {len(body)}")

    if not response.is_success:
        emit(f"    body: {body}")
        raise TransportError(response.status_code)

    return RawResponse(status_code=response.status_code, body=body)
