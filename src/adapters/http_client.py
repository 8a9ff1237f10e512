"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y política de redirecciones.
- Facilita testeo: pytest-httpx intercepta cualquier cliente creado aquí.
"""

from __future__ import annotations

import httpx

from core.config import DEFAULT_TIMEOUT_SECONDS

USER_AGENT = "w3c-xml-validator/0.1 (python-httpx)"


def build_async_client(
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    extra_headers: dict[str, str] | None = None,
    follow_redirects: bool = False,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué no seguir redirecciones por defecto:
    - Un 3xx del validador es un fallo de transporte, no un resultado.
    """

    headers: dict[str, str] = {
        "User-Agent": USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        follow_redirects=follow_redirects,
        headers=headers,
    )
