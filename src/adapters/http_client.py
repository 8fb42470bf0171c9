"""Builder del `httpx.AsyncClient` usado como transporte.

Responsabilidad:
- Estandariza base URL, timeouts, headers y token para todos los facades.
- Acepta un `transport` inyectable (p.ej. `httpx.MockTransport` en tests).
"""

from __future__ import annotations

import httpx

from core.config import ClientSettings


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults del SDK.

    Timeouts and redirects are the transport's concern; the dispatcher adds no
    retry or timeout of its own.
    """

    settings = settings or ClientSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.api_token:
        headers["Authorization"] = f"Bearer {settings.api_token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
