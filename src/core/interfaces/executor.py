"""Contrato del ejecutor de peticiones que consumen los facades."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.request import ApiResult, RequestDescriptor


@runtime_checkable
class RequestExecutor(Protocol):
    """Executes one `RequestDescriptor` against the remote API.

    Reglas de diseño:
    - `execute` es asíncrono porque hace I/O (HTTP).
    - Los errores HTTP (no 2xx) se devuelven como `HttpStatusError`, no se lanzan.
    """

    async def execute(self, descriptor: RequestDescriptor) -> ApiResult[Any]:
        ...
