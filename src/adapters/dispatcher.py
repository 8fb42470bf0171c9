"""Request Dispatcher: descriptor -> petición HTTP -> resultado tipado.

Flujo:
1. Resuelve la plantilla de ruta y serializa la query (errores síncronos,
   antes de tocar la red).
2. Adjunta el cuerpo JSON solo en POST/PUT/PATCH.
3. Envía por el `httpx.AsyncClient` inyectado.
4. Mapea: 2xx -> `ApiResponse`; no 2xx -> `HttpStatusError` (devuelto);
   fallo de red o de redirección -> `TransportError`; cancelación ->
   `RequestCancelledError`.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import httpx
from pydantic import BaseModel

from core.errors import HttpStatusError, RequestCancelledError, TransportError
from core.query import serialize_query
from core.request import ApiResponse, ApiResult, RequestDescriptor
from core.template import resolve_path

logger = logging.getLogger(__name__)


def encode_body(body: Any) -> Any:
    """JSON-ready form of a request body; pydantic payloads use wire aliases."""

    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, (list, tuple)):
        return [encode_body(item) for item in body]
    if isinstance(body, dict):
        return {key: encode_body(value) for key, value in body.items()}
    return body


def decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


class RequestDispatcher:
    """Executes `RequestDescriptor`s over a shared `httpx.AsyncClient`.

    The client is injected once and never mutated; the dispatcher keeps no
    per-call state, so concurrent `execute` calls are independent.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    def build_request(self, descriptor: RequestDescriptor) -> httpx.Request:
        path = resolve_path(descriptor.path_template, descriptor.url_params)
        params = serialize_query(descriptor.query)
        kwargs: dict[str, Any] = {}
        if params:
            kwargs["params"] = params
        if descriptor.method.sends_body and descriptor.body is not None:
            kwargs["json"] = encode_body(descriptor.body)
        return self._client.build_request(descriptor.method.value, path, **kwargs)

    async def execute(self, descriptor: RequestDescriptor) -> ApiResult[Any]:
        request = self.build_request(descriptor)
        method, url = request.method, str(request.url)
        logger.debug("%s %s", method, url)

        try:
            response = await self._client.send(request)
        except asyncio.CancelledError as exc:
            logger.debug("%s %s cancelled", method, url)
            raise RequestCancelledError(method, url) from exc
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        body = decode_body(response)
        headers = dict(response.headers)
        if not response.is_success:
            logger.warning("%s %s -> HTTP %s", method, url, response.status_code)
            return HttpStatusError(response.status_code, body, headers)

        logger.debug("%s %s -> HTTP %s", method, url, response.status_code)
        return ApiResponse(status_code=response.status_code, headers=headers, data=body)
