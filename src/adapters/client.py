"""Cliente agregado: un dispatcher compartido y un facade por recurso."""

from __future__ import annotations

from types import TracebackType

import httpx

from adapters.dispatcher import RequestDispatcher
from adapters.http_client import build_async_client
from adapters.services import DepartmentsService, EmailService, TasksService
from core.config import ClientSettings
from core.shapes import ShapeResolver


class CrmClient:
    """Entry point of the SDK.

    Usage::

        async with CrmClient() as crm:
            page = await crm.departments.get_departments(page=2, list_size=10)
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        self._owns_client = http_client is None
        self._http = http_client or build_async_client(self.settings, transport=transport)

        self.dispatcher = RequestDispatcher(self._http)
        shapes = ShapeResolver(strict=self.settings.strict_shapes)
        self.departments = DepartmentsService(self.dispatcher, shapes)
        self.email = EmailService(self.dispatcher, shapes)
        self.tasks = TasksService(self.dispatcher, shapes)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "CrmClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
