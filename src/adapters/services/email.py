"""Facade: email (`/email/v1`)."""

from __future__ import annotations

from typing import Any

from core.domain.email import EmailBox, EmailBoxConnect, EmailFolder, Letter, LetterCreate
from core.domain.filters import PageParams
from core.domain.pagination import Envelope, Paginated
from core.interfaces.executor import RequestExecutor
from core.query import coerce_filter
from core.request import ApiResult, HttpMethod, RequestDescriptor
from core.shapes import ShapeResolver, resolve_shape


class EmailService:
    namespace = "/email/v1"

    def __init__(self, executor: RequestExecutor, shapes: ShapeResolver | None = None) -> None:
        self._executor = executor
        self._shapes = shapes or ShapeResolver()

    async def get_email_boxes(self) -> ApiResult[Envelope[list[EmailBox]]]:
        result = await self._executor.execute(RequestDescriptor(HttpMethod.GET, f"{self.namespace}/emails"))
        return self._shapes.cast(result, Envelope[list[EmailBox]])

    async def connect_email_box(self, data: EmailBoxConnect) -> ApiResult[EmailBox]:
        """Attach a mailbox. The payload is sent wrapped as `{"data": ...}`."""

        result = await self._executor.execute(
            RequestDescriptor(HttpMethod.POST, f"{self.namespace}/emails", body={"data": data})
        )
        return self._shapes.cast(result, EmailBox)

    async def remove_email_box(self, id: int) -> ApiResult[Any]:
        return await self._executor.execute(
            RequestDescriptor(HttpMethod.DELETE, f"{self.namespace}/emails/:id", url_params={"id": id})
        )

    async def get_folders(self) -> ApiResult[Envelope[list[EmailFolder]]]:
        result = await self._executor.execute(RequestDescriptor(HttpMethod.GET, f"{self.namespace}/folders"))
        return self._shapes.cast(result, Envelope[list[EmailFolder]])

    async def get_letters(
        self,
        folder_id: int,
        page: int | None = None,
        list_size: int | None = None,
    ) -> ApiResult[Paginated[Letter]]:
        """One page of the letters stored in a folder."""

        query = coerce_filter({"page": page, "list": list_size}, PageParams)
        result = await self._executor.execute(
            RequestDescriptor(
                HttpMethod.GET,
                f"{self.namespace}/letters/by_folder/:id",
                url_params={"id": folder_id},
                query=query,
            )
        )
        return self._shapes.apply(result, resolve_shape(list_size), Letter)

    async def get_letter(self, id: int) -> ApiResult[Envelope[Letter]]:
        result = await self._executor.execute(
            RequestDescriptor(HttpMethod.GET, f"{self.namespace}/letters/:id", url_params={"id": id})
        )
        return self._shapes.cast(result, Envelope[Letter])

    async def create_letter(self, folder_id: int, data: LetterCreate) -> ApiResult[Letter]:
        result = await self._executor.execute(
            RequestDescriptor(
                HttpMethod.POST,
                f"{self.namespace}/letters/by_folder/:id",
                url_params={"id": folder_id},
                body=data,
            )
        )
        return self._shapes.cast(result, Letter)

    async def remove_letter(self, id: int) -> ApiResult[Any]:
        return await self._executor.execute(
            RequestDescriptor(HttpMethod.DELETE, f"{self.namespace}/letters/:id", url_params={"id": id})
        )
