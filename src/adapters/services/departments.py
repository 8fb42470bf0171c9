"""Facade: departamentos (`company/v1/departments`)."""

from __future__ import annotations

import warnings
from typing import Any, Literal, overload

from core.domain.department import Department, DepartmentCreate, DepartmentUpdate
from core.domain.filters import DepartmentListParams, ListSize
from core.domain.pagination import Paginated
from core.interfaces.executor import RequestExecutor
from core.query import coerce_filter
from core.request import ApiResult, HttpMethod, RequestDescriptor
from core.shapes import ShapeResolver, resolve_shape


class DepartmentsService:
    namespace = "company/v1/departments"

    def __init__(self, executor: RequestExecutor, shapes: ShapeResolver | None = None) -> None:
        self._executor = executor
        self._shapes = shapes or ShapeResolver()

    @property
    def _item_path(self) -> str:
        return f"{self.namespace}/:id"

    @overload
    async def get_departments(
        self,
        page: int | None = None,
        *,
        list_size: Literal["all"],
        show: Literal["all"] | None = None,
    ) -> ApiResult[list[Department]]: ...

    @overload
    async def get_departments(
        self,
        page: int | None = None,
        list_size: int | None = None,
        show: Literal["all"] | None = None,
    ) -> ApiResult[Paginated[Department]]: ...

    async def get_departments(
        self,
        page: int | None = None,
        list_size: ListSize | None = None,
        show: Literal["all"] | None = None,
    ) -> ApiResult[Any]:
        """List departments.

        `list_size="all"` returns every department as a flat list; any other
        value returns one page. `show="all"` includes inactive departments
        (admin or owner only).
        """

        query = coerce_filter({"page": page, "list": list_size, "show": show}, DepartmentListParams)
        result = await self._executor.execute(RequestDescriptor(HttpMethod.GET, self.namespace, query=query))
        return self._shapes.apply(result, resolve_shape(list_size), Department)

    async def create_department(self, body: DepartmentCreate) -> ApiResult[Department]:
        result = await self._executor.execute(RequestDescriptor(HttpMethod.POST, self.namespace, body=body))
        return self._shapes.cast(result, Department)

    async def get_department(self, id: str) -> ApiResult[Department]:
        result = await self._executor.execute(
            RequestDescriptor(HttpMethod.GET, self._item_path, url_params={"id": id})
        )
        return self._shapes.cast(result, Department)

    async def update_department(self, id: str, body: DepartmentUpdate) -> ApiResult[Department]:
        """Set the head, move users or re-parent a department."""

        result = await self._executor.execute(
            RequestDescriptor(HttpMethod.PATCH, self._item_path, url_params={"id": id}, body=body)
        )
        return self._shapes.cast(result, Department)

    async def delete_department(self, id: str) -> ApiResult[Department]:
        result = await self._executor.execute(
            RequestDescriptor(HttpMethod.DELETE, self._item_path, url_params={"id": id})
        )
        return self._shapes.cast(result, Department)

    async def update_department_roles(self, id: str, roles: list[str]) -> ApiResult[Department]:
        """Deprecated: roles are no longer managed per department."""

        warnings.warn(
            "update_department_roles is deprecated",
            DeprecationWarning,
            stacklevel=2,
        )
        return await self._patch_users(f"{self._item_path}/updateRoles", id, roles)

    async def add_users(self, id: str, users: list[str]) -> ApiResult[Department]:
        return await self._patch_users(f"{self._item_path}/addUsers", id, users)

    async def delete_users(self, id: str, users: list[str]) -> ApiResult[Department]:
        return await self._patch_users(f"{self._item_path}/deleteUsers", id, users)

    async def _patch_users(self, template: str, id: str, values: list[str]) -> ApiResult[Department]:
        result = await self._executor.execute(
            RequestDescriptor(HttpMethod.PATCH, template, url_params={"id": id}, body=values)
        )
        return self._shapes.cast(result, Department)
