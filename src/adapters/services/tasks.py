"""Facade: tareas (`/task/v1/tasks`).

El listado admite dos contratos según `list`:
- `list_all_tasks`: `list="all"`, colección plana.
- `list_task_page`: una página (`Paginated[Task]`).
`get_tasks` decide en tiempo de ejecución y se tipa como la unión.
Los tres comparten `_list_request`.
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from core.domain.filters import ALL, TaskListParams
from core.domain.pagination import Paginated
from core.domain.task import Task, TaskCreate, TaskUpdate
from core.interfaces.executor import RequestExecutor
from core.query import coerce_filter
from core.request import ApiResult, HttpMethod, RequestDescriptor
from core.shapes import ResponseShape, ShapeResolver, resolve_shape

TaskFilters = Union[TaskListParams, Mapping[str, Any], None]


class TasksService:
    namespace = "/task/v1/tasks"

    def __init__(self, executor: RequestExecutor, shapes: ShapeResolver | None = None) -> None:
        self._executor = executor
        self._shapes = shapes or ShapeResolver()

    def _list_request(self, params: TaskListParams) -> RequestDescriptor:
        return RequestDescriptor(HttpMethod.GET, self.namespace, query=params)

    async def get_tasks(self, params: TaskFilters = None) -> ApiResult[Union[list[Task], Paginated[Task]]]:
        filters = coerce_filter(params, TaskListParams)
        shape = resolve_shape(filters.list_size)
        result = await self._executor.execute(self._list_request(filters))
        return self._shapes.apply(result, shape, Task)

    async def list_all_tasks(self, params: TaskFilters = None) -> ApiResult[list[Task]]:
        """Every task matching `params`, unpaginated (`list=all`)."""

        filters = coerce_filter(params, TaskListParams).model_copy(update={"list_size": ALL})
        result = await self._executor.execute(self._list_request(filters))
        return self._shapes.apply(result, ResponseShape.FLAT, Task)

    async def list_task_page(self, params: TaskFilters = None) -> ApiResult[Paginated[Task]]:
        """One page of tasks. A `list="all"` in `params` is dropped."""

        filters = coerce_filter(params, TaskListParams)
        if filters.list_size == ALL:
            filters = filters.model_copy(update={"list_size": None})
        result = await self._executor.execute(self._list_request(filters))
        return self._shapes.apply(result, ResponseShape.PAGINATED, Task)

    async def get_task(self, id: str) -> ApiResult[Task]:
        result = await self._executor.execute(
            RequestDescriptor(HttpMethod.GET, f"{self.namespace}/:id", url_params={"id": id})
        )
        return self._shapes.cast(result, Task)

    async def create_task(self, body: TaskCreate) -> ApiResult[Task]:
        result = await self._executor.execute(RequestDescriptor(HttpMethod.POST, self.namespace, body=body))
        return self._shapes.cast(result, Task)

    async def update_task(self, id: str, body: TaskUpdate) -> ApiResult[Task]:
        result = await self._executor.execute(
            RequestDescriptor(HttpMethod.PATCH, f"{self.namespace}/:id", url_params={"id": id}, body=body)
        )
        return self._shapes.cast(result, Task)

    async def delete_task(self, id: str) -> ApiResult[Any]:
        return await self._executor.execute(
            RequestDescriptor(HttpMethod.DELETE, f"{self.namespace}/:id", url_params={"id": id})
        )
