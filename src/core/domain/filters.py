"""Filtros de listado (FilterSpec) y parámetros de paginación.

Cada campo lleva una categoría explícita de query:
- `Scalar`: un valor, una entrada.
- `Multi`: lista de valores, la misma clave repetida.
- `Range`: par `[inicio, fin]`, dos entradas `<clave>_from` / `<clave>_to`.

El orden declarado de los campos es el orden de serialización.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

ALL = "all"

ListSize = Union[int, Literal["all"]]
RangePair = tuple[Union[int, None], Union[int, None]]


class QueryKind(str, Enum):
    SCALAR = "scalar"
    MULTI = "multi"
    RANGE = "range"


class QueryField:
    """Annotated marker carrying the query kind of a FilterSpec field."""

    __slots__ = ("kind",)

    def __init__(self, kind: QueryKind) -> None:
        self.kind = kind

    def __repr__(self) -> str:
        return f"QueryField({self.kind.value})"


Scalar = QueryField(QueryKind.SCALAR)
Multi = QueryField(QueryKind.MULTI)
Range = QueryField(QueryKind.RANGE)


class FilterSpec(BaseModel):
    """Base for query-parameter models. Unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class PageParams(FilterSpec):
    page: Annotated[int | None, Scalar] = Field(default=None, ge=1)
    list_size: Annotated[ListSize | None, Scalar] = Field(
        default=None,
        alias="list",
        description="Page size, or 'all' to disable pagination.",
    )


class DepartmentListParams(PageParams):
    show: Annotated[Literal["all"] | None, Scalar] = Field(
        default=None,
        description="'all' includes inactive departments (admin or owner only).",
    )


class TaskListParams(PageParams):
    """Filters accepted by the task listing endpoint.

    Incluye los filtros del panel de tareas (etiquetas de tiempo, periodos,
    `createdBy`, ...) con sus nombres de wire como alias.
    """

    per_page: Annotated[int | None, Scalar] = Field(default=None, ge=1, alias="perPage")
    status: Annotated[list[str] | None, Multi] = None
    priority: Annotated[list[str] | None, Multi] = None
    setter_id: Annotated[list[int] | None, Multi] = None
    created_by: Annotated[list[int] | None, Multi] = Field(default=None, alias="createdBy")
    responsible: Annotated[list[int] | None, Multi] = None
    responsible_id: Annotated[list[int] | None, Multi] = None
    accomplices_ids: Annotated[list[int] | None, Multi] = None
    auditors_ids: Annotated[list[int] | None, Multi] = None
    accomplices: Annotated[list[int] | None, Multi] = None
    auditors: Annotated[list[int] | None, Multi] = None
    time_label: Annotated[list[str] | None, Multi] = None
    time_label_deadline: Annotated[list[str] | None, Multi] = None
    time_label_closed_date: Annotated[list[str] | None, Multi] = None
    time_label_created_date: Annotated[list[str] | None, Multi] = None
    certain_date_or_period: Annotated[list[int] | None, Multi] = Field(
        default=None, alias="certainDateOrPeriod"
    )
    certain_date_or_period_deadline: Annotated[list[int] | None, Multi] = Field(
        default=None, alias="certainDateOrPeriod_deadline"
    )
    certain_date_or_period_closed_date: Annotated[list[int] | None, Multi] = Field(
        default=None, alias="certainDateOrPeriod_closed_date"
    )
    certain_date_or_period_created_date: Annotated[list[int] | None, Multi] = Field(
        default=None, alias="certainDateOrPeriod_created_date"
    )
    # Cada periodo viaja como una entrada `period=<inicio>,<fin>`.
    period: Annotated[list[tuple[str, str]] | None, Multi] = None
    deadline: Annotated[RangePair | None, Range] = None
    closed_date: Annotated[RangePair | None, Range] = None
    created_date: Annotated[RangePair | None, Range] = None
    accept_result: Annotated[list[bool] | None, Multi] = None
    time_tracking: Annotated[list[bool] | None, Multi] = None
    closed_by: Annotated[list[int] | None, Multi] = None
    group_id: Annotated[list[int] | None, Multi] = None
    parent_id: Annotated[list[int] | None, Multi] = None
    search: Annotated[str | None, Scalar] = None
    q: Annotated[str | None, Scalar] = None
    template: Annotated[bool | int | None, Scalar] = None
    boolean_operator: Annotated[str | None, Scalar] = None
    use_search: Annotated[bool | None, Scalar] = None
    open_calendar: Annotated[bool | None, Scalar] = Field(default=None, alias="openCalendar")
    current_group: Annotated[int | None, Scalar] = Field(default=None, alias="groupId")
    child_list: Annotated[int | None, Scalar] = None
    child_page: Annotated[int | None, Scalar] = None
