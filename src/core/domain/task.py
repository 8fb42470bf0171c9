"""Tareas (Pydantic v2).

Notas:
- Los actores (`created_by`, `responsible_id`, ...) son referencias por id;
  la tarea no contiene los registros de usuario/departamento.
- `child_tasks` reutiliza `Paginated[Task]`, el mismo contrato que el listado
  principal de tareas.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import Field

from core.domain.pagination import Paginated, WireModel


class TaskType(str, Enum):
    TASK = "task"
    RECURRING = "recurring"
    ONE_TIME = "one_time"


class Scheduler(WireModel):
    """Recurrence settings of a recurring task."""

    activation_limit: bool | None = None
    task_id: int | None = None
    active: bool | None = None
    period: Literal["day", "week", "month", "year"] | None = None
    every: int | None = Field(default=None, ge=1, description="Intervalo entre ejecuciones, en `period`.")
    day_of_week: int | None = None
    day_of_month: int | None = None
    week_of_month: int | None = None
    date_start: str | None = None
    date_stop: int | None = None
    hour_start: int | None = None
    deadline_day: int | None = None
    deadline_hour: int | None = None
    iteration: int | None = None
    next_run: int | None = Field(default=None, description="Próxima ejecución (epoch).")
    current_iteration: int | None = None
    timezone_offset: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CrmEntityRef(WireModel):
    id: int
    title: str


class Task(WireModel):
    id: str
    parent_id: int | None = None
    title: str | None = None
    body: str | None = None
    task_type: TaskType | None = None
    status: str | None = None
    priority: str | None = None
    kanban_stage_id: str | None = None

    deadline: int | None = None
    closed_date: int | None = None
    created_date: int | None = None

    created_by: str | None = None
    closed_by: str | None = None
    setter_id: str | int | None = None
    responsible_id: str | None = None
    accomplices_ids: list[str] = Field(default_factory=list)
    auditors_ids: list[str] = Field(default_factory=list)
    user_ids: list[str] = Field(default_factory=list)
    department_id: str | None = None
    group_id: str | None = None

    accept_result: bool = False
    required_result: bool = False
    result_comment_id: str | None = None
    fixed: bool = False
    archive: bool = False
    comments: list[dict[str, Any]] = Field(default_factory=list)
    files: list[dict[str, Any]] = Field(default_factory=list)
    file_ids: list[int] = Field(default_factory=list)
    time_estimate: int | None = None
    time_tracking: bool = False
    elapsed_times: dict[str, Any] | None = None

    template: bool | None = None
    template_id: int | None = None
    deadline_day: int | None = None
    deadline_hour: int | None = None
    active: bool | None = None
    sort: int | None = None
    delegation: bool | None = None

    scheduler: Scheduler | None = None
    crm_entities: dict[str, list[CrmEntityRef]] | None = None
    child_tasks: Paginated[Task] | None = None


class TaskCreate(WireModel):
    title: str = Field(..., min_length=1)
    body: str = ""
    task_type: TaskType = TaskType.TASK
    parent_id: int | None = None
    deadline: int | None = None
    responsible_id: str | None = None
    accomplices_ids: list[str] = Field(default_factory=list)
    auditors_ids: list[str] = Field(default_factory=list)
    priority: str | None = None
    group_id: str | None = None
    accept_result: bool = False
    time_tracking: bool = False
    time_estimate: int | None = None
    scheduler: Scheduler | None = None


class TaskUpdate(WireModel):
    title: str | None = None
    body: str | None = None
    status: str | None = None
    priority: str | None = None
    deadline: int | None = None
    responsible_id: str | None = None
    accomplices_ids: list[str] | None = None
    auditors_ids: list[str] | None = None
    group_id: str | None = None
    archive: bool | None = None
    scheduler: Scheduler | None = None


Task.model_rebuild()
