"""Departamentos y payloads de creación/actualización."""

from __future__ import annotations

from pydantic import Field

from core.domain.pagination import WireModel


class Department(WireModel):
    id: str = Field(..., description="Identificador del departamento.")
    name: str | None = Field(default=None, description="Nombre visible.")
    parent_id: str | None = Field(default=None, description="Departamento padre, si existe.")
    head_id: str | None = Field(default=None, description="Usuario responsable del departamento.")
    users_ids: list[str] = Field(default_factory=list, description="Usuarios asignados.")
    active: bool = Field(default=True, description="False para departamentos desactivados.")


class DepartmentCreate(WireModel):
    name: str = Field(..., min_length=1)
    parent_id: str | None = None
    head_id: str | None = None
    users_ids: list[str] = Field(default_factory=list)


class DepartmentUpdate(WireModel):
    """Set head department, move users or re-parent. Unset fields are not sent."""

    name: str | None = None
    parent_id: str | None = None
    head_id: str | None = None
    users_ids: list[str] | None = None
