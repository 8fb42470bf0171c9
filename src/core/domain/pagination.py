"""Envolturas de respuesta genéricas (Pydantic v2).

- `Paginated[T]`: `{data: [...], meta: {...}}`, reutilizado a cualquier nivel
  de anidamiento (p.ej. `Task.child_tasks`).
- `Envelope[T]`: `{data: T, meta?}` sin contrato de paginación.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class WireModel(BaseModel):
    """Base for DTOs: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class PaginationMeta(WireModel):
    current_page: int = Field(..., ge=0, description="Página actual (1-based).")
    from_: int = Field(..., ge=0, alias="from", description="Índice del primer elemento de la página.")
    to: int = Field(..., ge=0, description="Índice del último elemento de la página.")
    per_page: int = Field(..., ge=0, description="Tamaño de página solicitado.")
    last_page: int = Field(..., ge=0, description="Última página disponible.")
    total: int = Field(..., ge=0, description="Total de elementos que cumplen el filtro.")

    @model_validator(mode="after")
    def _check_bounds(self) -> "PaginationMeta":
        if not self.from_ <= self.to <= self.total:
            raise ValueError(f"expected from <= to <= total, got {self.from_}, {self.to}, {self.total}")
        if self.current_page > self.last_page:
            raise ValueError(f"current_page {self.current_page} exceeds last_page {self.last_page}")
        return self


class Paginated(WireModel, Generic[T]):
    data: list[T] = Field(default_factory=list)
    meta: PaginationMeta

    @model_validator(mode="after")
    def _check_page_size(self) -> "Paginated[T]":
        if len(self.data) > self.meta.per_page:
            raise ValueError(f"page holds {len(self.data)} items, per_page is {self.meta.per_page}")
        return self


class Envelope(WireModel, Generic[T]):
    data: T
    meta: dict[str, Any] | None = None
