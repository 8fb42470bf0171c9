"""Response Shape Resolver.

El argumento `list` decide el contrato de respuesta:
- `"all"` -> colección plana (`list[T]`), sin `meta`.
- cualquier otro valor (incluido `None`) -> `Paginated[T]`.

La petición es la misma en ambos casos; solo cambia cómo se tipa el cuerpo.
Si el servidor devuelve una forma distinta a la esperada:
- modo estricto: `ShapeMismatchError`.
- modo permisivo (por defecto): se registra un warning y se devuelve el cuerpo
  sin tocar.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from core.domain.filters import ALL
from core.domain.pagination import Paginated
from core.errors import HttpStatusError, ShapeMismatchError
from core.request import ApiResponse, ApiResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResponseShape(str, Enum):
    FLAT = "flat"
    PAGINATED = "paginated"


def resolve_shape(list_size: Any) -> ResponseShape:
    """`"all"` disables pagination; everything else is paginated."""

    return ResponseShape.FLAT if list_size == ALL else ResponseShape.PAGINATED


def expected_type(shape: ResponseShape, item_type: Any) -> Any:
    if shape is ResponseShape.FLAT:
        return list[item_type]
    return Paginated[item_type]


class ShapeResolver:
    """Casts response bodies into the shape their request asked for."""

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def apply(self, result: ApiResult[Any], shape: ResponseShape, item_type: Any) -> ApiResult[Any]:
        """Type a list response as flat or paginated according to `shape`."""

        return self.cast(result, expected_type(shape, item_type), label=shape.value)

    def cast(self, result: ApiResult[Any], target: Any, *, label: str | None = None) -> ApiResult[Any]:
        """Validate `result.data` against `target`; error results pass through."""

        if isinstance(result, HttpStatusError):
            return result

        label = label or getattr(target, "__name__", str(target))
        try:
            data = TypeAdapter(target).validate_python(result.data)
        except ValidationError as exc:
            if self.strict:
                raise ShapeMismatchError(label, result.data, detail=str(exc)) from exc
            logger.warning("Response body does not match the %s shape; returning it unchanged", label)
            return result
        return replace(result, data=data)
