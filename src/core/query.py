"""Query Serializer: FilterSpec -> multi-map ordenado de parámetros.

Salida: `list[tuple[str, str]]`, apta para `httpx.QueryParams` y estable
byte a byte para el mismo filtro lógico.
"""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import parse_qs, urlencode

from pydantic import BaseModel, ValidationError

from core.domain.filters import FilterSpec, QueryField, QueryKind
from core.errors import QueryParamError

QueryPairs = list[tuple[str, str]]

RANGE_FROM_SUFFIX = "_from"
RANGE_TO_SUFFIX = "_to"


def _scalar_text(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise QueryParamError(f"query field {key!r} expects a scalar, got {type(value).__name__}")


def _item_text(key: str, item: Any) -> str:
    # Multi elements may be pairs (periods): `start,end`.
    if isinstance(item, (list, tuple)):
        if len(item) != 2:
            raise QueryParamError(f"query field {key!r} expects scalars or [start, end] pairs")
        return ",".join(_scalar_text(key, part) for part in item)
    return _scalar_text(key, item)


def _field_kind(field_info: Any) -> QueryKind:
    for meta in field_info.metadata:
        if isinstance(meta, QueryField):
            return meta.kind
    return QueryKind.SCALAR


def _encode_field(key: str, kind: QueryKind, value: Any) -> QueryPairs:
    if kind is QueryKind.SCALAR:
        return [(key, _scalar_text(key, value))]

    if kind is QueryKind.MULTI:
        if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
            raise QueryParamError(f"query field {key!r} expects a list of scalars")
        return [(key, _item_text(key, item)) for item in value if item is not None]

    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)) or len(value) != 2:
        raise QueryParamError(f"query field {key!r} expects a [start, end] pair")
    start, end = value
    pairs: QueryPairs = []
    if start is not None:
        pairs.append((f"{key}{RANGE_FROM_SUFFIX}", _scalar_text(key, start)))
    if end is not None:
        pairs.append((f"{key}{RANGE_TO_SUFFIX}", _scalar_text(key, end)))
    return pairs


def coerce_filter(data: FilterSpec | Mapping[str, Any] | None, spec: type[FilterSpec]) -> FilterSpec:
    """Validate `data` into a `spec` instance, failing fast on malformed fields."""

    if isinstance(data, spec):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True, exclude_none=True)
    try:
        return spec.model_validate(dict(data or {}))
    except ValidationError as exc:
        raise QueryParamError(f"invalid {spec.__name__}: {exc}") from exc


def serialize_query(
    data: FilterSpec | Mapping[str, Any] | None,
    *,
    spec: type[FilterSpec] | None = None,
) -> QueryPairs:
    """Serialize a FilterSpec into ordered `(key, value)` pairs.

    Fields are visited in the declared order of the FilterSpec class, so the
    insertion order of a caller-supplied mapping never changes the output.
    `None` values and unknown keys are omitted.
    """

    if spec is not None:
        data = coerce_filter(data, spec)
    elif data is None:
        return []
    elif not isinstance(data, FilterSpec):
        raise QueryParamError("a FilterSpec class is required to serialize a plain mapping")

    pairs: QueryPairs = []
    for name, field_info in type(data).model_fields.items():
        value = getattr(data, name)
        if value is None:
            continue
        key = field_info.alias or name
        pairs.extend(_encode_field(key, _field_kind(field_info), value))
    return pairs


def encode_query(pairs: QueryPairs) -> str:
    return urlencode(pairs)


def parse_query(text: str) -> dict[str, list[str]]:
    """Parse a query string back into `key -> [values]` (order preserved)."""

    return parse_qs(text.lstrip("?"), keep_blank_values=True)
