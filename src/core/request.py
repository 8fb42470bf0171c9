"""Descriptor de petición y resultado de una ejecución.

`RequestDescriptor` es inmutable y se construye por llamada; nunca se persiste.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Mapping, TypeVar, Union

from core.domain.filters import FilterSpec
from core.errors import HttpStatusError

T = TypeVar("T")


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def sends_body(self) -> bool:
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)


@dataclass(frozen=True)
class RequestDescriptor:
    method: HttpMethod
    path_template: str
    url_params: Mapping[str, Any] = field(default_factory=dict)
    query: FilterSpec | None = None
    body: Any = None


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Successful (2xx) response: status, headers and the parsed body."""

    status_code: int
    headers: Mapping[str, str]
    data: T


ApiResult = Union[ApiResponse[T], HttpStatusError]
