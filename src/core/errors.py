"""Error taxonomy for request building, dispatch and response shaping."""

from __future__ import annotations

import asyncio
from typing import Any


class CrmSdkError(Exception):
    """Base class for every error raised or returned by the SDK."""


class TemplateError(CrmSdkError):
    """A path template is malformed or left a placeholder unresolved."""


class MissingParameterError(TemplateError):
    """The template references an identifier absent from the parameters."""

    def __init__(self, name: str, template: str) -> None:
        super().__init__(f"missing URL parameter {name!r} for template {template!r}")
        self.name = name
        self.template = template

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.name, self.template)


class QueryParamError(CrmSdkError):
    """A filter field holds a value its query kind cannot encode."""


class TransportError(CrmSdkError):
    """Request-level failure (connect, timeout, redirect loop, decoding). Never retried here."""


class HttpStatusError(CrmSdkError):
    """Non-2xx response.

    Returned by the dispatcher rather than raised, so callers can branch on
    domain status codes (404, 422, ...). It is still an exception and may be
    raised by the caller.
    """

    def __init__(self, status: int, body: Any, headers: dict[str, str] | None = None) -> None:
        super().__init__(f"HTTP {status}")
        self.status = status
        self.body = body
        self.headers = headers or {}

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.status, self.body, self.headers)

    def __repr__(self) -> str:
        return f"HttpStatusError(status={self.status!r}, body={self.body!r})"


class ShapeMismatchError(CrmSdkError):
    """The response body does not match the expected flat/paginated shape."""

    def __init__(self, expected: str, body: Any, detail: str | None = None) -> None:
        message = f"expected a {expected} response"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.expected = expected
        self.body = body
        self.detail = detail

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.expected, self.body, self.detail)


class RequestCancelledError(asyncio.CancelledError):
    """The in-flight request was cancelled.

    Subclasses `asyncio.CancelledError` so task cancellation keeps working,
    while staying distinguishable from `TransportError`.
    """

    def __init__(self, method: str, url: str) -> None:
        super().__init__(f"{method} {url} cancelled")
        self.method = method
        self.url = url

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.method, self.url)
