"""Pytest configuration and fixtures for crmkit tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from adapters.client import CrmClient
from adapters.dispatcher import RequestDispatcher
from core.config import ClientSettings

BASE_URL = "https://crm.test/api/"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def json_responder(status: int = 200, body: Any = None) -> Handler:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=body)

    return _handler


def departments_page(page: int, per_page: int, total: int) -> dict[str, Any]:
    last_page = -(-total // per_page)
    start = (page - 1) * per_page + 1
    end = min(page * per_page, total)
    return {
        "data": [{"id": str(i), "name": f"Dept {i}", "usersIds": []} for i in range(start, end + 1)],
        "meta": {
            "currentPage": page,
            "from": start,
            "to": end,
            "perPage": per_page,
            "lastPage": last_page,
            "total": total,
        },
    }


@pytest.fixture
def settings() -> ClientSettings:
    """Settings isolated from any .env on the machine."""
    return ClientSettings(base_url=BASE_URL, _env_file=None)


@pytest.fixture
def make_transport() -> Callable[[Handler], RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def make_dispatcher() -> Callable[[httpx.MockTransport], RequestDispatcher]:
    def _make(transport: httpx.MockTransport) -> RequestDispatcher:
        return RequestDispatcher(httpx.AsyncClient(base_url=BASE_URL, transport=transport))

    return _make


@pytest.fixture
def make_client(settings: ClientSettings) -> Callable[..., CrmClient]:
    def _make(transport: httpx.MockTransport, **overrides: Any) -> CrmClient:
        effective = settings.model_copy(update=overrides) if overrides else settings
        return CrmClient(effective, transport=transport)

    return _make
