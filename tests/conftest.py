"""Shared fixtures for mixcore_sdk tests."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from mixcore_sdk import ClientConfig, HttpTransport, MixcoreClient, QueryBuilder

BASE_URL = "https://mixcore.test/api/v2"


class FakeBackend:
    """Routes ``(method, path)`` to canned responses and records requests."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.requests: list[httpx.Request] = []

    def on(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json_body: Any = None,
        text: str | None = None,
    ) -> None:
        if text is not None:
            response = httpx.Response(status, text=text)
        elif json_body is not None:
            response = httpx.Response(status, json=json_body)
        else:
            response = httpx.Response(status)
        self.routes[(method, "/api/v2" + path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, json={"code": "route_not_found"})
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def builder() -> QueryBuilder:
    return QueryBuilder()


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def http(backend: FakeBackend) -> HttpTransport:
    return HttpTransport(BASE_URL, transport=httpx.MockTransport(backend.handler))


@pytest.fixture
def client(backend: FakeBackend) -> MixcoreClient:
    return MixcoreClient(
        ClientConfig(endpoint=BASE_URL),
        http_transport=httpx.MockTransport(backend.handler),
    )
