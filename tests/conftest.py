"""Shared fixtures: a recording httpx transport and a fake request executor."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from drone_client import Client

SERVER = "https://drone.example.com"
TOKEN = "secret-token"


class Recorder:
    """Collects outgoing requests and answers them with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {}
        self.headers: dict[str, str] = {}
        self.handler: Callable[[httpx.Request], httpx.Response] | None = None

    def respond(self, status_code: int = 200, body: Any = None, headers: dict[str, str] | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body, headers=self.headers)
        if self.body is None:
            return httpx.Response(self.status_code, headers=self.headers)
        return httpx.Response(self.status_code, json=self.body, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class FakeExecutor:
    """RequestExecutor double that records calls instead of sending them."""

    def __init__(self, result: Any = None) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []
        self.result = result
        self.closed = False

    async def request(self, method: str, path: str, **kwargs: Any) -> Any:
        self.calls.append((method, path, kwargs))
        return self.result

    async def aclose(self) -> None:
        self.closed = True


def echo_json(request: httpx.Request) -> httpx.Response:
    """Answer with the JSON body that was sent."""

    return httpx.Response(200, json=json.loads(request.content))


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client(recorder: Recorder) -> Client:
    return Client({"url": SERVER, "token": TOKEN}, transport=httpx.MockTransport(recorder))


@pytest.fixture
def fake() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def fake_client(fake: FakeExecutor) -> Client:
    return Client({"url": SERVER, "token": TOKEN}, executor=fake)
