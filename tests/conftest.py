from __future__ import annotations

import asyncio
from typing import Callable, Sequence

import httpx
import pytest

from healthcheck.alerts.base import Alert, DeliveryResult
from healthcheck.stores.base import ConfigStoreError, MissingKeyError


class FakeConfigStore:
    def __init__(self, values: dict[str, list[str]] | None = None, error: Exception | None = None) -> None:
        self.values = dict(values or {})
        self.error = error
        self.reads: list[str] = []

    async def get(self, key: str) -> list[str]:
        self.reads.append(key)
        if self.error is not None:
            raise self.error
        if key not in self.values:
            raise MissingKeyError(key)
        return list(self.values[key])

    async def put(self, key: str, values: Sequence[str]) -> None:
        if self.error is not None:
            raise self.error
        self.values[key] = list(values)


class RecordingNotifier:
    def __init__(self, result: DeliveryResult | None = None) -> None:
        self.result = result or DeliveryResult(ok=True, detail="msg-1")
        self.sent: list[Alert] = []

    async def send(self, alert: Alert) -> DeliveryResult:
        self.sent.append(alert)
        return self.result


@pytest.fixture
def fake_store() -> Callable[..., FakeConfigStore]:
    return FakeConfigStore


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def store_error() -> ConfigStoreError:
    return ConfigStoreError("table unavailable")


@pytest.fixture(autouse=True)
def aws_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


def routing_transport(routes: dict[str, Callable[[httpx.Request], httpx.Response]]) -> httpx.MockTransport:
    """Dispatch requests by host; handlers may raise httpx errors."""

    async def handler(request: httpx.Request) -> httpx.Response:
        route = routes[request.url.host]
        result = route(request)
        if asyncio.iscoroutine(result):
            result = await result
        return result

    return httpx.MockTransport(handler)


def refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("[Errno 111] Connection refused", request=request)
