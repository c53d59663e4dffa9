from __future__ import annotations

import asyncio
import socket
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Union

import httpx

DEFAULT_TIMEOUT_MS = 10_000


@dataclass(frozen=True)
class ProbeSuccess:
    endpoint: str
    status_code: int
    elapsed_ms: int
    started_at: datetime


@dataclass(frozen=True)
class HttpFailure:
    endpoint: str
    status_code: int
    elapsed_ms: int
    started_at: datetime


@dataclass(frozen=True)
class TransportFailure:
    endpoint: str
    error_kind: str
    error: str
    elapsed_ms: int
    started_at: datetime


ProbeOutcome = Union[ProbeSuccess, HttpFailure, TransportFailure]


class Prober:
    """Single-endpoint GET probe over a shared, pooled client.

    The client is owned by the caller and may be used by many probes at once.
    Redirects are never followed, so a 3xx answer is classified as a failure.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def probe(self, endpoint: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> ProbeOutcome:
        if not endpoint:
            raise ValueError("endpoint must be a non-empty string")

        timeout_seconds = timeout_ms / 1000
        started_at = datetime.now(timezone.utc)
        loop = asyncio.get_running_loop()
        started = loop.time()

        try:
            # httpx timeouts apply per phase; wait_for bounds the whole request
            response = await asyncio.wait_for(
                self._client.get(endpoint, timeout=timeout_seconds, follow_redirects=False),
                timeout=timeout_seconds,
            )
        except Exception as exc:
            # httpx errors, invalid URLs and the outer deadline all mean no response
            return _transport_failure(endpoint, exc, _elapsed_ms(loop, started), started_at)

        elapsed_ms = _elapsed_ms(loop, started)
        if response.is_success:
            return ProbeSuccess(
                endpoint=endpoint,
                status_code=response.status_code,
                elapsed_ms=elapsed_ms,
                started_at=started_at,
            )
        return HttpFailure(
            endpoint=endpoint,
            status_code=response.status_code,
            elapsed_ms=elapsed_ms,
            started_at=started_at,
        )


def _elapsed_ms(loop: asyncio.AbstractEventLoop, started: float) -> int:
    return int((loop.time() - started) * 1000)


def _transport_failure(
    endpoint: str, exc: BaseException, elapsed_ms: int, started_at: datetime
) -> TransportFailure:
    return TransportFailure(
        endpoint=endpoint,
        error_kind=_normalize_error(exc),
        error=_describe_error(exc),
        elapsed_ms=elapsed_ms,
        started_at=started_at,
    )


def _normalize_error(exc: BaseException) -> str:
    if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError)):
        return "timeout"
    if isinstance(exc, httpx.ConnectError):
        if isinstance(exc.__context__, socket.gaierror):
            return "dns_error"
        return "connect_error"
    if isinstance(exc, httpx.InvalidURL):
        return "invalid_url"
    return exc.__class__.__name__.lower()


def _describe_error(exc: BaseException) -> str:
    message = str(exc)
    if not message:
        return exc.__class__.__name__
    return f"{exc.__class__.__name__}: {message}"
