r"""Shared test helpers for the HTTP-level tests.

The helpers build ``httpx.AsyncClient`` instances backed by
``httpx.MockTransport``, so requests never leave the process.
"""

from __future__ import annotations

__all__ = [
    "BASE_URL",
    "NO_RETRY",
    "TOKEN",
    "ScriptedHandler",
    "json_response",
    "make_executor",
    "make_http_client",
]

import json
from typing import TYPE_CHECKING, Any

import httpx

from cloudsdk.backoff import ExponentialBackoff
from cloudsdk.retry import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

BASE_URL = "https://api.example.com"
TOKEN = "test-token"
NO_RETRY = ExponentialBackoff(max_retries=0, jitter=False)


def json_response(status_code: int, payload: Any = None) -> httpx.Response:
    """Create a response with a JSON body, or an empty body if
    ``payload`` is ``None``."""
    if payload is None:
        return httpx.Response(status_code)
    return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))


class ScriptedHandler:
    """MockTransport handler replaying a fixed sequence of outcomes.

    Each outcome is an ``httpx.Response`` or an exception to raise. The
    last outcome is repeated once the sequence is exhausted. Every
    received request is recorded.
    """

    def __init__(self, *outcomes: httpx.Response | Exception) -> None:
        self.outcomes = list(outcomes)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes[min(len(self.requests), len(self.outcomes)) - 1]
        if isinstance(outcome, Exception):
            raise outcome
        # A fresh response per request, since httpx binds a response to its request.
        return httpx.Response(
            outcome.status_code, headers=outcome.headers, content=outcome.content
        )

    @property
    def call_count(self) -> int:
        return len(self.requests)


def make_http_client(
    handler: Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]],
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` served by ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def make_executor(
    handler: Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]],
    service: str,
    **kwargs: Any,
) -> AsyncRetryExecutor:
    """Create a retry executor for ``<BASE_URL>/<service>`` served by
    ``handler``."""
    return AsyncRetryExecutor(
        f"{BASE_URL}/{service}", TOKEN, make_http_client(handler), **kwargs
    )
