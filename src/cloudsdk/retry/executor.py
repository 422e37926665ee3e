r"""Asynchronous retry executor for SDK requests.

This module provides the AsyncRetryExecutor class that sends one logical
request to the API, retrying transient failures of idempotent requests
with exponential backoff, and translating every failure into an
``SDKError``.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import logging
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from cloudsdk.backoff.exponential import ExponentialBackoff
from cloudsdk.context import Canceled, Context, ContextError, DeadlineExceeded
from cloudsdk.core.config import DEFAULT_TIMEOUT
from cloudsdk.core.validation import validate_timeout
from cloudsdk.exceptions import (
    NetworkError,
    RequestCanceledError,
    RequestTimeoutError,
    SDKError,
)
from cloudsdk.request import encode_body
from cloudsdk.retry.decider import MAX_RETRIES_REACHED, RetryDecider
from cloudsdk.utils.response import decode_body, parse_error_response
from cloudsdk.utils.structured_logging import NullLogger

if TYPE_CHECKING:
    from collections.abc import Callable

    from cloudsdk.backoff.base import BaseBackoffStrategy
    from cloudsdk.request import Request
    from cloudsdk.utils.structured_logging import Logger

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes SDK requests with automatic retry logic.

    The executor is bound to one API base URL and bearer token. It holds
    no per-call state, so a single instance can serve concurrent calls.

    Args:
        base_url: The base URL prepended to every request path.
        token: The static bearer token sent in the ``Authorization`` header.
        client: The ``httpx.AsyncClient`` used as transport.
        backoff: Optional backoff strategy. Defaults to
            ``ExponentialBackoff()`` (0.1s initial, 5s cap, x2, 3 retries,
            jitter on).
        timeout: Timeout in seconds applied to a call whose context has no
            deadline. Covers all attempts and backoff sleeps.
        logger: Optional logger collaborator for retry diagnostics.
            Defaults to ``NullLogger()``.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from cloudsdk.request import Request
        >>> from cloudsdk.retry import AsyncRetryExecutor
        >>> async def main():
        ...     async with httpx.AsyncClient() as client:
        ...         executor = AsyncRetryExecutor("https://api.example.com/iam", "token", client)
        ...         return await executor.execute(Request("GET", "/api/v1/projects"))
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        client: httpx.AsyncClient,
        *,
        backoff: BaseBackoffStrategy | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        logger: Logger | None = None,
    ) -> None:
        validate_timeout(timeout)
        self.base_url = base_url
        self._token = token
        self._client = client
        self.backoff = backoff if backoff is not None else ExponentialBackoff()
        self.decider = RetryDecider(self.backoff)
        self.timeout = timeout
        self.logger = logger if logger is not None else NullLogger()

    async def execute(
        self,
        request: Request,
        *,
        ctx: Context | None = None,
        decoder: Callable[[Any], T] | None = None,
    ) -> T | Any:
        """Execute a request with automatic retry logic.

        The request is attempted once, then retried while the failure is
        a retryable status (429, 502, 503, 504) on an idempotent method
        (GET, HEAD) and the backoff strategy allows it. Each backoff
        sleep is preempted by context cancellation.

        Args:
            request: The request to send.
            ctx: Optional caller context. If it has no deadline, the
                executor timeout is applied to this call.
            decoder: Optional function converting the decoded JSON body
                into the caller's result type. It is not called for an
                empty body.

        Returns:
            The decoded body (passed through ``decoder`` if given), or
                ``None`` if the response body is empty.

        Raises:
            SDKError: If the request fails. Network, timeout and
                cancellation failures are raised as ``NetworkError``,
                ``RequestTimeoutError`` and ``RequestCanceledError``.
        """
        if ctx is None:
            ctx = Context.background()
        call_ctx = ctx if ctx.deadline is not None else ctx.with_timeout(self.timeout)

        try:
            attempt = 0
            while True:
                try:
                    status_code, body = await self._send(call_ctx, request)
                except SDKError as exc:
                    should_retry, reason = self.decider.should_retry(exc, request.method, attempt)
                    if not should_retry:
                        if reason == MAX_RETRIES_REACHED:
                            self.logger.debug(
                                "max retries reached",
                                method=request.method,
                                path=request.path,
                                attempts=attempt + 1,
                            )
                        raise
                    delay = self.backoff.duration(attempt)
                    self.logger.debug(
                        "retrying request",
                        method=request.method,
                        path=request.path,
                        attempt=attempt + 1,
                        backoff=delay,
                        reason=reason,
                    )
                    await self._backoff(call_ctx, delay)
                    attempt += 1
                    continue

                if body is None or decoder is None:
                    return body
                return _decode(decoder, status_code, body)
        finally:
            if call_ctx is not ctx:
                call_ctx.cancel()

    async def _backoff(self, ctx: Context, delay: float) -> None:
        try:
            await ctx.sleep(delay)
        except Canceled as exc:
            raise RequestCanceledError(cause=exc) from exc
        except DeadlineExceeded as exc:
            raise RequestTimeoutError(cause=exc) from exc

    def _headers(self, request: Request) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        headers.update(request.headers)
        return headers

    async def _send(self, ctx: Context, request: Request) -> tuple[int, Any]:
        """Send one attempt of ``request``.

        Returns:
            The response status code and the decoded JSON body, or
                ``None`` for an empty body.

        Raises:
            SDKError: If the attempt fails.
        """
        try:
            content = encode_body(request.body)
        except (TypeError, ValueError) as exc:
            raise SDKError(message="failed to marshal request body", cause=exc) from exc

        try:
            http_request = self._client.build_request(
                request.method,
                self.base_url + request.path,
                content=content,
                headers=self._headers(request),
            )
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise SDKError(message="failed to create request", cause=exc) from exc

        try:
            response = await ctx.run(self._client.send(http_request))
        except ContextError as exc:
            raise _context_error(exc) from exc
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(cause=exc) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(str(exc) or type(exc).__name__, cause=exc) from exc

        logger.debug(
            f"{request.method} {request.path} returned status {response.status_code}"
        )
        if response.status_code >= 400:
            raise parse_error_response(response.status_code, response.content)
        return response.status_code, decode_body(response.status_code, response.content)


def _context_error(exc: ContextError) -> SDKError:
    if isinstance(exc, Canceled):
        return RequestCanceledError(cause=exc)
    return RequestTimeoutError(cause=exc)


def _decode(decoder: Callable[[Any], T], status_code: int, body: Any) -> T:
    # A payload of the wrong shape fails like unparsable JSON.
    try:
        return decoder(body)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise SDKError(
            status_code=status_code, message="failed to parse response", cause=exc
        ) from exc
