r"""Error taxonomy shared by the dispatcher, the waiter and the resource
clients.

Every failure surfaced by the SDK is an ``SDKError`` (or one of its
variants) for HTTP calls, or a ``WaiterError`` for state polling. Two
``SDKError`` instances are considered the same kind of failure when their
``(status_code, error_code)`` pair matches; use ``errors_match`` for that
comparison instead of ``==``.
"""

from __future__ import annotations

__all__ = [
    "ErrorCategory",
    "HTTPStatusError",
    "NetworkError",
    "RequestCanceledError",
    "RequestTimeoutError",
    "SDKError",
    "TerminalStateError",
    "WaitTimeoutError",
    "WaiterError",
    "errors_match",
]

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    r"""Category discriminator stored in ``SDKError.meta["category"]``."""

    NETWORK = "network"
    TIMEOUT = "timeout"
    CANCELED = "canceled"


class SDKError(Exception):
    r"""Structured error raised for any failed SDK request.

    Args:
        status_code: The HTTP status code, or 0 for client-side errors.
        error_code: The API-specific error code, or 0 if absent.
        message: Human-readable error message.
        meta: Optional free-form metadata. The ``category`` key
            distinguishes network, timeout and canceled errors.
        cause: Optional underlying exception.

    Example:
        ```pycon
        >>> from cloudsdk.exceptions import SDKError
        >>> err = SDKError(status_code=400, error_code=1001, message="Invalid request")
        >>> str(err)
        'HTTP 400 (code 1001): Invalid request'
        >>> SDKError(message="failed to marshal request body").status_code
        0

        ```
    """

    def __init__(
        self,
        status_code: int = 0,
        error_code: int = 0,
        message: str = "",
        meta: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.meta = meta if meta is not None else {}
        self.cause = cause
        super().__init__(self._format())

    def _format(self) -> str:
        if self.status_code == 0:
            return f"SDK error: {self.message}"
        if self.error_code != 0:
            return f"HTTP {self.status_code} (code {self.error_code}): {self.message}"
        return f"HTTP {self.status_code}: {self.message}"

    @property
    def category(self) -> ErrorCategory | None:
        r"""The error category, or ``None`` for HTTP-level and local
        errors."""
        value = self.meta.get("category")
        try:
            return ErrorCategory(value)
        except ValueError:
            return None

    def same_kind(self, other: object) -> bool:
        r"""Indicate if ``other`` has the same status and error codes.

        Args:
            other: The object to compare with.

        Returns:
            ``True`` if ``other`` is an ``SDKError`` with the same
                ``(status_code, error_code)`` pair, otherwise ``False``.
        """
        return errors_match(self, other)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code}, "
            f"error_code={self.error_code}, message={self.message!r})"
        )


class NetworkError(SDKError):
    r"""Transport failure not caused by a timeout or a cancellation."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(
            message=f"network error: {message}",
            meta={"category": ErrorCategory.NETWORK.value},
            cause=cause,
        )


class RequestTimeoutError(SDKError):
    r"""The call deadline was exceeded."""

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__(
            message="request timeout",
            meta={"category": ErrorCategory.TIMEOUT.value},
            cause=cause,
        )


class RequestCanceledError(SDKError):
    r"""The call context was explicitly canceled."""

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__(
            message="request canceled",
            meta={"category": ErrorCategory.CANCELED.value},
            cause=cause,
        )


class HTTPStatusError(SDKError):
    r"""HTTP error response whose body is not a structured API error.

    The raw body text is kept in ``meta["raw"]``.
    """

    def __init__(self, status_code: int, raw_body: str) -> None:
        super().__init__(
            status_code=status_code,
            message=f"HTTP {status_code}",
            meta={"raw": raw_body},
        )

    @property
    def raw_body(self) -> str:
        return self.meta["raw"]


def errors_match(first: object, second: object) -> bool:
    r"""Indicate if two errors are the same kind of SDK failure.

    Only ``status_code`` and ``error_code`` are compared; messages,
    metadata and causes are ignored.

    Args:
        first: The first error.
        second: The second error.

    Returns:
        ``True`` if both are ``SDKError`` instances with the same
            ``(status_code, error_code)`` pair.

    Example:
        ```pycon
        >>> from cloudsdk.exceptions import SDKError, errors_match
        >>> errors_match(
        ...     SDKError(404, 2001, "project not found"),
        ...     SDKError(404, 2001, "no such project"),
        ... )
        True
        >>> errors_match(SDKError(404, 2001), SDKError(404, 2002))
        False

        ```
    """
    if not isinstance(first, SDKError) or not isinstance(second, SDKError):
        return False
    return (first.status_code, first.error_code) == (second.status_code, second.error_code)


class WaiterError(Exception):
    r"""Base class for errors raised while waiting on a resource state."""


class WaitTimeoutError(WaiterError):
    r"""The maximum wait duration elapsed before the target state was
    reached."""

    def __init__(self, max_wait: float) -> None:
        self.max_wait = max_wait
        super().__init__(f"wait timeout: maximum wait duration exceeded ({max_wait}s)")


class TerminalStateError(WaiterError):
    r"""A resource reached a failure status while waiting for another
    one."""

    def __init__(self, resource: str, resource_id: str, status: str, target: str) -> None:
        self.resource = resource
        self.resource_id = resource_id
        self.status = status
        self.target = target
        super().__init__(
            f"{resource} {resource_id} entered {status} state while waiting for {target}"
        )
