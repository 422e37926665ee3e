r"""Retry eligibility rules shared by the retry decider.

Only transient overload conditions are retried, and only for methods
that are safe to repeat.
"""

from __future__ import annotations

__all__ = ["is_retryable_method", "is_retryable_status"]

from cloudsdk.core.config import RETRY_METHODS, RETRY_STATUS_CODES


def is_retryable_status(status_code: int) -> bool:
    """Indicate if an HTTP status code is retryable.

    Args:
        status_code: The HTTP status code.

    Returns:
        ``True`` for 429, 502, 503 and 504, otherwise ``False``.

    Example:
        ```pycon
        >>> from cloudsdk.core.retry_logic import is_retryable_status
        >>> is_retryable_status(503)
        True
        >>> is_retryable_status(500)
        False

        ```
    """
    return status_code in RETRY_STATUS_CODES


def is_retryable_method(method: str) -> bool:
    """Indicate if an HTTP method is safe to retry automatically.

    Args:
        method: The upper-case HTTP method name.

    Returns:
        ``True`` for GET and HEAD, otherwise ``False``.

    Example:
        ```pycon
        >>> from cloudsdk.core.retry_logic import is_retryable_method
        >>> is_retryable_method("GET")
        True
        >>> is_retryable_method("POST")
        False

        ```
    """
    return method in RETRY_METHODS
