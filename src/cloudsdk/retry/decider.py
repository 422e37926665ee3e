r"""Retry decision logic for failed requests.

This module provides the RetryDecider class that decides whether a
failed request should be retried, based on the error, the request method
and the number of attempts already made.
"""

from __future__ import annotations

__all__ = ["MAX_RETRIES_REACHED", "RetryDecider"]

from typing import TYPE_CHECKING

from cloudsdk.core.retry_logic import is_retryable_method, is_retryable_status

if TYPE_CHECKING:
    from cloudsdk.backoff.base import BaseBackoffStrategy
    from cloudsdk.exceptions import SDKError

MAX_RETRIES_REACHED = "max retries reached"


class RetryDecider:
    """Decides whether a failed request should be retried.

    A request is retried only if its status code is transient (429, 502,
    503, 504), its method is safe to repeat (GET, HEAD), and the backoff
    strategy still allows another attempt. Client-side, network, timeout
    and cancellation errors carry status code 0 and are never retried.

    Args:
        backoff: The backoff strategy providing the retry budget.
    """

    def __init__(self, backoff: BaseBackoffStrategy) -> None:
        self.backoff = backoff

    def should_retry(self, error: SDKError, method: str, attempt: int) -> tuple[bool, str]:
        """Determine if an error should trigger a retry.

        Args:
            error: The error raised by the last attempt.
            method: The HTTP method of the request.
            attempt: The current attempt number (0-indexed).

        Returns:
            Tuple of (should_retry, reason).

        Example:
            ```pycon
            >>> from cloudsdk.backoff import ExponentialBackoff
            >>> from cloudsdk.exceptions import SDKError
            >>> from cloudsdk.retry.decider import RetryDecider
            >>> decider = RetryDecider(ExponentialBackoff(max_retries=1))
            >>> decider.should_retry(SDKError(503), "GET", 0)
            (True, 'status 503')
            >>> decider.should_retry(SDKError(503), "GET", 1)
            (False, 'max retries reached')
            >>> decider.should_retry(SDKError(503), "POST", 0)
            (False, 'method POST is not retryable')

            ```
        """
        if not is_retryable_status(error.status_code):
            return (False, f"status {error.status_code} is not retryable")
        if not is_retryable_method(method):
            return (False, f"method {method} is not retryable")
        if not self.backoff.should_retry(attempt):
            return (False, MAX_RETRIES_REACHED)
        return (True, f"status {error.status_code}")
