r"""Retry package implementing the SDK request dispatcher.

Public API:
    - RetryDecider: Logic for deciding whether to retry
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "RetryDecider"]

from cloudsdk.retry.decider import RetryDecider
from cloudsdk.retry.executor import AsyncRetryExecutor
