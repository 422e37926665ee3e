r"""Backoff strategies and retry eligibility rules.

This package provides the exponential backoff used between retries of a
failed HTTP call, and the rules deciding which status codes and methods
are eligible for an automatic retry.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ExponentialBackoff",
    "is_retryable_method",
    "is_retryable_status",
]

from cloudsdk.backoff.base import BaseBackoffStrategy
from cloudsdk.backoff.exponential import ExponentialBackoff
from cloudsdk.core.retry_logic import is_retryable_method, is_retryable_status
