r"""Core configuration, validation and retry eligibility rules."""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "RETRY_METHODS",
    "RETRY_STATUS_CODES",
    "ClientConfig",
    "is_retryable_method",
    "is_retryable_status",
    "validate_backoff_params",
    "validate_base_url",
    "validate_timeout",
    "validate_token",
    "validate_waiter_params",
]

from cloudsdk.core.config import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    RETRY_METHODS,
    RETRY_STATUS_CODES,
    ClientConfig,
)
from cloudsdk.core.retry_logic import is_retryable_method, is_retryable_status
from cloudsdk.core.validation import (
    validate_backoff_params,
    validate_base_url,
    validate_timeout,
    validate_token,
    validate_waiter_params,
)
