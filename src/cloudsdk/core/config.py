r"""Configuration dataclass and defaults for the SDK client.

This module provides configuration constants shared by the retry
executor and the waiter, and the ``ClientConfig`` dataclass consumed by
``CloudClient``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_INITIAL_INTERVAL",
    "DEFAULT_MAX_INTERVAL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_MULTIPLIER",
    "DEFAULT_TIMEOUT",
    "RETRY_METHODS",
    "RETRY_STATUS_CODES",
    "ClientConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from cloudsdk.core.validation import validate_timeout

if TYPE_CHECKING:
    from cloudsdk.backoff.base import BaseBackoffStrategy
    from cloudsdk.utils.structured_logging import Logger


# Default timeout in seconds for a single logical call (all attempts
# and backoff sleeps included) when the caller context has no deadline
DEFAULT_TIMEOUT = 30.0

# Default exponential backoff between retries
# Wait time = initial_interval * (multiplier ** attempt), capped at max_interval
# With the defaults: 0.1s, 0.2s, 0.4s (each +/-25% when jitter is enabled)
DEFAULT_INITIAL_INTERVAL = 0.1
DEFAULT_MAX_INTERVAL = 5.0
DEFAULT_MULTIPLIER = 2.0

# Default maximum number of retry attempts
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# HTTP status codes that can trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 502, 503, 504)

# HTTP methods safe to repeat without duplicating side effects
RETRY_METHODS = ("GET", "HEAD")


@dataclass
class ClientConfig:
    """Configuration for ``CloudClient``.

    Args:
        timeout: Default timeout in seconds applied to a call when the
            caller context has no deadline. Must be > 0.
        backoff: Optional backoff strategy shared by every request. If
            ``None``, the default ``ExponentialBackoff`` is used.
        logger: Optional logger collaborator for retry diagnostics. If
            ``None``, the client logs through the ``cloudsdk`` stdlib
            logger.

    Example:
        ```pycon
        >>> from cloudsdk.core.config import ClientConfig
        >>> config = ClientConfig()
        >>> config.timeout
        30.0
        >>> config.merge(timeout=5.0).timeout
        5.0
        >>> config.timeout  # Original unchanged
        30.0

        ```
    """

    timeout: float = DEFAULT_TIMEOUT
    backoff: BaseBackoffStrategy | None = None
    logger: Logger | None = None

    def __post_init__(self) -> None:
        validate_timeout(self.timeout)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
