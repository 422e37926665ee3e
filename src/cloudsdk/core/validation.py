r"""Parameter validation utilities.

This module provides validation functions to ensure configuration values
meet their constraints before they are used by the retry executor, the
waiter or the client.
"""

from __future__ import annotations

__all__ = [
    "validate_backoff_params",
    "validate_base_url",
    "validate_timeout",
    "validate_token",
    "validate_waiter_params",
]

from urllib.parse import urlsplit


def validate_timeout(timeout: float) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds for a call. Must be > 0.

    Raises:
        ValueError: If timeout is <= 0.

    Example:
        ```pycon
        >>> from cloudsdk.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_backoff_params(
    initial_interval: float,
    max_interval: float,
    multiplier: float,
    max_retries: int,
) -> None:
    """Validate exponential backoff parameters.

    Args:
        initial_interval: Delay before the first retry. Must be >= 0.
        max_interval: Cap of the computed delay. Must be > 0.
        multiplier: Growth factor between retries. Must be >= 1.0.
        max_retries: Maximum number of retries. Must be >= 0.

    Raises:
        ValueError: If any parameter is out of range.
    """
    if initial_interval < 0:
        msg = f"initial_interval must be >= 0, got {initial_interval}"
        raise ValueError(msg)
    if max_interval <= 0:
        msg = f"max_interval must be > 0, got {max_interval}"
        raise ValueError(msg)
    if multiplier < 1.0:
        msg = f"multiplier must be >= 1.0, got {multiplier}"
        raise ValueError(msg)
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)


def validate_waiter_params(
    interval: float,
    max_wait: float,
    backoff_multiplier: float,
    backoff_cap: float,
) -> None:
    """Validate waiter pacing parameters.

    Raises:
        ValueError: If any parameter is out of range.
    """
    if interval <= 0:
        msg = f"interval must be > 0, got {interval}"
        raise ValueError(msg)
    if max_wait <= 0:
        msg = f"max_wait must be > 0, got {max_wait}"
        raise ValueError(msg)
    if backoff_multiplier < 1.0:
        msg = f"backoff_multiplier must be >= 1.0, got {backoff_multiplier}"
        raise ValueError(msg)
    if backoff_cap <= 0:
        msg = f"backoff_cap must be > 0, got {backoff_cap}"
        raise ValueError(msg)


def validate_base_url(base_url: str) -> None:
    """Validate the API base URL.

    Args:
        base_url: The base URL, including its scheme
            (e.g. ``"https://api.example.com"``).

    Raises:
        ValueError: If the URL has no scheme or no host.

    Example:
        ```pycon
        >>> from cloudsdk.core.validation import validate_base_url
        >>> validate_base_url("https://api.example.com")
        >>> validate_base_url("api.example.com")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: base URL must include scheme (e.g., https://), got 'api.example.com'

        ```
    """
    parts = urlsplit(base_url)
    if not parts.scheme:
        msg = f"base URL must include scheme (e.g., https://), got {base_url!r}"
        raise ValueError(msg)
    if not parts.netloc:
        msg = f"base URL must include a host, got {base_url!r}"
        raise ValueError(msg)


def validate_token(token: str) -> None:
    """Validate the bearer token.

    Raises:
        ValueError: If the token is empty.
    """
    if not token:
        msg = "token cannot be empty"
        raise ValueError(msg)
