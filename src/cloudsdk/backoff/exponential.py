r"""Exponential backoff strategy with optional jitter."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import random

from cloudsdk.backoff.base import BaseBackoffStrategy
from cloudsdk.core.config import (
    DEFAULT_INITIAL_INTERVAL,
    DEFAULT_MAX_INTERVAL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MULTIPLIER,
)
from cloudsdk.core.validation import validate_backoff_params

# Jittered delays are scaled by a uniform factor in [0.75, 1.25]
JITTER_MIN_FACTOR = 0.75
JITTER_SPREAD = 0.5


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: initial_interval * (multiplier ** attempt),
    capped at max_interval. When jitter is enabled, the capped delay is
    multiplied by a random factor in [0.75, 1.25]. Jitter is applied after
    the cap, so a jittered delay can exceed max_interval by up to 25%.

    The instance is immutable after construction and can be shared
    between concurrent requests.

    Args:
        initial_interval: The delay in seconds before the first retry.
        max_interval: The maximum delay in seconds before jitter.
        multiplier: The growth factor between two retries. Must be >= 1.0.
        max_retries: The maximum number of retries. Must be >= 0.
        jitter: If ``True``, randomize each delay by +/-25%.

    Example:
        ```pycon
        >>> from cloudsdk.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(jitter=False)
        >>> backoff.duration(0)
        0.1
        >>> backoff.duration(1)
        0.2
        >>> backoff.duration(10)  # capped
        5.0
        >>> backoff.should_retry(2), backoff.should_retry(3)
        (True, False)

        ```
    """

    __slots__ = ("_initial_interval", "_jitter", "_max_interval", "_max_retries", "_multiplier")

    def __init__(
        self,
        initial_interval: float = DEFAULT_INITIAL_INTERVAL,
        max_interval: float = DEFAULT_MAX_INTERVAL,
        multiplier: float = DEFAULT_MULTIPLIER,
        max_retries: int = DEFAULT_MAX_RETRIES,
        jitter: bool = True,
    ) -> None:
        validate_backoff_params(
            initial_interval=initial_interval,
            max_interval=max_interval,
            multiplier=multiplier,
            max_retries=max_retries,
        )
        self._initial_interval = initial_interval
        self._max_interval = max_interval
        self._multiplier = multiplier
        self._max_retries = max_retries
        self._jitter = jitter

    @property
    def initial_interval(self) -> float:
        return self._initial_interval

    @property
    def max_interval(self) -> float:
        return self._max_interval

    @property
    def multiplier(self) -> float:
        return self._multiplier

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def jitter(self) -> bool:
        return self._jitter

    def duration(self, attempt: int) -> float:
        attempt = max(attempt, 0)
        try:
            delay = self._initial_interval * self._multiplier**attempt
        except OverflowError:
            delay = self._max_interval
        delay = min(delay, self._max_interval)
        if self._jitter:
            delay *= JITTER_MIN_FACTOR + random.random() * JITTER_SPREAD  # noqa: S311
        return delay

    def should_retry(self, attempt: int) -> bool:
        return attempt < self._max_retries

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(initial_interval={self._initial_interval}, "
            f"max_interval={self._max_interval}, multiplier={self._multiplier}, "
            f"max_retries={self._max_retries}, jitter={self._jitter})"
        )
