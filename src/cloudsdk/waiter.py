r"""Generic polling waiter for asynchronous state transitions.

``wait`` repeatedly invokes a caller-supplied check until it reports the
target state is reached, raises, the maximum wait elapses, or the caller
context ends. The first check runs immediately; the pause between two
checks grows by ``backoff_multiplier`` up to ``backoff_cap``.

Example:
    ```pycon
    >>> import asyncio
    >>> from cloudsdk.waiter import WaiterConfig, wait
    >>> calls = []
    >>> async def is_ready(ctx):
    ...     calls.append(1)
    ...     return len(calls) == 3
    ...
    >>> asyncio.run(wait(is_ready, config=WaiterConfig(interval=0.01, max_wait=5.0)))
    >>> len(calls)
    3

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_CAP",
    "DEFAULT_BACKOFF_MULTIPLIER",
    "DEFAULT_INTERVAL",
    "DEFAULT_MAX_WAIT",
    "StateCheck",
    "WaiterConfig",
    "wait",
]

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from cloudsdk.backoff.exponential import ExponentialBackoff
from cloudsdk.context import Context, ContextError
from cloudsdk.core.validation import validate_waiter_params
from cloudsdk.exceptions import WaitTimeoutError
from cloudsdk.utils.structured_logging import NullLogger

if TYPE_CHECKING:
    from cloudsdk.utils.structured_logging import Logger

StateCheck = Callable[[Context], Awaitable[bool]]

# Default pause between two checks in seconds
DEFAULT_INTERVAL = 2.0

# Default maximum wait in seconds (5 minutes)
DEFAULT_MAX_WAIT = 300.0

# Default pacing growth: 1.0 keeps a fixed interval
DEFAULT_BACKOFF_MULTIPLIER = 1.0

# Default cap of the pause when the multiplier is > 1.0
DEFAULT_BACKOFF_CAP = 30.0


@dataclass(frozen=True)
class WaiterConfig:
    """Pacing of a waiter.

    Args:
        interval: Pause in seconds after the first not-ready check.
        max_wait: Maximum total wait in seconds, measured from the start
            of ``wait``.
        backoff_multiplier: Factor applied to the pause after each
            not-ready check. Must be >= 1.0.
        backoff_cap: Maximum pause in seconds.

    Example:
        ```pycon
        >>> from cloudsdk.waiter import WaiterConfig
        >>> config = WaiterConfig(interval=5.0, backoff_multiplier=1.2)
        >>> config.merge(max_wait=60.0).max_wait
        60.0

        ```
    """

    interval: float = DEFAULT_INTERVAL
    max_wait: float = DEFAULT_MAX_WAIT
    backoff_multiplier: float = DEFAULT_BACKOFF_MULTIPLIER
    backoff_cap: float = DEFAULT_BACKOFF_CAP

    def __post_init__(self) -> None:
        validate_waiter_params(
            interval=self.interval,
            max_wait=self.max_wait,
            backoff_multiplier=self.backoff_multiplier,
            backoff_cap=self.backoff_cap,
        )

    def merge(self, **overrides: Any) -> WaiterConfig:
        """Create a new config with the non-None overrides applied."""
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def pacing(self) -> ExponentialBackoff:
        """Return the backoff computing the pause after each check.

        With a multiplier of 1.0 the pause stays at ``interval``.
        """
        if self.backoff_multiplier <= 1.0:
            max_interval = self.interval
        else:
            max_interval = self.backoff_cap
        return ExponentialBackoff(
            initial_interval=self.interval,
            max_interval=max_interval,
            multiplier=self.backoff_multiplier,
            max_retries=0,
            jitter=False,
        )


async def wait(
    check: StateCheck,
    *,
    ctx: Context | None = None,
    config: WaiterConfig | None = None,
    logger: Logger | None = None,
) -> None:
    """Poll ``check`` until it returns ``True``.

    ``check`` receives a context bounded by ``max_wait`` and must be
    free of side effects beyond remote reads. It signals an unrecoverable
    condition by raising; the exception is propagated as is and polling
    stops.

    Args:
        check: Async function returning ``True`` when the target state is
            reached.
        ctx: Optional caller context.
        config: Optional pacing. Defaults to ``WaiterConfig()``.
        logger: Optional logger collaborator. Defaults to ``NullLogger()``.

    Raises:
        WaitTimeoutError: If ``max_wait`` elapses first.
        Canceled: If the caller context is canceled.
        DeadlineExceeded: If the caller context deadline passes first.
        Exception: Any exception raised by ``check``.
    """
    if ctx is None:
        ctx = Context.background()
    if config is None:
        config = WaiterConfig()
    if logger is None:
        logger = NullLogger()

    pacing = config.pacing()
    wait_ctx = ctx.with_timeout(config.max_wait)
    checks = 0
    try:
        while True:
            try:
                done = await wait_ctx.run(check(wait_ctx))
            except ContextError:
                raise
            except Exception as exc:
                # A check interrupted by the end of the wait reports the context error.
                end = wait_ctx.err()
                if end is None:
                    raise
                raise end from exc
            checks += 1
            if done:
                logger.debug("target state reached", checks=checks)
                return
            delay = pacing.duration(checks - 1)
            logger.debug("target state not reached", checks=checks, next_check_in=delay)
            await wait_ctx.sleep(delay)
    except ContextError as exc:
        if wait_ctx.err() is None:
            # Raised by the check on a context of its own.
            raise
        parent_err = ctx.err()
        if parent_err is not None:
            raise parent_err from exc
        logger.debug("wait timed out", checks=checks, max_wait=config.max_wait)
        raise WaitTimeoutError(config.max_wait) from exc
    finally:
        wait_ctx.cancel()
