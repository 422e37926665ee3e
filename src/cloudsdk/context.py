r"""Cancellation tokens with optional deadlines.

A ``Context`` carries a cancel signal and an optional deadline through a
single logical call. Child contexts inherit both: canceling a parent
cancels all of its children, and a child deadline never extends past the
parent deadline. Waiting primitives (``Context.run`` and
``Context.sleep``) are preempted as soon as the context ends, instead of
being checked after the wait completes.

Example:
    ```pycon
    >>> import asyncio
    >>> from cloudsdk.context import Context, DeadlineExceeded
    >>> async def main():
    ...     ctx = Context.background().with_timeout(0.01)
    ...     try:
    ...         await ctx.sleep(10.0)
    ...     except DeadlineExceeded:
    ...         return "deadline"
    ...
    >>> asyncio.run(main())
    'deadline'

    ```
"""

from __future__ import annotations

__all__ = ["Canceled", "Context", "ContextError", "DeadlineExceeded"]

import asyncio
import time
import weakref
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable

T = TypeVar("T")


class ContextError(Exception):
    r"""Base class for the reasons a context can end."""


class Canceled(ContextError):
    r"""The context was explicitly canceled."""

    def __init__(self) -> None:
        super().__init__("context canceled")


class DeadlineExceeded(ContextError):
    r"""The context deadline passed."""

    def __init__(self) -> None:
        super().__init__("context deadline exceeded")


class Context:
    r"""Cancellation token with an optional monotonic deadline.

    Prefer ``Context.background()`` and the ``with_*`` methods over
    calling the constructor directly.

    Args:
        deadline: Optional deadline as a ``time.monotonic()`` value.
        parent: Optional parent context.
    """

    def __init__(self, *, deadline: float | None = None, parent: Context | None = None) -> None:
        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)
        self._deadline = deadline
        self._parent = parent
        self._canceled = False
        self._children: weakref.WeakSet[Context] = weakref.WeakSet()
        self._waiters: set[asyncio.Future[None]] = set()
        if parent is not None:
            parent._children.add(self)
            if parent.canceled:
                self._canceled = True

    @classmethod
    def background(cls) -> Context:
        r"""Return a new root context without deadline."""
        return cls()

    def with_timeout(self, timeout: float) -> Context:
        r"""Return a child context ending ``timeout`` seconds from now.

        Args:
            timeout: The timeout in seconds. Must be >= 0.

        Returns:
            The child context.

        Raises:
            ValueError: if ``timeout`` is negative.
        """
        if timeout < 0:
            msg = f"timeout must be >= 0, got {timeout}"
            raise ValueError(msg)
        return Context(deadline=time.monotonic() + timeout, parent=self)

    def with_cancel(self) -> Context:
        r"""Return a child context that can be canceled independently."""
        return Context(parent=self)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def canceled(self) -> bool:
        return self._canceled

    def remaining(self) -> float | None:
        r"""Return the seconds left before the deadline, or ``None``."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def err(self) -> ContextError | None:
        r"""Return why the context ended, or ``None`` if it is still
        active.

        Explicit cancellation takes precedence over an expired deadline.
        """
        if self._canceled:
            return Canceled()
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceeded()
        return None

    def cancel(self) -> None:
        r"""Cancel the context and all of its children.

        Calling ``cancel`` more than once is a no-op.
        """
        if self._canceled:
            return
        self._canceled = True
        for waiter in self._waiters:
            if not waiter.done():
                waiter.set_result(None)
        for child in list(self._children):
            child.cancel()

    async def run(self, awaitable: Awaitable[T]) -> T:
        r"""Await ``awaitable`` unless the context ends first.

        Args:
            awaitable: The awaitable to run.

        Returns:
            The result of ``awaitable``.

        Raises:
            Canceled: if the context is canceled before completion.
            DeadlineExceeded: if the deadline passes before completion.
        """
        err = self.err()
        if err is not None:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise err

        task: asyncio.Future[T] = asyncio.ensure_future(awaitable)
        waiter: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._waiters.add(waiter)
        try:
            await asyncio.wait(
                {task, waiter}, timeout=self.remaining(), return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            self._waiters.discard(waiter)
            waiter.cancel()

        if task.done():
            return task.result()

        await _cancel_and_drain(task)
        raise self.err() or DeadlineExceeded()

    async def sleep(self, delay: float) -> None:
        r"""Sleep for ``delay`` seconds unless the context ends first.

        Raises:
            Canceled: if the context is canceled during the sleep.
            DeadlineExceeded: if the deadline passes during the sleep.
        """
        await self.run(asyncio.sleep(delay))

    def __repr__(self) -> str:
        return f"Context(deadline={self._deadline}, canceled={self._canceled})"


async def _cancel_and_drain(task: asyncio.Future[Any]) -> None:
    task.cancel()
    await asyncio.wait({task})
    if not task.cancelled():
        # The result was abandoned when the context ended.
        task.exception()
