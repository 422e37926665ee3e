r"""Waiters blocking until a tag reaches a target status."""

from __future__ import annotations

__all__ = [
    "DEFAULT_TAG_WAITER_CONFIG",
    "wait_for_tag_active",
    "wait_for_tag_available",
    "wait_for_tag_status",
]

from typing import TYPE_CHECKING

from cloudsdk.exceptions import TerminalStateError
from cloudsdk.models.vrm import TagStatus
from cloudsdk.waiter import WaiterConfig, wait

if TYPE_CHECKING:
    from cloudsdk.context import Context
    from cloudsdk.modules.vrm.tags import TagsClient

DEFAULT_TAG_WAITER_CONFIG = WaiterConfig(
    interval=5.0, max_wait=600.0, backoff_multiplier=1.2, backoff_cap=30.0
)


async def wait_for_tag_status(
    tags: TagsClient,
    tag_id: str,
    target: TagStatus,
    *,
    ctx: Context | None = None,
    config: WaiterConfig | None = None,
) -> None:
    """Poll a tag until it reaches ``target``.

    Args:
        tags: The tags client used to read the tag.
        tag_id: The ID of the tag.
        target: The status to wait for.
        ctx: Optional caller context.
        config: Optional pacing. Defaults to a 5s interval growing by 1.2x
            up to 30s, for at most 10 minutes.

    Raises:
        ValueError: If ``tag_id`` is empty.
        TerminalStateError: If the tag enters ``error`` while waiting for
            another status.
        WaitTimeoutError: If the maximum wait elapses.
        SDKError: If reading the tag fails.

    Example:
        ```pycon
        >>> from cloudsdk.models.vrm import TagStatus
        >>> from cloudsdk.modules.vrm.waiters import wait_for_tag_status
        >>> await wait_for_tag_status(tags, "tag-123", TagStatus.ACTIVE)  # doctest: +SKIP

        ```
    """
    if not tag_id:
        msg = "tag ID is required"
        raise ValueError(msg)
    target = TagStatus(target)

    async def check(poll_ctx: Context) -> bool:
        tag = await tags.get(tag_id, ctx=poll_ctx)
        if tag.status == target.value:
            return True
        if tag.status == TagStatus.ERROR.value:
            raise TerminalStateError("tag", tag_id, tag.status, target.value)
        return False

    await wait(check, ctx=ctx, config=config or DEFAULT_TAG_WAITER_CONFIG)


async def wait_for_tag_active(
    tags: TagsClient,
    tag_id: str,
    *,
    ctx: Context | None = None,
    config: WaiterConfig | None = None,
) -> None:
    """Wait for a tag to become ``active``."""
    await wait_for_tag_status(tags, tag_id, TagStatus.ACTIVE, ctx=ctx, config=config)


async def wait_for_tag_available(
    tags: TagsClient,
    tag_id: str,
    *,
    ctx: Context | None = None,
    config: WaiterConfig | None = None,
) -> None:
    """Wait for a tag to become ``available``."""
    await wait_for_tag_status(tags, tag_id, TagStatus.AVAILABLE, ctx=ctx, config=config)
