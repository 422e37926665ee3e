r"""Waiters blocking until a server reaches a target status."""

from __future__ import annotations

__all__ = [
    "DEFAULT_SERVER_DELETE_WAITER_CONFIG",
    "DEFAULT_SERVER_WAITER_CONFIG",
    "wait_for_server_active",
    "wait_for_server_deleted",
    "wait_for_server_shutoff",
    "wait_for_server_status",
]

from typing import TYPE_CHECKING

from cloudsdk.exceptions import SDKError, TerminalStateError
from cloudsdk.models.vps import ServerStatus
from cloudsdk.waiter import WaiterConfig, wait

if TYPE_CHECKING:
    from cloudsdk.context import Context
    from cloudsdk.modules.vps.servers import ServersClient

DEFAULT_SERVER_WAITER_CONFIG = WaiterConfig(
    interval=5.0, max_wait=600.0, backoff_multiplier=1.2, backoff_cap=30.0
)
DEFAULT_SERVER_DELETE_WAITER_CONFIG = WaiterConfig(interval=3.0, max_wait=300.0)


async def wait_for_server_status(
    servers: ServersClient,
    server_id: str,
    target: ServerStatus,
    *,
    ctx: Context | None = None,
    config: WaiterConfig | None = None,
) -> None:
    """Poll a server until it reaches ``target``.

    Raises:
        ValueError: If ``server_id`` is empty.
        TerminalStateError: If the server enters ``ERROR`` while waiting
            for another status.
        WaitTimeoutError: If the maximum wait elapses.
        SDKError: If reading the server fails.
    """
    if not server_id:
        msg = "server ID is required"
        raise ValueError(msg)
    target = ServerStatus(target)

    async def check(poll_ctx: Context) -> bool:
        server = await servers.get(server_id, ctx=poll_ctx)
        if server.status == target.value:
            return True
        if server.status == ServerStatus.ERROR.value:
            raise TerminalStateError("server", server_id, server.status, target.value)
        return False

    await wait(check, ctx=ctx, config=config or DEFAULT_SERVER_WAITER_CONFIG)


async def wait_for_server_active(
    servers: ServersClient,
    server_id: str,
    *,
    ctx: Context | None = None,
    config: WaiterConfig | None = None,
) -> None:
    """Wait for a server to become ``ACTIVE``."""
    await wait_for_server_status(servers, server_id, ServerStatus.ACTIVE, ctx=ctx, config=config)


async def wait_for_server_shutoff(
    servers: ServersClient,
    server_id: str,
    *,
    ctx: Context | None = None,
    config: WaiterConfig | None = None,
) -> None:
    """Wait for a server to become ``SHUTOFF``."""
    await wait_for_server_status(servers, server_id, ServerStatus.SHUTOFF, ctx=ctx, config=config)


async def wait_for_server_deleted(
    servers: ServersClient,
    server_id: str,
    *,
    ctx: Context | None = None,
    config: WaiterConfig | None = None,
) -> None:
    """Wait until reading the server returns 404.

    Raises:
        WaitTimeoutError: If the maximum wait elapses.
        SDKError: If reading the server fails with another error.
    """

    async def check(poll_ctx: Context) -> bool:
        try:
            await servers.get(server_id, ctx=poll_ctx)
        except SDKError as exc:
            if exc.status_code == 404:
                return True
            raise
        return False

    await wait(check, ctx=ctx, config=config or DEFAULT_SERVER_DELETE_WAITER_CONFIG)
