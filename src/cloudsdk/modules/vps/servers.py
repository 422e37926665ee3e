r"""VPS server operations."""

from __future__ import annotations

__all__ = ["ServersClient"]

from typing import TYPE_CHECKING
from urllib.parse import quote

from cloudsdk.models.vps import Server
from cloudsdk.request import Request

if TYPE_CHECKING:
    from cloudsdk.context import Context
    from cloudsdk.retry.executor import AsyncRetryExecutor


class ServersClient:
    """Client for the servers of one project."""

    def __init__(self, executor: AsyncRetryExecutor, base_path: str) -> None:
        self._executor = executor
        self._base_path = base_path

    def _server_path(self, server_id: str) -> str:
        if not server_id:
            msg = "server ID cannot be empty"
            raise ValueError(msg)
        return f"{self._base_path}/servers/{quote(server_id, safe='')}"

    async def get(self, server_id: str, *, ctx: Context | None = None) -> Server:
        """Get one server.

        ``GET /api/v1/project/{project-id}/servers/{svr-id}``
        """
        server = await self._executor.execute(
            Request("GET", self._server_path(server_id)), ctx=ctx, decoder=Server.from_dict
        )
        return server if server is not None else Server(id=server_id)

    async def delete(self, server_id: str, *, ctx: Context | None = None) -> None:
        """Delete one server.

        ``DELETE /api/v1/project/{project-id}/servers/{svr-id}``
        """
        await self._executor.execute(Request("DELETE", self._server_path(server_id)), ctx=ctx)
