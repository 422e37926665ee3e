r"""Project-scoped VPS service client."""

from __future__ import annotations

__all__ = ["ServersClient", "VPSClient"]

from typing import TYPE_CHECKING

from cloudsdk.modules.vps.servers import ServersClient

if TYPE_CHECKING:
    from cloudsdk.retry.executor import AsyncRetryExecutor


class VPSClient:
    """VPS operations scoped to one project.

    Args:
        executor: The VPS retry executor.
        project_id: The project all operations are bound to.
    """

    def __init__(self, executor: AsyncRetryExecutor, project_id: str) -> None:
        self._executor = executor
        self.project_id = project_id
        self.base_path = f"/api/v1/project/{project_id}"

    def servers(self) -> ServersClient:
        return ServersClient(self._executor, self.base_path)
