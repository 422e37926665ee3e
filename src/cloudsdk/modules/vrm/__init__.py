r"""Project-scoped VRM service client."""

from __future__ import annotations

__all__ = ["TagsClient", "VRMClient"]

from typing import TYPE_CHECKING

from cloudsdk.modules.vrm.tags import TagsClient

if TYPE_CHECKING:
    from cloudsdk.retry.executor import AsyncRetryExecutor


class VRMClient:
    """VRM operations scoped to one project.

    Args:
        executor: The VRM retry executor.
        project_id: The project all operations are bound to.
    """

    def __init__(self, executor: AsyncRetryExecutor, project_id: str) -> None:
        self._executor = executor
        self.project_id = project_id
        self.base_path = f"/api/v1/project/{project_id}"

    def tags(self) -> TagsClient:
        return TagsClient(self._executor, self.base_path)
