r"""IAM service client."""

from __future__ import annotations

__all__ = ["IAMClient", "ProjectsClient"]

from typing import TYPE_CHECKING

from cloudsdk.modules.iam.projects import ProjectsClient

if TYPE_CHECKING:
    from cloudsdk.retry.executor import AsyncRetryExecutor

IAM_BASE_PATH = "/api/v1/"


class IAMClient:
    """Entry point of the IAM operations, global to the authenticated
    user."""

    def __init__(self, executor: AsyncRetryExecutor) -> None:
        self._executor = executor

    def projects(self) -> ProjectsClient:
        return ProjectsClient(self._executor, IAM_BASE_PATH)
