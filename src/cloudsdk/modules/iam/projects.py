r"""IAM project operations."""

from __future__ import annotations

__all__ = ["ProjectsClient"]

from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

from cloudsdk.models.iam import ListProjectsResponse, Project, ProjectMembership
from cloudsdk.request import Request

if TYPE_CHECKING:
    from cloudsdk.context import Context
    from cloudsdk.retry.executor import AsyncRetryExecutor


class ProjectsClient:
    """Client for the projects the authenticated user belongs to.

    Args:
        executor: The IAM retry executor.
        base_path: The API path prefix (e.g. ``"/api/v1/"``).
    """

    def __init__(self, executor: AsyncRetryExecutor, base_path: str) -> None:
        self._executor = executor
        self._base_path = base_path

    async def list(
        self,
        *,
        offset: int | None = None,
        limit: int | None = None,
        order: str | None = None,
        ctx: Context | None = None,
    ) -> list[ProjectMembership]:
        """List the projects of the user.

        ``GET /api/v1/projects``
        """
        params = [
            (key, str(value))
            for key, value in (("offset", offset), ("limit", limit), ("order", order))
            if value is not None
        ]
        path = self._base_path + "projects"
        if params:
            path += "?" + urlencode(params)
        response = await self._executor.execute(
            Request("GET", path), ctx=ctx, decoder=ListProjectsResponse.from_dict
        )
        if response is None:
            return []
        return response.projects

    async def get(self, project_id: str, *, ctx: Context | None = None) -> Project:
        """Get the details of one project.

        ``GET /api/v1/project/{project-id}``

        Raises:
            ValueError: If ``project_id`` is empty.
            SDKError: If the request fails.
        """
        if not project_id:
            msg = "project ID cannot be empty"
            raise ValueError(msg)
        path = self._base_path + "project/" + quote(project_id, safe="")
        project = await self._executor.execute(
            Request("GET", path), ctx=ctx, decoder=Project.from_dict
        )
        return project if project is not None else Project(project_id=project_id)
