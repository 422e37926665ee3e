r"""VRM tag operations.

Every operation accepts an optional namespace. When set, it is sent in
the ``X-Namespace`` header for multi-tenant repositories.
"""

from __future__ import annotations

__all__ = ["TagsClient"]

from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

from cloudsdk.models.vrm import ListTagsOptions, Tag, UpdateTagRequest
from cloudsdk.request import Request

if TYPE_CHECKING:
    from cloudsdk.context import Context
    from cloudsdk.retry.executor import AsyncRetryExecutor


def _namespace_headers(namespace: str | None) -> dict[str, str]:
    if namespace:
        return {"X-Namespace": namespace}
    return {}


def _check_tag_id(tag_id: str) -> None:
    if not tag_id.strip():
        msg = "tag ID cannot be empty"
        raise ValueError(msg)


def _decode_tags(data: dict) -> list[Tag]:
    return [Tag.from_dict(item) for item in data.get("tags") or []]


class TagsClient:
    """Client for the tags of one project.

    Args:
        executor: The VRM retry executor.
        base_path: The project path (``/api/v1/project/{project-id}``).
    """

    def __init__(self, executor: AsyncRetryExecutor, base_path: str) -> None:
        self._executor = executor
        self._base_path = base_path

    def _tag_path(self, tag_id: str) -> str:
        return f"{self._base_path}/tag/{quote(tag_id, safe='')}"

    async def list(
        self, options: ListTagsOptions | None = None, *, ctx: Context | None = None
    ) -> list[Tag]:
        """List the tags of the project.

        ``GET /api/v1/project/{project-id}/tags``

        Raises:
            ValueError: If the options are invalid.
            SDKError: If the request fails.
        """
        if options is None:
            options = ListTagsOptions()
        options.validate()
        path = f"{self._base_path}/tags"
        params = options.query()
        if params:
            path += "?" + urlencode(params)
        tags = await self._executor.execute(
            Request("GET", path, headers=_namespace_headers(options.namespace)),
            ctx=ctx,
            decoder=_decode_tags,
        )
        return tags if tags is not None else []

    async def get(
        self, tag_id: str, *, namespace: str | None = None, ctx: Context | None = None
    ) -> Tag:
        """Get one tag.

        ``GET /api/v1/project/{project-id}/tag/{tag-id}``
        """
        _check_tag_id(tag_id)
        tag = await self._executor.execute(
            Request("GET", self._tag_path(tag_id), headers=_namespace_headers(namespace)),
            ctx=ctx,
            decoder=Tag.from_dict,
        )
        return tag if tag is not None else Tag(id=tag_id)

    async def update(
        self,
        tag_id: str,
        request: UpdateTagRequest,
        *,
        namespace: str | None = None,
        ctx: Context | None = None,
    ) -> Tag:
        """Update one tag.

        ``PUT /api/v1/project/{project-id}/tag/{tag-id}``
        """
        _check_tag_id(tag_id)
        request.validate()
        tag = await self._executor.execute(
            Request(
                "PUT",
                self._tag_path(tag_id),
                body=request,
                headers=_namespace_headers(namespace),
            ),
            ctx=ctx,
            decoder=Tag.from_dict,
        )
        return tag if tag is not None else Tag(id=tag_id, name=request.name)

    async def delete(
        self, tag_id: str, *, namespace: str | None = None, ctx: Context | None = None
    ) -> None:
        """Delete one tag.

        ``DELETE /api/v1/project/{project-id}/tag/{tag-id}``
        """
        _check_tag_id(tag_id)
        await self._executor.execute(
            Request("DELETE", self._tag_path(tag_id), headers=_namespace_headers(namespace)),
            ctx=ctx,
        )
