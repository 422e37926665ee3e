r"""Root SDK client.

This module provides ``CloudClient``, the entry point of the SDK. It
owns the ``httpx.AsyncClient`` shared by every service client and hands
out IAM clients and project-scoped ``ProjectClient`` instances.
"""

from __future__ import annotations

__all__ = ["CloudClient", "ProjectClient"]

import logging
from typing import TYPE_CHECKING

import httpx

from cloudsdk.core.config import ClientConfig
from cloudsdk.core.validation import validate_base_url, validate_token
from cloudsdk.exceptions import SDKError
from cloudsdk.modules.iam import IAMClient
from cloudsdk.modules.vps import VPSClient
from cloudsdk.modules.vrm import VRMClient
from cloudsdk.retry.executor import AsyncRetryExecutor
from cloudsdk.utils.structured_logging import StdlibLogger

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from cloudsdk.context import Context

logger: logging.Logger = logging.getLogger(__name__)


class CloudClient:
    r"""Asynchronous root client of the SDK.

    The client is an async context manager. Unless an ``http_client`` is
    injected, the underlying ``httpx.AsyncClient`` is created when
    entering the context and closed when leaving it. An injected client
    is used as is and never closed by ``CloudClient``.

    Args:
        base_url: The API base URL (e.g. ``"https://api.example.com"``).
            Each service appends its own segment (``/iam``, ``/vps``,
            ``/vrm``).
        token: The bearer token used for every request.
        config: Optional ``ClientConfig``. Defaults to ``ClientConfig()``.
        http_client: Optional ``httpx.AsyncClient`` to use as transport.

    Raises:
        ValueError: If the base URL has no scheme or host, or the token
            is empty.

    Example:
        ```pycon
        >>> import asyncio
        >>> from cloudsdk import CloudClient
        >>> async def main():  # doctest: +SKIP
        ...     async with CloudClient("https://api.example.com", "my-token") as client:
        ...         project = await client.project("my-project-code")
        ...         return await project.vrm().tags().list()
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        validate_base_url(base_url)
        validate_token(token)
        self.base_url = base_url.rstrip("/")
        self._token = token
        self._config = config if config is not None else ClientConfig()
        self._logger = (
            self._config.logger if self._config.logger is not None else StdlibLogger()
        )
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> Self:
        """Enter the async context manager and create the underlying
        httpx client if none was injected.

        Returns:
            The CloudClient instance.
        """
        if self._owns_client and self._client is None:
            self._client = httpx.AsyncClient(timeout=self._config.timeout)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the async context manager and close the underlying httpx
        client if this client created it."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this client created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure the client is available for use.

        Raises:
            RuntimeError: If no httpx client was injected and the client
                is used outside of a context manager.
        """
        if self._client is None:
            msg = "CloudClient must be used within an async context manager (async with statement)"
            raise RuntimeError(msg)
        return self._client

    def executor(self, service: str) -> AsyncRetryExecutor:
        """Return a retry executor bound to ``<base_url>/<service>``."""
        return AsyncRetryExecutor(
            f"{self.base_url}/{service}",
            self._token,
            self._ensure_client(),
            backoff=self._config.backoff,
            timeout=self._config.timeout,
            logger=self._logger,
        )

    def iam(self) -> IAMClient:
        """Return the IAM client, global to the authenticated user."""
        return IAMClient(self.executor("iam"))

    async def project(self, project_id_or_code: str, *, ctx: Context | None = None) -> ProjectClient:
        """Return a client bound to one project.

        The argument is first looked up as a project ID. If that fails,
        it is matched against the system code
        (``extra.iservice.projectSysCode``) of every project of the user.

        Args:
            project_id_or_code: A project ID or a project system code.
            ctx: Optional caller context.

        Returns:
            The project-scoped client.

        Raises:
            ValueError: If no project or more than one project has the
                given system code.
            SDKError: If listing the projects fails.
        """
        projects = self.iam().projects()
        try:
            await projects.get(project_id_or_code, ctx=ctx)
        except SDKError as exc:
            logger.debug(f"project lookup by ID failed ({exc}), trying system code")
        else:
            return ProjectClient(self, project_id_or_code)

        matches = [
            membership.project
            for membership in await projects.list(ctx=ctx)
            if membership.project is not None and membership.project.sys_code == project_id_or_code
        ]
        if not matches:
            msg = (
                f"no project found with projectSysCode {project_id_or_code}, "
                "please use projectID instead"
            )
            raise ValueError(msg)
        if len(matches) > 1:
            msg = (
                f"multiple projects found with projectSysCode {project_id_or_code}, "
                "please use projectID instead"
            )
            raise ValueError(msg)
        return ProjectClient(self, matches[0].project_id)


class ProjectClient:
    """Client bound to one project, handing out the project-scoped
    service clients.

    Args:
        client: The root client.
        project_id: The project ID.
    """

    def __init__(self, client: CloudClient, project_id: str) -> None:
        self._client = client
        self.project_id = project_id

    def vps(self) -> VPSClient:
        return VPSClient(self._client.executor("vps"), self.project_id)

    def vrm(self) -> VRMClient:
        return VRMClient(self._client.executor("vrm"), self.project_id)

    def __repr__(self) -> str:
        return f"ProjectClient(project_id={self.project_id!r})"
