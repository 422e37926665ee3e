r"""cloudsdk - Asynchronous client core for a multi-service cloud API.

This package provides the HTTP core shared by the IAM, VPS and VRM
service clients: a request dispatcher retrying transient failures with
exponential backoff, a generic waiter polling resources until they
reach a target state, and a structured error taxonomy. Built on top of
httpx and asyncio.

Key Features:
    - Automatic retry of idempotent requests (GET, HEAD) on 429, 502, 503
      and 504, with capped exponential backoff and jitter
    - Cancellation and deadlines propagated through ``Context``
    - Structured ``SDKError`` with network, timeout and canceled
      categories
    - Waiters for tags and servers with configurable pacing
    - Structured logging through an injected logger

Example:
    ```pycon
    >>> import asyncio
    >>> from cloudsdk import CloudClient
    >>> from cloudsdk.modules.vrm.waiters import wait_for_tag_active
    >>> async def main():  # doctest: +SKIP
    ...     async with CloudClient("https://api.example.com", "my-token") as client:
    ...         project = await client.project("project-id")
    ...         tags = project.vrm().tags()
    ...         await wait_for_tag_active(tags, "tag-123")
    ...
    >>> asyncio.run(main())  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "ClientConfig",
    "CloudClient",
    "Context",
    "ExponentialBackoff",
    "ProjectClient",
    "SDKError",
    "WaiterConfig",
    "__version__",
    "errors_match",
    "wait",
]

import logging
from importlib.metadata import PackageNotFoundError, version

from cloudsdk.backoff import ExponentialBackoff
from cloudsdk.client import CloudClient, ProjectClient
from cloudsdk.context import Context
from cloudsdk.core.config import ClientConfig
from cloudsdk.exceptions import SDKError, errors_match
from cloudsdk.waiter import WaiterConfig, wait

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
