r"""Request description consumed by the retry executor."""

from __future__ import annotations

__all__ = ["Request", "encode_body"]

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Request:
    """One logical HTTP call built by a resource client.

    Args:
        method: The upper-case HTTP method (e.g. ``"GET"``).
        path: The path appended to the executor base URL, including any
            query string.
        body: Optional JSON-serializable body. Objects exposing a
            ``to_dict()`` method are serialized through it.
        headers: Optional extra headers. They are applied after the
            default headers and override them on conflict.

    Example:
        ```pycon
        >>> from cloudsdk.request import Request
        >>> req = Request("GET", "/api/v1/project/p-1/tags", headers={"X-Namespace": "public"})
        >>> req.method, req.path
        ('GET', '/api/v1/project/p-1/tags')

        ```
    """

    method: str
    path: str
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.headers is None:
            self.headers = {}


def encode_body(body: Any) -> bytes | None:
    """Serialize a request body as JSON.

    Args:
        body: The body to serialize, or ``None``.

    Returns:
        The UTF-8 encoded JSON document, or ``None`` if there is no body.

    Raises:
        TypeError: If the body is not JSON-serializable.
        ValueError: If the body contains circular references or
            non-finite floats.
    """
    if body is None:
        return None
    to_dict = getattr(body, "to_dict", None)
    if callable(to_dict):
        body = to_dict()
    return json.dumps(body, allow_nan=False).encode("utf-8")
