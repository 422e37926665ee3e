r"""HTTP response handling utilities.

This module turns raw HTTP responses into either decoded JSON payloads
or ``SDKError`` instances.
"""

from __future__ import annotations

__all__ = ["decode_body", "parse_error_response"]

import json
import logging
from typing import Any

from cloudsdk.exceptions import HTTPStatusError, SDKError

logger: logging.Logger = logging.getLogger(__name__)


def parse_error_response(status_code: int, body: bytes) -> SDKError:
    """Build the error for an HTTP response with status >= 400.

    The API returns errors as a JSON object with the fields ``errorCode``
    (integer), ``message`` (string) and ``meta`` (optional object). Any
    other body is kept verbatim in an ``HTTPStatusError``.

    Args:
        status_code: The HTTP status code.
        body: The raw response body.

    Returns:
        The structured error.

    Example:
        ```pycon
        >>> from cloudsdk.utils.response import parse_error_response
        >>> err = parse_error_response(400, b'{"errorCode": 1001, "message": "Invalid request"}')
        >>> err.status_code, err.error_code, err.message
        (400, 1001, 'Invalid request')
        >>> parse_error_response(500, b"Internal Server Error").meta
        {'raw': 'Internal Server Error'}

        ```
    """
    raw_body = body.decode("utf-8", errors="replace")
    try:
        payload = json.loads(body)
    except ValueError:
        logger.debug(f"HTTP {status_code} error body is not JSON")
        return HTTPStatusError(status_code, raw_body)

    if not isinstance(payload, dict):
        return HTTPStatusError(status_code, raw_body)

    error_code = payload.get("errorCode", 0)
    message = payload.get("message", "")
    meta = payload.get("meta")
    if (
        not isinstance(error_code, int)
        or isinstance(error_code, bool)
        or not isinstance(message, str)
        or (meta is not None and not isinstance(meta, dict))
    ):
        return HTTPStatusError(status_code, raw_body)
    return SDKError(status_code=status_code, error_code=error_code, message=message, meta=meta)


def decode_body(status_code: int, body: bytes) -> Any:
    """Decode the JSON body of a successful response.

    Args:
        status_code: The HTTP status code, used in error reporting.
        body: The raw response body.

    Returns:
        The decoded JSON value, or ``None`` for an empty body.

    Raises:
        SDKError: If the body is not valid JSON.
    """
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError as exc:
        raise SDKError(
            status_code=status_code, message="failed to parse response", cause=exc
        ) from exc
