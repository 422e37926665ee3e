r"""Utility functions for response handling and structured logging."""

from __future__ import annotations

__all__ = [
    "Logger",
    "NullLogger",
    "StdlibLogger",
    "StructuredFormatter",
    "decode_body",
    "parse_error_response",
]

from cloudsdk.utils.response import decode_body, parse_error_response
from cloudsdk.utils.structured_logging import (
    Logger,
    NullLogger,
    StdlibLogger,
    StructuredFormatter,
)
