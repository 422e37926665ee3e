r"""Structured logging utilities and the logger collaborator.

The retry executor and the waiter report diagnostics through an injected
``Logger``: any object with ``debug``, ``info`` and ``error`` methods
accepting a message and key-value fields. ``NullLogger`` discards
everything; ``StdlibLogger`` forwards to a ``logging.Logger`` and passes
the fields as ``extra`` so ``StructuredFormatter`` renders them as JSON.

Example:
    Enable structured logging for cloudsdk:

    ```python
    import logging
    from cloudsdk.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("cloudsdk")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```

    Use correlation IDs to track related requests:

    ```python
    from cloudsdk.utils.structured_logging import set_correlation_id, clear_correlation_id

    set_correlation_id("request-123")
    try:
        tag = await client.vrm().tags().get("tag-1")
    finally:
        clear_correlation_id()
    ```
"""

from __future__ import annotations

__all__ = [
    "Logger",
    "NullLogger",
    "StdlibLogger",
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
from datetime import datetime, timezone
from typing import Any, Protocol, runtime_checkable

# Context variable for correlation ID (thread-safe and async-safe)
_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id", default=None
)

_RESERVED_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "msecs",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "sinfo",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "taskName",
    }
)


def get_correlation_id() -> str | None:
    """Get the current correlation ID.

    Returns:
        The current correlation ID, or None if not set.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: The correlation ID to set (e.g., request ID, trace ID).

    Example:
        ```pycon
        >>> from cloudsdk.utils.structured_logging import (
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("request-456")
        >>> get_correlation_id()
        'request-456'

        ```
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


@runtime_checkable
class Logger(Protocol):
    """Logger collaborator accepting a message and key-value fields."""

    def debug(self, msg: str, **fields: Any) -> None: ...

    def info(self, msg: str, **fields: Any) -> None: ...

    def error(self, msg: str, **fields: Any) -> None: ...


class NullLogger:
    """Logger that discards every message."""

    def debug(self, msg: str, **fields: Any) -> None:
        pass

    def info(self, msg: str, **fields: Any) -> None:
        pass

    def error(self, msg: str, **fields: Any) -> None:
        pass


class StdlibLogger:
    """Logger forwarding to a ``logging.Logger``.

    Key-value fields are attached to the log record through ``extra``.

    Args:
        logger: The stdlib logger. Defaults to the ``cloudsdk`` logger.

    Example:
        ```pycon
        >>> import logging
        >>> from cloudsdk.utils.structured_logging import StdlibLogger
        >>> log = StdlibLogger(logging.getLogger("cloudsdk.example"))
        >>> log.debug("retrying request", method="GET", attempt=1)

        ```
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger if logger is not None else logging.getLogger("cloudsdk")

    def debug(self, msg: str, **fields: Any) -> None:
        log_structured(self.logger, logging.DEBUG, msg, **fields)

    def info(self, msg: str, **fields: Any) -> None:
        log_structured(self.logger, logging.INFO, msg, **fields)

    def error(self, msg: str, **fields: Any) -> None:
        log_structured(self.logger, logging.ERROR, msg, **fields)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for the records of ``StdlibLogger``.

    Each record is rendered as one JSON object with the keys
    ``timestamp`` (ISO 8601, UTC), ``level``, ``logger`` and ``message``,
    plus ``correlation_id`` when one is set and ``exception`` when the
    record carries exception info. The key-value fields of the record
    (``method``, ``path``, ``attempt``, ``backoff``, ``checks``, ...) are
    grouped under ``fields``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from cloudsdk.utils.structured_logging import StdlibLogger, StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("cloudsdk.example.formatter")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.DEBUG)
        >>> StdlibLogger(logger).debug("retrying request", method="GET", attempt=1)
        >>> json.loads(stream.getvalue())["fields"]
        {'method': 'GET', 'attempt': 1}

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_data: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_FIELDS
        }
        if fields:
            log_data["fields"] = fields

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured data.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.INFO).
        message: Log message.
        **extra: Additional structured fields to include in the log.
    """
    logger.log(level, message, extra=extra)
