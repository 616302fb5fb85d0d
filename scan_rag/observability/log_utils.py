"""
Structured logging helpers.

Log records in this service routinely touch embedding vectors and chunk
texts, both far too large for a log line. Context values are summarized
before they reach ``extra=``: vectors become their length, long strings a
prefix plus their size.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from numbers import Real
from typing import Any

from scan_rag.core.exceptions import ScanRagException

MAX_VALUE_LENGTH = 300


def summarize_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> Any:
    """
    Reduce a context value to something small and log-safe.

    Numbers, booleans and None pass through unchanged so log processors
    can still aggregate on them.

    Args:
        value: Value to summarize
        max_length: Strings longer than this are cut

    Returns:
        Any: The value itself, or a short string describing it
    """
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, (list, tuple)):
        if value and all(isinstance(item, Real) for item in value):
            return f"vector(len={len(value)})"
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict(keys={sorted(map(str, value))[:10]})"

    text = value if isinstance(value, str) else repr(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with summarized structured context.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Context key-value pairs (e.g. scan_id, document_id)
    """
    logger.log(
        level,
        message,
        extra={key: summarize_value(value) for key, value in context.items()},
    )


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log an exception with its traceback and context.

    Details carried by service exceptions are merged into the context;
    explicit keyword context wins on collisions.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being reported
        **context: Additional context
    """
    merged: dict[str, Any] = {}
    if isinstance(exc, ScanRagException):
        merged.update(exc.to_dict())
    merged.update(context)
    merged["error_type"] = type(exc).__name__
    merged.setdefault("error_msg", str(exc))

    logger.error(
        message,
        extra={key: summarize_value(value) for key, value in merged.items()},
        exc_info=exc,
    )
