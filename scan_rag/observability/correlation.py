"""
Per-request correlation ID.

Stored in a ContextVar so it follows the request through awaits and is
picked up by the log filter in ``logger.py``.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import uuid
from contextvars import ContextVar

_current: ContextVar[str] = ContextVar("scan_rag_correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Make ``correlation_id`` current, minting a UUID4 when it is missing.

    Returns:
        str: The ID now in effect
    """
    value = (correlation_id or "").strip() or uuid.uuid4().hex
    _current.set(value)
    return value


def get_correlation_id() -> str:
    """Current correlation ID; empty outside a request."""
    return _current.get()


def clear_correlation_id() -> None:
    _current.set("")
