"""
Observability module.

Provides logging configuration, safe structured logging helpers,
correlation ID tracking and request logging middleware.
"""

from scan_rag.observability.correlation import get_correlation_id, set_correlation_id
from scan_rag.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id", "set_correlation_id"]
