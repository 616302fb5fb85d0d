"""
HTTP middleware: correlation IDs and one access log line per request.

Requests under ``/scans/{scan_id}/...`` get the scan ID attached to their
access log records so a scan's ingestion and search traffic can be
filtered together.

Dependencies: starlette, scan_rag.observability
System role: Request/response observability injection
"""

import logging
import re
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from scan_rag.observability.correlation import clear_correlation_id, set_correlation_id
from scan_rag.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

_SCAN_PATH = re.compile(r"/scans/(?P<scan_id>[^/]+)")


def scan_id_from_path(path: str) -> str | None:
    """Return the scan ID embedded in a request path, if any."""
    match = _SCAN_PATH.search(path)
    return match.group("scan_id") if match else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request once it has completed, with status and duration."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        context = {
            "method": request.method,
            "path": request.url.path,
            "scan_id": scan_id_from_path(request.url.path),
        }

        try:
            response = await call_next(request)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{request.method} {request.url.path} - unhandled error",
                e,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
                **context,
            )
            raise

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        log_with_context(
            logger,
            level,
            f"{request.method} {request.url.path} - {response.status_code}",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
            **context,
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Adopt the caller's correlation ID (or mint one) and echo it back."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
