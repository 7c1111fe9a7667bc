"""
Request logging middleware.

Tags every request with a correlation id (``X-Correlation-ID``, taken from
the request or generated) and logs method, path, status and duration.
"""

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request with timing and a correlation id."""

    # High-frequency paths logged only on errors
    QUIET_PATHS: tuple[str, ...] = ("/health", "/docs", "/openapi.json", "/favicon.ico")

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:8]
        request.state.correlation_id = correlation_id
        quiet = request.url.path.startswith(self.QUIET_PATHS)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.error(f"[{correlation_id}] {request.method} {request.url.path} failed in {elapsed_ms:.1f}ms: {e}")
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        if not quiet or response.status_code >= 400:
            level = logging.WARNING if response.status_code >= 400 else logging.INFO
            logger.log(
                level,
                f"[{correlation_id}] {request.method} {request.url.path} -> {response.status_code} "
                f"in {elapsed_ms:.1f}ms",
            )

        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers["X-Response-Time-Ms"] = f"{elapsed_ms:.1f}"
        return response
