"""
Observability helpers.

Logging setup for the "umrah" logger tree and a request middleware that
tags every response with a correlation id and its processing time.
"""

import logging
import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("umrah.http")

CORRELATION_HEADER = "X-Correlation-ID"


def configure_logging(level: str) -> None:
    """Install a root handler once; later calls only adjust the level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("umrah").setLevel(level.upper())


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Per-request correlation id, timing header and one structured log line."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"

        logger.log(
            _level_for(response.status_code),
            "%s %s -> %s (%.2f ms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            extra={
                "correlation_id": correlation_id,
                "status_code": response.status_code,
                "client_ip": request.client.host if request.client else "unknown",
            },
        )
        return response
