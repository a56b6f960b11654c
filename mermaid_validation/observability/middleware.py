"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: starlette, mermaid_validation.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from mermaid_validation.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status and timing."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        context = {
            "method": request.method,
            "path": request.url.path,
            "client_host": request.client.host if request.client else None,
        }

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{request.method} {request.url.path} - unhandled {type(e).__name__}",
                extra={**context, "process_time_ms": _process_time_ms(start)},
            )
            raise

        logger.info(
            f"{request.method} {request.url.path} - {response.status_code}",
            extra={
                **context,
                "status_code": response.status_code,
                "process_time_ms": _process_time_ms(start),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """
    Bind a correlation ID to the request context.

    Uses the caller's X-Correlation-ID when present, otherwise a new UUID,
    and echoes it on the response.
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


def _process_time_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
