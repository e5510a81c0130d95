"""Request Middleware for Logging and Tracing

Binds a correlation ID for the lifetime of each request so the engine's
check and session log lines can be tied back to the request that caused
them, and logs request completion with its status.
"""
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from checkchain.core.logging import (
    api_logger,
    bind_context,
    clear_context,
    generate_correlation_id,
)

log = api_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs requests/responses and manages correlation context."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID") or generate_correlation_id()

        clear_context()
        bind_context(
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
        )
        start = time.perf_counter()
        log.debug("request_started")

        try:
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start) * 1000
            response.headers["X-Correlation-ID"] = correlation_id

            status = response.status_code
            log_method = log.info if status < 400 else (log.warning if status < 500 else log.error)
            log_method("request_completed", status=status, duration_ms=round(duration_ms, 2))
            return response
        except Exception as exc:
            log.exception(
                "request_failed",
                error_type=type(exc).__name__,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise
        finally:
            clear_context()
