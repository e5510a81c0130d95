"""FastAPI Exception Handlers

Renders AppErrors (including session validation failures) as JSON error
envelopes. Internal failures are logged with their detail and rendered
with a fixed message.
"""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from checkchain.core.logging import get_logger

from .types import AppError, ErrorCode, ErrorContext

log = get_logger("checkchain.errors")


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Use this where control flow is exception based (route handlers,
    FastAPI dependencies) rather than Result based.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(error.message)

    @property
    def status_code(self) -> int:
        return self.error.code.http_status


def result_to_response(error: AppError, status_code: int | None = None) -> JSONResponse:
    """Convert AppError to JSONResponse."""
    status_code = status_code or error.code.http_status

    log_method = log.warning if status_code < 500 else log.error
    log_method(
        "error_response",
        status=status_code,
        error_code=error.code.name,
        message=error.message,
        correlation_id=error.context.correlation_id,
        origin=error.context.origin,
        metadata=error.metadata,
    )

    return JSONResponse(status_code=status_code, content=error.to_dict())


async def app_error_handler(request: Request, exc: AppErrorException) -> JSONResponse:
    error = exc.error.with_context(
        request_id=request.headers.get("X-Request-ID"),
        correlation_id=request.headers.get("X-Correlation-ID"),
    )
    return result_to_response(error)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework HTTP exceptions in the same envelope."""
    status_code = exc.status_code
    if status_code in (400, 422):
        code = ErrorCode.E2000_VALIDATION_GENERIC
    elif status_code >= 500:
        code = ErrorCode.E9001_UNEXPECTED_ERROR
    else:
        code = ErrorCode.E9000_INTERNAL_GENERIC

    error = AppError(
        code=code,
        message=str(exc.detail) if exc.detail else f"HTTP {status_code}",
        context=ErrorContext(
            correlation_id=request.headers.get("X-Correlation-ID", ""),
            origin="http",
        ),
    )
    return result_to_response(error, status_code=status_code)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log the traceback, never render the exception text."""
    error = AppError(
        code=ErrorCode.E9001_UNEXPECTED_ERROR,
        message="An unexpected error occurred",
        context=ErrorContext(
            correlation_id=request.headers.get("X-Correlation-ID", ""),
            origin="unhandled",
        ),
        cause=exc,
    )
    log.exception(
        "unhandled_exception",
        error_type=type(exc).__name__,
        error_message=str(exc),
        correlation_id=error.context.correlation_id,
    )
    return result_to_response(error)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppErrorException, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

