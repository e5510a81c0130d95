"""Error Handling

Result types and AppError for chain outcomes, builders for the validation
taxonomy, and FastAPI handlers that render them.

Usage:
    from checkchain.core.errors import Ok, Err, check_failed

    async def execute(self) -> Result[bool, AppError]:
        ...
        return check_failed(self.name, self.default_message)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    validation_error,
    check_failed,
    check_rejected,
    invalid_json,
)

from .handlers import (
    AppErrorException,
    register_error_handlers,
    result_to_response,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "validation_error",
    "check_failed",
    "check_rejected",
    "invalid_json",
    "AppErrorException",
    "register_error_handlers",
    "result_to_response",
]
