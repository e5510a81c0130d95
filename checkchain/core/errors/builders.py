"""Error Builders

Constructors for the validation taxonomy. Each returns `Err[AppError]`
so chain execution can hand them straight back as a Result.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    check: str | None = None,
    origin: str = "",
    cause: BaseException | None = None,
    **metadata,
) -> Err[AppError]:
    """Create a client-facing validation error."""
    meta = {"field": field, "check": check, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def check_failed(
    field: str,
    message: str,
    *,
    check: str | None = None,
    reason: ErrorCode | None = None,
    cause: BaseException | None = None,
) -> Err[AppError]:
    """A check did not pass; the client only ever sees the field's default message.

    `reason` records the internal kind (missing check, misbehaving check,
    raised exception) for operators when the failure was masked.
    """
    return validation_error(
        message,
        code=ErrorCode.E2001_CHECK_FAILED,
        field=field,
        check=check,
        origin="chain",
        cause=cause,
        reason=reason.name if reason else None,
    )


def check_rejected(field: str, message: str, *, check: str | None = None) -> Err[AppError]:
    """A check returned its own error; its message is surfaced verbatim."""
    return validation_error(
        message,
        code=ErrorCode.E2002_CHECK_REJECTED,
        field=field,
        check=check,
        origin="chain",
    )


def invalid_json(message: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Invalid JSON: {message}",
        code=ErrorCode.E2021_INVALID_JSON,
        origin=origin,
    )

