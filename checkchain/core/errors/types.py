"""Error Types for Check Execution

Result/Either types used by the chain executor, plus the AppError record
that carries a client-safe message and operator-only metadata across the
session boundary.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Error code taxonomy.

    E2xxx: Client-facing validation outcomes (rendered as 400)
    E9xxx: Internal failures (logged for operators, masked for clients)
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2001_CHECK_FAILED = 2001
    E2002_CHECK_REJECTED = 2002
    E2021_INVALID_JSON = 2021

    # Internal (E9xxx)
    E9000_INTERNAL_GENERIC = 9000
    E9001_UNEXPECTED_ERROR = 9001
    E9010_CHECK_NOT_FOUND = 9010
    E9011_CHECK_MISBEHAVED = 9011
    E9012_CHECK_RAISED = 9012

    @property
    def http_status(self) -> int:
        if 2000 <= self.value < 3000:
            return 400
        return 500

    @property
    def category(self) -> str:
        if 2000 <= self.value < 3000:
            return "validation"
        return "internal"

    @property
    def is_client_safe(self) -> bool:
        """Whether the message of an error with this code may reach the client."""
        return self.category == "validation"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Immutable context for error tracing."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""
    request_id: str | None = None


@dataclass(frozen=True, slots=True)
class AppError:
    """Application error with a typed code and a human-readable message.

    `metadata` is for operators and is never rendered to clients for
    internal codes. `cause` keeps the raw exception for logging.
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: BaseException | None = None

    def with_context(self, **kwargs) -> AppError:
        """Create new error with updated context."""
        new_ctx = ErrorContext(
            correlation_id=kwargs.get("correlation_id") or self.context.correlation_id,
            timestamp=self.context.timestamp,
            origin=kwargs.get("origin", self.context.origin),
            request_id=kwargs.get("request_id", self.context.request_id),
        )
        return AppError(
            code=self.code,
            message=self.message,
            context=new_ctx,
            metadata=self.metadata,
            cause=self.cause,
        )

    def to_dict(self) -> dict:
        """Serialize error for API responses."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]

