"""Session-level exceptions."""
from __future__ import annotations

from checkchain.core.errors import AppError, AppErrorException


class ValidationFailure(AppErrorException):
    """A field chain did not pass; rendered to the client as 400 Bad Request.

    `message` is always client safe: either the field's default message or
    an error a check returned on purpose.
    """

    def __init__(self, error: AppError):
        super().__init__(error)
        self.message = error.message

    @property
    def status_code(self) -> int:
        return 400

    @property
    def field(self) -> str | None:
        return self.error.metadata.get("field")


class SessionStateError(RuntimeError):
    """A session was used after validation started."""
