"""Check outcomes.

A check may return True, False, an error, or anything else. `normalize`
folds those into exactly three outcomes and reports whether the raw value
was one a check is allowed to return.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union, final

from checkchain.core.errors import AppError


@final
@dataclass(frozen=True, slots=True)
class Pass:
    """The value satisfied the check."""


@final
@dataclass(frozen=True, slots=True)
class Fail:
    """The value did not satisfy the check; the field's default message applies."""


@final
@dataclass(frozen=True, slots=True)
class Reject:
    """The check returned its own error; `message` goes to the client unchanged."""
    message: str


CheckOutcome = Union[Pass, Fail, Reject]

PASS = Pass()
FAIL = Fail()


def normalize(raw: Any) -> tuple[CheckOutcome, bool]:
    """Map a raw check return value to (outcome, well_formed).

    Only the booleans themselves count: `1`, `"yes"` or `None` are
    malformed and fail.
    """
    if raw is True:
        return PASS, True
    if raw is False:
        return FAIL, True
    if isinstance(raw, AppError):
        return Reject(raw.message), True
    if isinstance(raw, BaseException):
        return Reject(str(raw)), True
    return FAIL, False
