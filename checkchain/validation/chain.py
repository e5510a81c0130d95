"""Field validation chain.

Holds the ordered checks declared for one field and runs them with AND
semantics: every check must return True, and execution stops at the first
check that does not. Whatever goes wrong inside a check, the caller only
ever receives a pass, the field's default message, or a message the check
returned on purpose.
"""
from __future__ import annotations

from typing import Any

from checkchain.checks.registry import CheckLookup
from checkchain.core.config import Settings, get_settings
from checkchain.core.errors import AppError, ErrorCode, Ok, Result, check_failed, check_rejected
from checkchain.core.logging import validation_logger

from .invocation import CheckInvocation
from .outcomes import Pass, Reject, normalize


def is_absent(value: Any) -> bool:
    """None, empty strings and empty containers count as "not supplied"."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    return False


class FieldValidationChain:
    """Ordered checks for one named field value."""

    def __init__(
        self,
        name: str,
        value: Any,
        lookup: CheckLookup,
        default_message: str | None = None,
        *,
        logger=None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.name = name
        self.value = value
        self.default_message = default_message or self.settings.default_message(name)
        self.lookup = lookup
        self.logger = logger or validation_logger()
        self.invocations: list[CheckInvocation] = []
        self.is_optional = False

    def append(self, namespace: str, name: str, params: Any = None) -> FieldValidationChain:
        """Declare one more check; returns the chain for further declarations."""
        self.invocations.append(CheckInvocation(
            chain=self,
            namespace=namespace,
            name=name,
            params=params,
            lookup=self.lookup,
            logger=self.logger,
            timeout=self.settings.check_timeout,
        ))
        return self

    def optional(self) -> FieldValidationChain:
        """Skip every check when the value is absent."""
        self.is_optional = True
        return self

    async def execute(self) -> Result[bool, AppError]:
        if self.is_optional and is_absent(self.value):
            self.logger.debug("field_skipped", field=self.name, reason="optional")
            return Ok(True)

        for invocation in self.invocations:
            try:
                raw = await invocation.execute()
            except Exception as exc:
                # operators get the raw error, the client gets the default message
                self.logger.debug(
                    "check_blocked",
                    field=self.name,
                    check=invocation.label,
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                return check_failed(
                    self.name,
                    self.default_message,
                    check=invocation.label,
                    reason=ErrorCode.E9012_CHECK_RAISED,
                    cause=exc,
                )

            outcome, well_formed = normalize(raw)
            if isinstance(outcome, Pass):
                self.logger.debug("check_passed", field=self.name, check=invocation.label)
                continue

            self.logger.debug("check_blocked", field=self.name, check=invocation.label)
            if isinstance(outcome, Reject):
                return check_rejected(self.name, outcome.message, check=invocation.label)
            if not well_formed:
                self.logger.warning(
                    "check_misbehaved",
                    field=self.name,
                    check=invocation.label,
                    returned_type=type(raw).__name__,
                )
                return check_failed(
                    self.name,
                    self.default_message,
                    check=invocation.label,
                    reason=ErrorCode.E9011_CHECK_MISBEHAVED,
                )
            return check_failed(self.name, self.default_message, check=invocation.label)

        return Ok(True)

    def __repr__(self) -> str:
        checks = ", ".join(i.label for i in self.invocations)
        return f"<FieldValidationChain {self.name} [{checks}]>"
