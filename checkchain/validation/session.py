"""Per-request validation session.

Collects one chain per field accessor call and validates them all on
demand, failing the request at the first chain that does not pass.

Usage:
    session = RequestValidationSession(registry.get, sources=sources)
    session.check_body("email").string("required").string("email")
    session.check_query("page").optional().number("positive_int")
    await session.validate_all()  # raises ValidationFailure on the first bad field
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from checkchain.checks.registry import CheckLookup
from checkchain.core.config import Settings, get_settings
from checkchain.core.logging import validation_logger

from .chain import FieldValidationChain
from .errors import SessionStateError, ValidationFailure
from .proxy import ChainProxy
from .sources import RequestSources


class SessionState(Enum):
    EMPTY = "empty"
    COLLECTING = "collecting"
    EVALUATING = "evaluating"
    PASSED = "passed"
    FAILED = "failed"


class RequestValidationSession:
    """All field chains declared while handling one request. Single use."""

    def __init__(
        self,
        lookup: CheckLookup,
        *,
        logger=None,
        sources: RequestSources | None = None,
        settings: Settings | None = None,
    ):
        self.lookup = lookup
        self.logger = logger or validation_logger()
        self.sources = sources or RequestSources()
        self.settings = settings or get_settings()
        self.state = SessionState.EMPTY
        self._chains: list[ChainProxy] = []

    @property
    def chains(self) -> tuple[ChainProxy, ...]:
        return tuple(self._chains)

    def register_field(self, name: str, value: Any, default_message: str | None = None) -> ChainProxy:
        if self.state not in (SessionState.EMPTY, SessionState.COLLECTING):
            raise SessionStateError(f"cannot register '{name}': session is {self.state.value}")
        chain = FieldValidationChain(
            name,
            value,
            self.lookup,
            default_message,
            logger=self.logger,
            settings=self.settings,
        )
        proxy = ChainProxy(chain)
        self._chains.append(proxy)
        self.state = SessionState.COLLECTING
        return proxy

    def check_body(self, name: str, message: str | None = None) -> ChainProxy:
        return self.register_field(name, self.sources.body.get(name), message)

    def check_query(self, name: str, message: str | None = None) -> ChainProxy:
        return self.register_field(name, self.sources.query.get(name), message)

    def check_param(self, name: str, message: str | None = None) -> ChainProxy:
        return self.register_field(name, self.sources.params.get(name), message)

    async def validate_all(self) -> bool:
        """Run every chain in registration order.

        Returns True when all pass. Raises ValidationFailure with the first
        failing chain's error; chains after it are not executed.
        """
        if self.state not in (SessionState.EMPTY, SessionState.COLLECTING):
            raise SessionStateError(f"session already {self.state.value}")
        self.state = SessionState.EVALUATING
        self.logger.debug("validation_started", fields=len(self._chains))

        for proxy in self._chains:
            result = await proxy.execute()
            if result.is_err():
                error = result.unwrap_err()
                self.state = SessionState.FAILED
                self.logger.debug(
                    "validation_blocked",
                    field=proxy.name,
                    code=error.code.name,
                    check=error.metadata.get("check"),
                )
                raise ValidationFailure(error)

        self.state = SessionState.PASSED
        self.logger.debug("validation_passed", fields=len(self._chains))
        return True
