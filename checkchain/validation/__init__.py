"""Request Field Validation

Declare checks per request field and resolve them to a single pass/fail
decision with a client-safe message.

Usage:
    from checkchain.validation import RequestValidationSession

    session = RequestValidationSession(registry.get, sources=sources)
    session.check_body("username").string("required").string("max_length", 32)
    await session.validate_all()
"""
from .outcomes import CheckOutcome, Pass, Fail, Reject, normalize
from .invocation import CheckInvocation
from .chain import FieldValidationChain
from .proxy import ChainProxy
from .sources import RequestSources
from .session import RequestValidationSession, SessionState
from .errors import ValidationFailure, SessionStateError

__all__ = [
    "CheckOutcome",
    "Pass",
    "Fail",
    "Reject",
    "normalize",
    "CheckInvocation",
    "FieldValidationChain",
    "ChainProxy",
    "RequestSources",
    "RequestValidationSession",
    "SessionState",
    "ValidationFailure",
    "SessionStateError",
]
