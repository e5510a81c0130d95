"""checkchain - declarative per-field request validation for FastAPI."""
from checkchain.checks import CheckRegistry, check, default_registry
from checkchain.core.dependencies import get_validation
from checkchain.main import create_app, setup_validation
from checkchain.validation import (
    ChainProxy,
    FieldValidationChain,
    RequestSources,
    RequestValidationSession,
    SessionStateError,
    ValidationFailure,
)

__version__ = "0.1.0"

__all__ = [
    "CheckRegistry",
    "check",
    "default_registry",
    "get_validation",
    "create_app",
    "setup_validation",
    "ChainProxy",
    "FieldValidationChain",
    "RequestSources",
    "RequestValidationSession",
    "SessionStateError",
    "ValidationFailure",
]
