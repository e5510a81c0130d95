from .registry import (
    CheckFunction,
    CheckLookup,
    CheckRegistry,
    check,
    default_registry,
)

__all__ = ["CheckFunction", "CheckLookup", "CheckRegistry", "check", "default_registry"]
