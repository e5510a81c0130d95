"""Check registry - resolves (namespace, name) pairs to check functions.

A check is any callable `(value, params) -> bool | Exception`, sync or
async. The registry is read-only once requests start being served.
"""
from typing import Any, Awaitable, Callable, Union

from checkchain.core.logging import registry_logger

CheckResult = Union[bool, BaseException, Any]
CheckFunction = Callable[[Any, Any], Union[CheckResult, Awaitable[CheckResult]]]
CheckLookup = Callable[[str, str], Union[CheckFunction, None]]

log = registry_logger()


class CheckRegistry:
    """Namespaced store of check functions."""

    def __init__(self):
        self._checks: dict[str, dict[str, CheckFunction]] = {}

    def register(self, namespace: str, name: str, check: CheckFunction) -> None:
        """Register a check under namespace/name, replacing any previous one."""
        if not callable(check):
            raise TypeError(f"check '{namespace}/{name}' is not callable")
        checks = self._checks.setdefault(namespace, {})
        if name in checks:
            log.debug("check_replaced", check=f"{namespace}/{name}")
        checks[name] = check

    def check(self, namespace: str, name: str | None = None) -> Callable[[CheckFunction], CheckFunction]:
        """Decorator form of register; the name defaults to the function name."""
        def decorator(fn: CheckFunction) -> CheckFunction:
            self.register(namespace, name or fn.__name__, fn)
            return fn
        return decorator

    def get(self, namespace: str, name: str) -> CheckFunction | None:
        """Look up a check. Returns None when nothing is registered."""
        return self._checks.get(namespace, {}).get(name)

    def namespaces(self) -> list[str]:
        return sorted(self._checks)

    def names(self, namespace: str) -> list[str]:
        return sorted(self._checks.get(namespace, {}))

    def __contains__(self, key: tuple[str, str]) -> bool:
        namespace, name = key
        return self.get(namespace, name) is not None

    def __len__(self) -> int:
        return sum(len(checks) for checks in self._checks.values())


default_registry = CheckRegistry()


def check(namespace: str, name: str | None = None) -> Callable[[CheckFunction], CheckFunction]:
    """Register a check on the default registry."""
    return default_registry.check(namespace, name)
