"""Shared fixtures: a check registry with well-behaved and misbehaving
checks, call-counting spies, and a logger that records events."""
import asyncio

import pytest

from checkchain.checks import CheckRegistry
from checkchain.core.config import Settings


class RecordingLogger:
    """Stand-in for a structlog BoundLogger that keeps (level, event, kw)."""

    def __init__(self):
        self.records: list[tuple[str, str, dict]] = []

    def _log(self, level, event, **kw):
        self.records.append((level, event, kw))

    def debug(self, event, **kw):
        self._log("debug", event, **kw)

    def info(self, event, **kw):
        self._log("info", event, **kw)

    def warning(self, event, **kw):
        self._log("warning", event, **kw)

    def error(self, event, **kw):
        self._log("error", event, **kw)

    def events(self, level=None):
        return [e for lvl, e, _ in self.records if level is None or lvl == level]

    def find(self, event):
        return [kw for _, e, kw in self.records if e == event]


class Spy:
    """Check that records its calls and returns a fixed result."""

    def __init__(self, result=True):
        self.result = result
        self.calls: list[tuple] = []

    def __call__(self, value, params):
        self.calls.append((value, params))
        return self.result

    @property
    def count(self):
        return len(self.calls)


async def _async_required(value, params):
    await asyncio.sleep(0)
    return bool(value)


def _raises(value, params):
    raise RuntimeError("database password is hunter2")


def _min_length(value, params):
    limit = params[0] if isinstance(params, tuple) else params.get("min", 0)
    if value is None or len(value) < limit:
        return ValueError(f"must be at least {limit} characters")
    return True


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def registry():
    reg = CheckRegistry()
    reg.register("string", "required", lambda value, params: bool(value))
    reg.register("string", "async_required", _async_required)
    reg.register("string", "min_length", _min_length)
    reg.register("string", "explode", _raises)
    reg.register("string", "garbage", lambda value, params: "yes")
    reg.register("string", "reject", lambda value, params: ValueError("X"))
    return reg


@pytest.fixture
def spy_factory(registry):
    def make(namespace, name, result=True):
        spy = Spy(result)
        registry.register(namespace, name, spy)
        return spy
    return make
