import pytest

from checkchain.checks import CheckRegistry


def test_register_and_get():
    registry = CheckRegistry()
    fn = lambda value, params: True
    registry.register("string", "required", fn)

    assert registry.get("string", "required") is fn
    assert ("string", "required") in registry
    assert len(registry) == 1


def test_get_unknown_returns_none():
    registry = CheckRegistry()
    registry.register("string", "required", lambda v, p: True)

    assert registry.get("string", "missing") is None
    assert registry.get("number", "required") is None
    assert ("number", "required") not in registry


def test_decorator_defaults_name_to_function_name():
    registry = CheckRegistry()

    @registry.check("string")
    def not_blank(value, params):
        return bool(value and value.strip())

    @registry.check("string", "email")
    async def looks_like_email(value, params):
        return "@" in value

    assert registry.get("string", "not_blank") is not_blank
    assert registry.get("string", "email") is looks_like_email
    assert registry.names("string") == ["email", "not_blank"]
    assert registry.namespaces() == ["string"]


def test_reregistering_replaces():
    registry = CheckRegistry()
    first, second = (lambda v, p: True), (lambda v, p: False)
    registry.register("s", "x", first)
    registry.register("s", "x", second)

    assert registry.get("s", "x") is second
    assert len(registry) == 1


def test_non_callable_is_rejected():
    with pytest.raises(TypeError):
        CheckRegistry().register("s", "x", "not a function")
