import copy

import pytest

from checkchain.validation import ChainProxy, FieldValidationChain


@pytest.fixture
def proxy(registry, logger):
    return ChainProxy(FieldValidationChain("title", "hello", registry.get, logger=logger))


def _declared(proxy):
    return [(i.namespace, i.name, i.params) for i in proxy.unwrap().invocations]


def test_unknown_attribute_becomes_namespace(proxy):
    proxy.string("required")
    assert _declared(proxy) == [("string", "required", ())]


def test_positional_params_become_tuple(proxy):
    proxy.string("length", 1, 20)
    assert _declared(proxy) == [("string", "length", (1, 20))]


def test_keyword_params_become_mapping(proxy):
    proxy.number("range", min=1, max=5)
    assert dict(proxy.unwrap().invocations[0].params) == {"min": 1, "max": 5}


def test_mixed_params_are_rejected(proxy):
    with pytest.raises(TypeError):
        proxy.number("range", 1, max=5)


def test_namespace_calls_chain(proxy):
    result = proxy.string("required").string("min_length", 3).custom("slug")

    assert result is proxy
    assert [n for n, _, _ in _declared(proxy)] == ["string", "string", "custom"]


def test_chain_members_are_not_intercepted(proxy):
    assert proxy.name == "title"
    assert proxy.value == "hello"
    assert proxy.default_message == "invalid value for title"
    assert proxy.invocations == []


def test_builder_members_return_the_proxy(proxy):
    assert proxy.optional() is proxy
    assert proxy.append("string", "required") is proxy
    assert proxy.optional().string("required") is proxy
    assert proxy.is_optional is True


def test_declare_is_the_generic_form(proxy):
    proxy.declare("string", "required")
    assert _declared(proxy) == [("string", "required", ())]


def test_private_and_dunder_names_raise(proxy):
    with pytest.raises(AttributeError):
        proxy._internal
    with pytest.raises(AttributeError):
        proxy.__wrapped__
    assert copy.copy(proxy).unwrap() is proxy.unwrap()


def test_attribute_assignment_reaches_chain(proxy):
    proxy.default_message = "bad title"
    assert proxy.unwrap().default_message == "bad title"


@pytest.mark.asyncio
async def test_execute_is_delegated(proxy):
    proxy.string("required")
    assert (await proxy.execute()).is_ok()
