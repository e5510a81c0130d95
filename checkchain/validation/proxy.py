"""Namespace-call sugar over a FieldValidationChain.

Check namespaces are registered at runtime, so the chain cannot define a
method per namespace. `ChainProxy` turns any attribute the chain does not
have into a namespace:

    body = session.check_body("email")
    body.string("required").string("max_length", 120)

is the same as

    chain.append("string", "required", ())
    chain.append("string", "max_length", (120,))
"""
from __future__ import annotations

import functools
import inspect
from types import MappingProxyType
from typing import Any, Callable

from .chain import FieldValidationChain


class ChainProxy:
    __slots__ = ("_chain",)

    def __init__(self, chain: FieldValidationChain):
        object.__setattr__(self, "_chain", chain)

    def declare(self, namespace: str, name: str, *args: Any, **kwargs: Any) -> ChainProxy:
        """Append `namespace/name` with positional params (tuple) or keyword params (mapping)."""
        if args and kwargs:
            raise TypeError(
                f"check '{namespace}/{name}' takes either positional or keyword params, not both"
            )
        params = MappingProxyType(kwargs) if kwargs else args
        self._chain.append(namespace, name, params)
        return self

    def unwrap(self) -> FieldValidationChain:
        return self._chain

    def __getattr__(self, attr: str) -> Any:
        # only reached when normal lookup on the proxy failed
        chain = object.__getattribute__(self, "_chain")
        try:
            member = getattr(chain, attr)
        except AttributeError:
            if attr.startswith("_"):
                raise
            return self._namespace(attr)
        if inspect.ismethod(member):
            return self._rebind(member)
        return member

    def _rebind(self, method: Callable[..., Any]) -> Callable[..., Any]:
        """Chain builder methods return the proxy, not the bare chain."""
        @functools.wraps(method)
        def call(*args: Any, **kwargs: Any) -> Any:
            result = method(*args, **kwargs)
            return self if result is self._chain else result
        return call

    def _namespace(self, namespace: str) -> Callable[..., ChainProxy]:
        def declare(name: str, *args: Any, **kwargs: Any) -> ChainProxy:
            return self.declare(namespace, name, *args, **kwargs)
        declare.__name__ = namespace
        return declare

    def __setattr__(self, attr: str, value: Any) -> None:
        if attr in ChainProxy.__slots__:
            object.__setattr__(self, attr, value)
        else:
            setattr(self._chain, attr, value)

    def __repr__(self) -> str:
        return f"ChainProxy({self._chain!r})"
