"""A single declared check bound to a field value."""
from __future__ import annotations

import asyncio
import inspect
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from checkchain.checks.registry import CheckLookup
from checkchain.core.errors import ErrorCode

if TYPE_CHECKING:
    from .chain import FieldValidationChain

EMPTY_PARAMS: Mapping = MappingProxyType({})


def freeze_params(params: Any) -> Any:
    """Make check parameters read-only (lists -> tuples, dicts -> mapping proxies)."""
    if params is None:
        return EMPTY_PARAMS
    if isinstance(params, MappingProxyType):
        return params
    if isinstance(params, Mapping):
        return MappingProxyType(dict(params))
    if isinstance(params, list):
        return tuple(params)
    return params


@dataclass(frozen=True, slots=True)
class CheckInvocation:
    """One `namespace.name(params)` declaration on a chain.

    Resolving and calling the check happens in `execute`; exceptions raised
    by the check propagate to the chain, which masks them.
    """
    chain: FieldValidationChain = field(repr=False, compare=False)
    namespace: str
    name: str
    params: Any = None
    lookup: CheckLookup = field(default=None, repr=False, compare=False)
    logger: Any = field(default=None, repr=False, compare=False)
    timeout: float | None = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "params", freeze_params(self.params))

    @property
    def label(self) -> str:
        return f"{self.namespace}/{self.name}"

    async def execute(self) -> Any:
        """Run the check against the chain's value and return its raw result.

        A check that is not registered yields False.
        """
        check = self.lookup(self.namespace, self.name)
        if check is None:
            self.logger.error(
                "check_not_found",
                check=self.label,
                field=self.chain.name,
                code=ErrorCode.E9010_CHECK_NOT_FOUND.name,
            )
            return False

        result = check(self.chain.value, self.params)
        if inspect.isawaitable(result):
            if self.timeout is not None:
                result = await asyncio.wait_for(result, timeout=self.timeout)
            else:
                result = await result
        return result
