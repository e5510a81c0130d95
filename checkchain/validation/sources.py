"""Field value sources of one request."""
from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from starlette.requests import Request

from checkchain.core.errors import AppErrorException, invalid_json

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _readonly(data: Mapping | None) -> Mapping:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True, slots=True)
class RequestSources:
    """Body, query-string and path-parameter mappings, each empty by default."""
    body: Mapping = field(default_factory=dict)
    query: Mapping = field(default_factory=dict)
    params: Mapping = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "body", _readonly(self.body))
        object.__setattr__(self, "query", _readonly(self.query))
        object.__setattr__(self, "params", _readonly(self.params))

    @classmethod
    async def from_request(cls, request: Request) -> RequestSources:
        """Read an already-routed Starlette request.

        Only JSON objects and form bodies populate `body`; any other
        payload leaves it empty. Malformed JSON is a 400.
        """
        return cls(
            body=await _read_body(request),
            query=_read_query(request),
            params=dict(request.path_params),
        )


def _read_query(request: Request) -> dict[str, Any]:
    """Query values by key. A key repeated in the query string maps to a list."""
    query = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        query[key] = values if len(values) > 1 else values[0]
    return query


async def _read_body(request: Request) -> dict[str, Any]:
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)

    if content_type == "application/json" or content_type.endswith("+json"):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError as exc:
            error = invalid_json(str(exc), origin="request_sources").unwrap_err()
            raise AppErrorException(error) from exc
        return data if isinstance(data, dict) else {}

    return {}
