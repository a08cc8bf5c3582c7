# src/taskboard/transport/query.py

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(prefix: str, value: Any, out: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for k, v in value.items():
            _flatten(f"{prefix}[{k}]" if prefix else str(k), v, out)
        return
    if isinstance(value, (list, tuple)):
        for i, v in enumerate(value):
            _flatten(f"{prefix}[{i}]", v, out)
        return
    out.append((prefix, _scalar(value)))


def serialize_query(params: Mapping[str, Any]) -> str:
    """
    Serialize nested filter/sort params in bracket notation.

    {"where": {"uid": {"id": "u1"}}, "orderBy": {"createdAt": "asc"}}
    -> "where[uid][id]=u1&orderBy[createdAt]=asc"

    Lists are indexed (a[0]=x), booleans become true/false, None values are dropped.
    """
    pairs: list[tuple[str, str]] = []
    _flatten("", params, pairs)
    return "&".join(f"{quote(k, safe='[]')}={quote(v, safe='')}" for k, v in pairs)
