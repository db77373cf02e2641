# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Query string codec for Helix requests.

Helix expects repeated keys for list parameters (``id=1&id=2``), lowercase
booleans and RFC 3339 timestamps. Parameters whose value is None are not
sent at all.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from urllib.parse import parse_qsl, urlencode

QueryPairs = list[tuple[str, str]]


def encode_value(value: Any) -> str:
    """Encode a single scalar parameter value as Helix expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
    return str(value)


def encode_params(params: Mapping[str, Any]) -> QueryPairs:
    """
    Flatten a parameter mapping into ordered (key, value) pairs.

    Lists and tuples repeat their key once per element; None values and
    empty lists are dropped.
    """
    pairs: QueryPairs = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            pairs.extend((key, encode_value(item)) for item in value)
        else:
            pairs.append((key, encode_value(value)))
    return pairs


def to_query_string(pairs: Iterable[tuple[str, str]]) -> str:
    return urlencode(list(pairs))


def parse_query(query: str) -> dict[str, list[str]]:
    """
    Parse a query string back into ``{key: [values...]}``.

    Order of values for a repeated key is preserved. A leading ``?`` is ignored.
    """
    result: dict[str, list[str]] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        result.setdefault(key, []).append(value)
    return result


__all__ = [
    "QueryPairs",
    "encode_params",
    "encode_value",
    "parse_query",
    "to_query_string",
]
