"""
``betterjson.plugins``: Bundled plugins
=======================================

+ :class:`set`: as a list of its elements
+ :class:`tuple`: as a list of its elements
+ :class:`collections.OrderedDict`: as a list of ``[key, value]`` pairs, keys
  don't have to be strings.
+ :class:`datetime.datetime`: in ISO 8601 format
+ :class:`decimal.Decimal`: as its exact string representation
+ :class:`re.Pattern`: the pattern and its flags

All of them are in :data:`BUNDLED`.
"""

from __future__ import annotations

import collections
import datetime
import decimal
import re
from typing import Any, Final

from betterjson.plugin import Key, create_plugin
from betterjson.utils import type_id

__all__ = (
    "SET",
    "TUPLE",
    "ORDERED_DICT",
    "DATETIME",
    "DECIMAL",
    "PATTERN",
    "BUNDLED",
)


def _encode_set(key: Key, s: set[Any]) -> list[Any]:
    return list(s)


def _decode_set(key: Key, elts: list[Any]) -> set[Any]:
    return set(elts)


def _encode_tuple(key: Key, t: tuple[Any, ...]) -> list[Any]:
    return list(t)


def _decode_tuple(key: Key, elts: list[Any]) -> tuple[Any, ...]:
    return tuple(elts)


def _encode_ordered_dict(
    key: Key, d: collections.OrderedDict[Any, Any]
) -> list[list[Any]]:
    return [[k, v] for k, v in d.items()]


def _decode_ordered_dict(
    key: Key, items: list[list[Any]]
) -> collections.OrderedDict[Any, Any]:
    return collections.OrderedDict((k, v) for k, v in items)


def _encode_datetime(key: Key, d: datetime.datetime) -> str:
    return d.isoformat()


def _decode_datetime(key: Key, s: str) -> datetime.datetime:
    return datetime.datetime.fromisoformat(s)


def _encode_decimal(key: Key, d: decimal.Decimal) -> str:
    return str(d)


def _decode_decimal(key: Key, s: str) -> decimal.Decimal:
    return decimal.Decimal(s)


def _encode_pattern(key: Key, p: re.Pattern[Any]) -> dict[str, Any]:
    if isinstance(p.pattern, bytes):
        return {
            "pattern": p.pattern.decode("latin-1"),
            "flags": p.flags,
            "bytes": True,
        }
    return {"pattern": p.pattern, "flags": p.flags}


def _decode_pattern(key: Key, v: dict[str, Any]) -> re.Pattern[Any]:
    pattern = v["pattern"]
    if v.get("bytes", False):
        return re.compile(pattern.encode("latin-1"), v["flags"])
    return re.compile(pattern, v["flags"])


SET: Final = create_plugin(type_id(set), _encode_set, _decode_set)

TUPLE: Final = create_plugin(type_id(tuple), _encode_tuple, _decode_tuple)

ORDERED_DICT: Final = create_plugin(
    type_id(collections.OrderedDict),
    _encode_ordered_dict,
    _decode_ordered_dict,
)

DATETIME: Final = create_plugin(
    type_id(datetime.datetime), _encode_datetime, _decode_datetime
)

DECIMAL: Final = create_plugin(
    type_id(decimal.Decimal), _encode_decimal, _decode_decimal
)

PATTERN: Final = create_plugin(
    type_id(re.Pattern), _encode_pattern, _decode_pattern
)

#: All the plugins bundled with betterjson
BUNDLED: Final = (SET, TUPLE, ORDERED_DICT, DATETIME, DECIMAL, PATTERN)
