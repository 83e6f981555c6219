"""
``betterjson.text``: JSON format layer
======================================

Thin wrapper around :mod:`json` that runs a visitor over the tree (see
:mod:`betterjson.base`).

An indentation of ``0`` (or :const:`None`) renders the whole document on one
line with no whitespace:

    >>> dump_text({"a": [1, 2]})
    '{"a":[1,2]}'
    >>> print(dump_text({"a": [1, 2]}, indent=2))
    {
      "a": [
        1,
        2
      ]
    }

"""

from __future__ import annotations

import json
from typing import Any, Final

from . import base

__all__ = ("dump_text", "load_text")

COMPACT_SEPARATORS: Final = (",", ":")


def dump_text(
    obj: Any, visitor: base.Visitor | None = None, indent: int | None = None
) -> str:
    """Serialise *obj* to JSON

    Raises:
      TypeError: *obj* contains values :mod:`json` can't represent.
      ValueError: *obj* contains itself.
    """
    tree = base.replace_tree(obj, visitor)
    if not indent:
        return json.dumps(
            tree, ensure_ascii=False, separators=COMPACT_SEPARATORS
        )
    return json.dumps(tree, ensure_ascii=False, indent=indent)


def load_text(s: str, visitor: base.Visitor | None = None) -> Any:
    """
    Load a JSON document

    Raises:
      json.JSONDecodeError: *s* is not valid JSON.
      TypeError: *s* is not a string.
    """
    return base.revive_tree(json.loads(s), visitor)
