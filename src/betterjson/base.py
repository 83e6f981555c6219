"""``betterjson.base``: Tree traversals shared by the formats
==========================================================

The formats in :mod:`betterjson.text` and :mod:`betterjson.bin` don't know
anything about plugins. They accept a *visitor* ``(key, value) ->
replacement`` that gets called on every node of the tree:

+ :func:`replace_tree` calls it before rendering, in pre-order: the visitor
  sees a node before its children and the children of the *replacement* are
  visited next.
+ :func:`revive_tree` calls it after parsing, bottom-up: the visitor sees a
  node once all its children have been replaced.

The root of the tree has the key ``""``, list items have their index as a key
and mapping items their key.

    >>> def double(key, value):
    ...     return value * 2 if type(value) is int else value
    >>> replace_tree({"a": [1, 2], "b": "x"}, double)
    {'a': [2, 4], 'b': 'x'}

"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Final, TypeAlias

from betterjson.plugin import Key

__all__ = ("ROOT_KEY", "Visitor", "Verbatim", "replace_tree", "revive_tree")

ROOT_KEY: Final = ""

Visitor: TypeAlias = Callable[[Key, Any], Any]


@dataclasses.dataclass(slots=True, frozen=True)
class Verbatim:
    """Returned by a visitor to stop the traversal of a sub-tree.

    *node* is used as is: none of its children are visited.
    """

    node: Any


def _identity(key: Key, value: Any) -> Any:
    return value


def replace_tree(
    value: Any, visitor: Visitor | None, key: Key = ROOT_KEY
) -> Any:
    """Build the tree to render by calling *visitor* on all the nodes

    :class:`dict`, :class:`list` and :class:`tuple` (and their subclasses) are
    traversed. Tuples become lists. Other values are left for the format to
    deal with.

    Raises:
      ValueError: if *value* contains itself.
    """
    if visitor is None:
        visitor = _identity
    # id -> node for the containers currently being visited. Holding on to the
    # nodes makes sure their ids don't get reused while we're in them.
    visiting: dict[int, Any] = {}

    def replace(k: Key, v: Any) -> Any:
        v = visitor(k, v)
        if type(v) is Verbatim:
            return v.node
        if not isinstance(v, dict | list | tuple):
            return v
        addr = id(v)
        if addr in visiting:
            raise ValueError("Recursive value found")
        visiting[addr] = v
        res: Any
        if isinstance(v, dict):
            res = {ck: replace(ck, cv) for ck, cv in v.items()}
        else:
            res = [replace(idx, elt) for idx, elt in enumerate(v)]
        del visiting[addr]
        return res

    return replace(key, value)


def revive_tree(
    node: Any, visitor: Visitor | None, key: Key = ROOT_KEY
) -> Any:
    """Call *visitor* bottom-up on a freshly parsed tree.

    Parsed trees do not share nodes, they are updated in place.
    """
    if visitor is None:
        return node

    def revive(k: Key, v: Any) -> Any:
        if type(v) is dict:
            for ck, cv in v.items():
                v[ck] = revive(ck, cv)
        elif type(v) is list:
            for idx, elt in enumerate(v):
                v[idx] = revive(idx, elt)
        return visitor(k, v)

    return revive(key, node)
