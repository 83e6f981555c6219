"""``betterjson.plugin``: Plugins
===============================

A :class:`Plugin` teaches the serializer how to turn values of one type into a
tree the underlying format can represent and back.

Plugins are explicit: each one names the type identifier it handles. The
identifier has to match what :func:`betterjson.codec.classify` returns for the
values it should own; :func:`betterjson.utils.type_id` computes it for a
class::

    >>> import fractions
    >>> from betterjson.utils import type_id
    >>> p = create_plugin(
    ...     type_id(fractions.Fraction),
    ...     lambda key, f: [f.numerator, f.denominator],
    ...     lambda key, v: fractions.Fraction(*v),
    ... )
    >>> p.type_id
    'fractions.Fraction'

"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, TypeAlias

from betterjson import errors

__all__ = ("Key", "Encoder", "Decoder", "Plugin", "create_plugin")

#: The key of a node in its parent: ``""`` for the root, an index for list
#: items and the key for mapping items.
Key: TypeAlias = Any

Encoder: TypeAlias = Callable[[Key, Any], Any]

Decoder: TypeAlias = Callable[[Key, Any], Any]


@dataclasses.dataclass(slots=True, frozen=True)
class Plugin:
    """Binds a type identifier to a pair of ``encode``/``decode`` functions.

    Use :func:`create_plugin` to build plugins.

    Parameters:
      type_id(str): The identifier of the type handled by the plugin.
      encode: ``(key, value) -> tree`` where *tree* is representable by the
        underlying format (it may contain values handled by other plugins).
      decode: ``(key, tree) -> value``, the inverse of *encode*.
    """

    type_id: str
    encode: Encoder
    decode: Decoder


def create_plugin(type_id: str, encode: Encoder, decode: Decoder) -> Plugin:
    """Create a new plugin.

    Raises:
      InvalidPluginError: if *type_id* isn't a string or if *encode* or
        *decode* aren't callable.
    """
    if not isinstance(type_id, str):
        raise errors.InvalidPluginError(
            "The type identifier of the plugin must be a string, got "
            f"{type(type_id).__name__!r}."
        )
    if not callable(encode):
        raise errors.InvalidPluginError(
            "The encode function must be callable."
        )
    if not callable(decode):
        raise errors.InvalidPluginError(
            "The decode function must be callable."
        )
    return Plugin(type_id, encode, decode)
