"""``betterjson.envelope``: Wire representation of plugin values
=============================================================

Values produced by plugins are wrapped in an envelope so that they can be
recognised when the document is read back::

    >>> Envelope("set", [1, 2]).to_node("$")
    {'$': {'version': 1, 'type': 'set', 'value': [1, 2]}}

A node is an envelope if it is a :class:`dict` whose only key is the marker
key. Objects that have other keys next to the marker are left alone:

    >>> is_envelope({'$': {}}, "$")
    True
    >>> is_envelope({'$': {}, 'other': 1}, "$")
    False

Note that user data with a single key equal to the marker key will be mistaken
for an envelope. The marker key is configurable to work around this.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Final

__all__ = ("VERSION", "Envelope", "is_envelope", "from_node")

#: The only version of the envelope format.
VERSION: Final = 1


@dataclasses.dataclass(slots=True, frozen=True)
class Envelope:
    """A value wrapped by a plugin.

    Parameters:
      type(str): The type identifier of the plugin that produced *value*
      value: The plain tree returned by the plugin
      version(int): The version of the envelope format
    """

    type: Any
    value: Any
    version: Any = VERSION

    def to_node(self, marker_key: str) -> dict[str, Any]:
        return {
            marker_key: {
                "version": self.version,
                "type": self.type,
                "value": self.value,
            }
        }

    def is_supported(self) -> bool:
        # bools are ints in python and ``True == 1``
        return type(self.version) is int and self.version == VERSION


def is_envelope(node: Any, marker_key: str) -> bool:
    return type(node) is dict and len(node) == 1 and marker_key in node


def from_node(node: dict[str, Any], marker_key: str) -> Envelope:
    """Read the fields of an envelope.

    Missing fields are read as :const:`None`; an envelope with a missing
    version is therefore unsupported.
    """
    body = node[marker_key]
    if not isinstance(body, dict):
        return Envelope(type=None, value=None, version=None)
    return Envelope(
        type=body.get("type"),
        value=body.get("value"),
        version=body.get("version"),
    )
