"""
``betterjson.codec``: Plugin dispatch
=====================================

The :class:`EnvelopeCodec` is called on every node traversed by the format
layer. It works out the type identifier of the node (:func:`classify`), looks
for a plugin handling it and wraps/unwraps the node in an
:class:`~betterjson.envelope.Envelope`.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Final, Mapping

from betterjson import envelope, errors, utils
from betterjson.plugin import Key, Plugin

__all__ = ("UNDEFINED", "classify", "EnvelopeCodec")

logger = logging.getLogger(__name__)


class _Undefined:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


#: A value that is distinct from :const:`None`. It isn't representable in the
#: formats unless a plugin is registered for ``"undefined"``.
UNDEFINED: Final = _Undefined()


def classify(value: Any) -> str:
    """Get the type identifier of *value*

    Special values are checked first (:const:`UNDEFINED`, :const:`None`, the
    infinities and NaN) because they can't be told apart from other values by
    their type:

        >>> classify(None), classify(float("-inf")), classify(float("nan"))
        ('null', 'infinity', 'nan')
        >>> classify(1.5), classify({1})
        ('float', 'set')

    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if type(value) is float:
        if math.isinf(value):
            return "infinity"
        if math.isnan(value):
            return "nan"
    return utils.type_id(type(value))


Hook = Callable[[Key, Any], Any]


class EnvelopeCodec:
    """Encode and decode single nodes.

    A codec works on a fixed set of plugins and marker key for the duration of
    one serialisation or deserialisation.
    """

    plugins: Mapping[str, Plugin]
    marker_key: str

    def __init__(self, plugins: Mapping[str, Plugin], marker_key: str) -> None:
        self.plugins = plugins
        self.marker_key = marker_key

    def encode_node(self, key: Key, value: Any) -> Any:
        """Wrap *value* in an envelope if a plugin handles its type.

        Returns *value* unchanged if no plugin was found, the
        :class:`~betterjson.envelope.Envelope` built from the plugin's output
        otherwise. The caller is responsible for traversing the envelope's
        value.
        """
        type_id = classify(value)
        plugin = self.plugins.get(type_id)
        if plugin is None:
            return value
        try:
            encoded = plugin.encode(key, value)
        except Exception as e:
            raise errors.PluginEncodeError(type_id, key, e) from e
        return envelope.Envelope(type_id, encoded)

    def decode_node(
        self, key: Key, node: Any, hook: Hook | None = None
    ) -> Any:
        """Unwrap *node* if it is an envelope.

        *hook* is called on the values returned by the plugins.
        """
        if not envelope.is_envelope(node, self.marker_key):
            return node
        env = envelope.from_node(node, self.marker_key)
        if not env.is_supported():
            raise errors.UnsupportedVersionError(env.version, env.type)
        plugin = self.plugins.get(env.type) if type(env.type) is str else None
        if plugin is None:
            logger.debug(
                "No plugin for type %r (key=%r), using the raw value",
                env.type,
                key,
            )
            return env.value
        try:
            decoded = plugin.decode(key, env.value)
        except Exception as e:
            raise errors.PluginDecodeError(env.type, key, e) from e
        if hook is not None:
            decoded = hook(key, decoded)
        return decoded
