"""
``betterjson.serializer``: The serializer
=========================================

    >>> import datetime
    >>> from betterjson import plugins
    >>> s = Serializer(plugins.BUNDLED)
    >>> doc = s.serialize({"when": datetime.datetime(2022, 1, 2), "n": 1})
    >>> doc
    '{"when":{"_@serialized-object":{"version":1,"type":"datetime.datetime",\
"value":"2022-01-02T00:00:00"}},"n":1}'
    >>> s.deserialize(doc)
    {'when': datetime.datetime(2022, 1, 2, 0, 0), 'n': 1}

"""

from __future__ import annotations

import functools
from typing import Any, Callable, Iterable, Mapping, TypeVar

from betterjson import base, bin, codec, envelope, errors, text
from betterjson.config import Configuration
from betterjson.plugin import Key, Plugin
from betterjson.registry import PluginRegistry

__all__ = ("Hook", "Serializer")

T = TypeVar("T")

#: User supplied function called on the nodes: ``(key, value) -> value``
Hook = Callable[[Key, Any], Any]


def _guard(hook: Hook) -> Hook:
    "Report the errors raised by *hook* as :class:`TransformError`"

    @functools.wraps(hook)
    def guarded(key: Key, value: Any) -> Any:
        try:
            return hook(key, value)
        except Exception as e:
            raise errors.TransformError(key, value, e) from e

    return guarded


class Serializer:
    """Serialise values that the underlying format can't represent natively.

    Each serializer owns its plugins and configuration; serializers do not
    share any state.

    Arguments:
      plugins: Plugins to register.
      config: Initial configuration, applied before *plugins* are registered.
    """

    conf: Configuration
    registry: PluginRegistry

    def __init__(
        self,
        plugins: Iterable[Plugin] = (),
        config: Mapping[str, Any] | None = None,
    ) -> None:
        self.conf = Configuration(config)
        self.registry = PluginRegistry(self.conf)
        self.registry.register_all(plugins)

    # Plugins

    def use(self, plugin: Plugin) -> None:
        "Register *plugin*"
        self.registry.register(plugin)

    def use_all(self, plugins: Iterable[Plugin]) -> None:
        "Register several plugins, in order"
        self.registry.register_all(plugins)

    # Configuration

    def get_config(self, key: str | None = None) -> Any:
        return self.conf.get(key)

    def set_config(self, key: str, value: Any) -> None:
        self.conf.set(key, value)

    def update_config(self, values: Mapping[str, Any]) -> None:
        self.conf.update(values)

    # Serialisation

    def _codec(self) -> codec.EnvelopeCodec:
        return codec.EnvelopeCodec(
            self.registry.snapshot(), self.conf.get("marker_key")
        )

    def _encoder(self, hook: Hook | None) -> base.Visitor:
        cdc = self._codec()
        guarded = None if hook is None else _guard(hook)

        def visit(key: Key, value: Any) -> Any:
            if guarded is not None:
                value = guarded(key, value)
            res = cdc.encode_node(key, value)
            if res is value:
                return res
            assert type(res) is envelope.Envelope
            # The plugin's output might contain values handled by plugins
            inner = base.replace_tree(res.value, visit, key="value")
            return base.Verbatim(
                envelope.Envelope(res.type, inner).to_node(cdc.marker_key)
            )

        return visit

    def _decoder(self, hook: Hook | None) -> base.Visitor:
        cdc = self._codec()
        guarded = None if hook is None else _guard(hook)
        return functools.partial(cdc.decode_node, hook=guarded)

    def serialize(
        self, value: Any, hook: Hook | None = None, indent: int | None = None
    ) -> str:
        """Serialise *value* to JSON

        Args:
          value: The value to serialise
          hook: called on every node before the plugins are, its return value
            is serialised instead of the node.
          indent: Indentation to use, defaults to the ``default_indentation``
            setting. ``0`` prints everything on one line.

        Raises:
          TransformError: *hook* raised.
          PluginEncodeError: a plugin raised.
          SerializationError: the value couldn't be represented in JSON.
        """
        if indent is None:
            indent = self.conf.get("default_indentation")
        return _serializing(text.dump_text, value, self._encoder(hook), indent)

    def deserialize(self, s: str, hook: Hook | None = None) -> Any:
        """Load a JSON document

        Args:
          s: The document
          hook: called on every value returned by a plugin.

        Raises:
          UnsupportedVersionError: an envelope has an unknown version.
          TransformError: *hook* raised.
          PluginDecodeError: a plugin raised.
          DeserializationError: *s* isn't valid JSON.
        """
        return _deserializing(text.load_text, s, self._decoder(hook))

    def serialize_bin(self, value: Any, hook: Hook | None = None) -> bytes:
        """Like :meth:`serialize` but uses the binary format.

        Note:

          This feature is only available if betterjson was installed with
          ``msgpack`` (e.g.: via ``pip install betterjson[msgpack]``).
        """
        return _serializing(bin.dump_bin, value, self._encoder(hook))

    def deserialize_bin(self, packed: bytes, hook: Hook | None = None) -> Any:
        "Like :meth:`deserialize` but for the binary format"
        return _deserializing(bin.load_bin, packed, self._decoder(hook))


def _serializing(fn: Callable[..., T], *args: Any) -> T:
    try:
        return fn(*args)
    except (errors.BetterJSONError, ImportError):
        raise
    except Exception as e:
        raise errors.SerializationError(
            f"Error while serializing object: {e}"
        ) from e


def _deserializing(fn: Callable[..., T], *args: Any) -> T:
    try:
        return fn(*args)
    except (errors.BetterJSONError, ImportError):
        raise
    except Exception as e:
        raise errors.DeserializationError(
            f"Error while parsing object: {e}"
        ) from e
