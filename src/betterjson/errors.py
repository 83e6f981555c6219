"""``betterjson.errors``: Error taxonomy
======================================

Every error raised by :mod:`betterjson` derives from :class:`BetterJSONError`.
Errors that wrap a failure from a plugin, a user hook or the underlying format
chain the original exception as their ``__cause__``.
"""

from __future__ import annotations

from typing import Any

__all__ = (
    "BetterJSONError",
    "InvalidPluginError",
    "DuplicateTypeError",
    "UnknownConfigKeyError",
    "InvalidConfigValueError",
    "PluginEncodeError",
    "PluginDecodeError",
    "UnsupportedVersionError",
    "TransformError",
    "SerializationError",
    "DeserializationError",
)


class BetterJSONError(Exception):
    "Base class for all the errors raised by betterjson."


class InvalidPluginError(BetterJSONError, TypeError):
    "A plugin was built or registered with invalid arguments."


class DuplicateTypeError(BetterJSONError, ValueError):
    """A plugin for this type is already registered.

    Only raised when ``allow_plugins_overwrite`` is disabled.
    """

    type_id: str

    def __init__(self, type_id: str) -> None:
        super().__init__(
            f"Unable to add plugin for {type_id!r}: a plugin for this type "
            "is already registered and plugin overwrite is disabled."
        )
        self.type_id = type_id


class UnknownConfigKeyError(BetterJSONError, LookupError):
    key: str

    def __init__(self, key: str) -> None:
        super().__init__(f"Configuration property {key!r} does not exist.")
        self.key = key


class InvalidConfigValueError(BetterJSONError, TypeError, ValueError):
    key: str
    value: Any

    def __init__(self, key: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Invalid value {value!r} for configuration property {key!r}: "
            f"{reason}"
        )
        self.key = key
        self.value = value


class _NodeError(BetterJSONError):
    """An error located on a given node of the tree being traversed."""

    type_id: str
    key: Any

    def __init__(self, type_id: str, key: Any, message: str) -> None:
        super().__init__(message)
        self.type_id = type_id
        self.key = key


class PluginEncodeError(_NodeError):
    "The ``encode`` function of a plugin raised."

    def __init__(self, type_id: str, key: Any, cause: BaseException) -> None:
        super().__init__(
            type_id,
            key,
            f"Error while serializing type {type_id!r} (key={key!r}): {cause}",
        )


class PluginDecodeError(_NodeError):
    "The ``decode`` function of a plugin raised."

    def __init__(self, type_id: str, key: Any, cause: BaseException) -> None:
        super().__init__(
            type_id,
            key,
            f"Error while deserializing type {type_id!r} (key={key!r}): "
            f"{cause}",
        )


class UnsupportedVersionError(BetterJSONError, ValueError):
    version: Any
    type_id: Any

    def __init__(self, version: Any, type_id: Any) -> None:
        super().__init__(
            f"Unsupported serialization version {version!r} "
            f"(type={type_id!r})."
        )
        self.version = version
        self.type_id = type_id


class TransformError(BetterJSONError):
    "A user supplied transform hook raised."

    key: Any

    def __init__(self, key: Any, value: Any, cause: BaseException) -> None:
        super().__init__(
            "An error occurred while calling the transform hook on "
            f"key={key!r} and value={value!r}: {cause}"
        )
        self.key = key


class SerializationError(BetterJSONError):
    "The underlying format failed to render a value."


class DeserializationError(BetterJSONError, ValueError):
    "The underlying format failed to parse its input."
