"""JSON serialisation for values JSON can't represent"""
from __future__ import annotations

from importlib import metadata

from .codec import UNDEFINED, classify
from .config import Configuration
from .errors import (
    BetterJSONError,
    DeserializationError,
    DuplicateTypeError,
    InvalidConfigValueError,
    InvalidPluginError,
    PluginDecodeError,
    PluginEncodeError,
    SerializationError,
    TransformError,
    UnknownConfigKeyError,
    UnsupportedVersionError,
)
from .plugin import Plugin, create_plugin
from .plugins import BUNDLED
from .serializer import Serializer
from .utils import type_id

# https://packaging.python.org/en/latest/guides/single-sourcing-package-version/
__version__ = metadata.version(__name__)

__all__ = (
    "BUNDLED",
    "UNDEFINED",
    "Configuration",
    "Plugin",
    "Serializer",
    "classify",
    "create_plugin",
    "type_id",
    "BetterJSONError",
    "DeserializationError",
    "DuplicateTypeError",
    "InvalidConfigValueError",
    "InvalidPluginError",
    "PluginDecodeError",
    "PluginEncodeError",
    "SerializationError",
    "TransformError",
    "UnknownConfigKeyError",
    "UnsupportedVersionError",
)
