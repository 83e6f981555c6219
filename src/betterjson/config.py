"""``betterjson.config``: Serializer settings
===========================================

Settings are plain scalars. A value can only be replaced by a value of the
exact same type:

    >>> conf = Configuration()
    >>> conf.get("default_indentation")
    0
    >>> conf.set("default_indentation", 2)
    >>> conf.get()
    {'allow_plugins_overwrite': False, 'marker_key': '_@serialized-object', \
'default_indentation': 2}

"""

from __future__ import annotations

import dataclasses
from typing import Any, Final, Mapping

from betterjson import errors

__all__ = ("DEFAULT_MARKER_KEY", "Settings", "Configuration")

DEFAULT_MARKER_KEY: Final = "_@serialized-object"


@dataclasses.dataclass(slots=True)
class Settings:
    #: Whether registering a plugin for an already handled type replaces the
    #: existing plugin.
    allow_plugins_overwrite: bool = False

    #: The key used to identify a serialized object.
    marker_key: str = DEFAULT_MARKER_KEY

    #: Indentation used when serializing if none is specified.
    default_indentation: int = 0


KEYS: Final = tuple(f.name for f in dataclasses.fields(Settings))


class Configuration:
    """The settings of one :class:`~betterjson.serializer.Serializer`.

    Arguments:
      values: initial settings, applied with :meth:`update`.
    """

    _settings: Settings

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._settings = Settings()
        if values is not None:
            self.update(values)

    def get(self, key: str | None = None) -> Any:
        """Read a setting, or all of them if *key* is :const:`None`.

        The full configuration is returned as a new :class:`dict`; mutating it
        doesn't affect the configuration.
        """
        if key is None:
            return dataclasses.asdict(self._settings)
        if key not in KEYS:
            raise errors.UnknownConfigKeyError(key)
        return getattr(self._settings, key)

    def set(self, key: str, value: Any) -> None:
        """Update one setting.

        Raises:
          UnknownConfigKeyError: *key* isn't a setting.
          InvalidConfigValueError: *value* doesn't have the same type as the
            current value or is out of range.
        """
        current = self.get(key)
        # Exact comparison: ``True`` is not a valid indentation
        if type(value) is not type(current):
            raise errors.InvalidConfigValueError(
                key, value, f"expected {type(current).__name__!r}"
            )
        if key == "default_indentation" and value < 0:
            raise errors.InvalidConfigValueError(
                key, value, "must be non-negative"
            )
        setattr(self._settings, key, value)

    def update(self, values: Mapping[str, Any]) -> None:
        """Apply several settings in iteration order.

        This is not transactional: when an entry is rejected the entries
        before it stay applied.
        """
        for key, value in values.items():
            self.set(key, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get()!r})"
