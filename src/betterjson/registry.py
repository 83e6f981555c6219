from __future__ import annotations

import logging
import types
from typing import Iterable, Iterator, Mapping

from betterjson import config, errors
from betterjson.plugin import Plugin

__all__ = ("PluginRegistry",)

logger = logging.getLogger(__name__)


class PluginRegistry:
    """The plugins known to a serializer, indexed by type identifier.

    Whether a plugin can replace a previously registered one is decided by the
    ``allow_plugins_overwrite`` setting of *conf*, read on every registration.
    """

    _plugins: dict[str, Plugin]
    _conf: config.Configuration

    def __init__(self, conf: config.Configuration) -> None:
        self._plugins = {}
        self._conf = conf

    def register(self, plugin: Plugin) -> None:
        if not isinstance(plugin, Plugin):
            raise errors.InvalidPluginError(
                f"The plugin is invalid (got {type(plugin).__name__!r})."
            )
        type_id = plugin.type_id
        previous = self._plugins.get(type_id)
        if previous is not None:
            if not self._conf.get("allow_plugins_overwrite"):
                raise errors.DuplicateTypeError(type_id)
            logger.debug("Replacing the plugin for %r", type_id)
        else:
            logger.debug("Registering a plugin for %r", type_id)
        self._plugins[type_id] = plugin

    def register_all(self, plugins: Iterable[Plugin]) -> None:
        """Register *plugins* one after the other.

        Registration stops at the first failure; the plugins registered before
        it are kept.
        """
        for plugin in plugins:
            self.register(plugin)

    def lookup(self, type_id: str) -> Plugin | None:
        return self._plugins.get(type_id)

    def snapshot(self) -> Mapping[str, Plugin]:
        "A read-only copy of the registry"
        return types.MappingProxyType(dict(self._plugins))

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._plugins

    def __iter__(self) -> Iterator[str]:
        return iter(self._plugins)

    def __len__(self) -> int:
        return len(self._plugins)
