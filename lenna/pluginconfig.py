"""Choosing, ordering and removing active plugins, as the plugin configuration view does."""

from __future__ import annotations

import uuid
from typing import Any

from lenna.plugins.base import Plugin, PluginKind
from lenna.plugins.loader import PluginLoader, get_instance


def describe_plugin(plugin: Plugin) -> dict[str, Any]:
    """The texts shown for a plugin in the catalog: labels plus the name/version tooltip."""
    return {
        "name": plugin.name,
        "title": plugin.title,
        "version": plugin.version,
        "author": plugin.author,
        "description": plugin.description,
        "icon": plugin.icon,
        "tooltip": f"{plugin.name} {plugin.version}",
    }


class PluginConfig:
    """Operations on a plugin loader's catalog and its active, ordered plugin instances."""

    def __init__(self, loader: PluginLoader | None = None) -> None:
        self.loader = loader if loader is not None else get_instance()

    def available(self, kind: PluginKind) -> list[Plugin]:
        """Catalog prototypes of ``kind``."""
        return self.loader.plugins(PluginKind(kind))

    def active(self, kind: PluginKind) -> list[Plugin]:
        """Active instances of ``kind`` in pipeline order."""
        return self.loader.active_plugins(PluginKind(kind))

    def add(self, plugin: Plugin) -> Plugin | None:
        """Activate a fresh instance of ``plugin`` under a new identifier and return it."""
        uid = "{" + str(uuid.uuid4()) + "}"
        return self.loader.activate(uid, plugin.name)

    def remove(self, plugin: Plugin) -> str:
        """Deactivate an active instance; returns its identifier."""
        self.loader.deactivate_plugin(plugin)
        return plugin.uid

    def move_up(self, kind: PluginKind, row: int) -> int:
        """Move the active plugin at ``row`` one place earlier; returns the selected row."""
        kind = PluginKind(kind)
        if row > 0:
            plugins = self.active(kind)
            if row < len(plugins):
                self.loader.move_plugin(plugins[row], row - 1, kind)
                return row - 1
        return row

    def move_down(self, kind: PluginKind, row: int) -> int:
        """Move the active plugin at ``row`` one place later; returns the selected row."""
        kind = PluginKind(kind)
        plugins = self.active(kind)
        if 0 <= row < len(plugins) - 1:
            self.loader.move_plugin(plugins[row], row + 1, kind)
            return row + 1
        return row

    def apply_catalog_order(self, kind: PluginKind) -> None:
        """Move each catalog entry that is also active to its position in the catalog."""
        kind = PluginKind(kind)
        for position, plugin in enumerate(self.available(kind)):
            self.loader.move_plugin(plugin, position, kind)