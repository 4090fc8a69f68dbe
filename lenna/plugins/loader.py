"""Catalog of available plugins and the ordered set of activated plugin instances."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable

from lenna.application import Settings, current
from lenna.logger import get_logger
from lenna.plugins.base import NULL_UID, Plugin, PluginKind
from lenna.translation import install_plugin_translation

ENTRY_POINT_GROUP = "lenna.plugins"
CONFIG_GROUP = "active-plugins"

DEFAULT_PLUGINS = (
    ("{4b122e95-6fed-4627-8254-5925fab3178f}", "filechooser"),
    ("{85fc0624-c940-4720-afb6-e00fa3e0dd91}", "resize"),
    ("{9076d7c5-9822-4e9b-870b-f344a46368f2}", "savefile"),
)

_registry: dict[str, list[Plugin | Callable[[], Plugin]]] = {}


def register_plugin(
    plugin: Plugin | Callable[[], Plugin], group: str = ENTRY_POINT_GROUP
) -> None:
    """Advertise a plugin (an instance or a factory such as a class) in ``group``."""
    _registry.setdefault(group, []).append(plugin)


def _new_uid() -> str:
    return "{" + str(uuid.uuid4()) + "}"


class PluginLoader:
    """Holds plugin prototypes by kind and the activated instances in pipeline order."""

    def __init__(
        self,
        settings: Settings | None = None,
        plugins: Iterable[Plugin] | None = None,
        discover: bool = True,
    ) -> None:
        self.settings = settings if settings is not None else current().settings()
        self._catalog: dict[PluginKind, list[Plugin]] = {kind: [] for kind in PluginKind}
        self._order: dict[PluginKind, list[str]] = {kind: [] for kind in PluginKind}
        self._activated: dict[str, Plugin] = {}
        for plugin in plugins or ():
            self.add_plugin(plugin)
        if discover:
            self.discover()
        self.load_config()

    # Catalog

    def add_plugin(self, plugin: Plugin) -> bool:
        """Add a prototype to the catalog of each kind it implements; False if already known."""
        if plugin is None:
            return False
        added = False
        for kind in plugin.kinds():
            catalog = self._catalog[kind]
            if kind is PluginKind.INPUT:
                known = any(existing is plugin for existing in catalog)
            else:
                known = any(existing.name == plugin.name for existing in catalog)
            if not known:
                catalog.append(plugin)
                added = True
        if added:
            install_plugin_translation(plugin.name)
        return added

    def discover(self, group: str = ENTRY_POINT_GROUP) -> int:
        """Add plugins registered in ``group``; returns how many were added."""
        count = 0
        for entry in list(_registry.get(group, ())):
            label = getattr(entry, "__name__", None) or getattr(entry, "name", repr(entry))
            try:
                plugin = entry() if isinstance(entry, type) and issubclass(entry, Plugin) else entry
                if not isinstance(plugin, Plugin) and callable(plugin):
                    plugin = plugin()
            except Exception as exc:  # a broken plugin must not stop the others
                get_logger().warning(f"Plugin could not been loaded: {label} ({exc})")
                continue
            if not isinstance(plugin, Plugin):
                get_logger().warning(f"Plugin could not been loaded: {label}")
                continue
            if self.add_plugin(plugin):
                count += 1
        return count

    def plugins(self, kind: PluginKind) -> list[Plugin]:
        """Prototypes of ``kind`` in the order they were added."""
        return list(self._catalog[PluginKind(kind)])

    def find_plugin(self, name: str) -> Plugin | None:
        """Prototype matching ``name`` given as "name" or "name version"."""
        for kind in PluginKind:
            for plugin in self._catalog[kind]:
                if name in (plugin.name, f"{plugin.name} {plugin.version}"):
                    return plugin
        return None

    # Configuration

    def load_config(self) -> None:
        """Activate the plugins stored in the settings, or the defaults if none are."""
        keys = self.settings.child_keys(CONFIG_GROUP)
        for key in keys:
            self.activate(key, str(self.settings.value(f"{CONFIG_GROUP}/{key}", "")))
        if not keys:
            for uid, name in DEFAULT_PLUGINS:
                self.activate(uid, name)

    def save_config(self) -> None:
        """Store every active plugin instance as uid -> name."""
        self.settings.remove(CONFIG_GROUP)
        for kind in PluginKind:
            for uid in self._order[kind]:
                plugin = self._activated.get(uid)
                if plugin is not None:
                    self.settings.set_value(f"{CONFIG_GROUP}/{uid}", plugin.name)

    # Activation

    def activate(self, uid: str | None, name: str) -> Plugin | None:
        """Create and activate an instance of plugin ``name`` under ``uid``."""
        if uid is None or uid == NULL_UID:
            uid = _new_uid()
        if uid in self._activated:
            return self._activated[uid]
        prototype = self.find_plugin(name)
        if prototype is None:
            get_logger().warning("Plugin could not been loaded: " + name)
            return None
        instance = prototype.create_instance(uid)
        self.activate_plugin(instance)
        return instance

    def activate_plugin(self, plugin: Plugin) -> None:
        """Activate an instance, appending it to the order of each of its kinds."""
        if plugin is None:
            raise ValueError("no plugin to activate")
        if plugin.uid == NULL_UID:
            raise ValueError("plugin instance has no identifier")
        if self.is_activated(plugin):
            return
        self._activated[plugin.uid] = plugin
        for kind in plugin.kinds():
            self._order[kind].append(plugin.uid)

    def activate_plugins(self, names: Iterable[str]) -> list[Plugin]:
        """Activate a new instance of each named plugin, placing them first in this order."""
        positions = {kind: 0 for kind in PluginKind}
        activated = []
        for name in names:
            prototype = self.find_plugin(name)
            if prototype is None:
                raise LookupError(f"no plugin named {name!r}")
            instance = prototype.create_instance(_new_uid())
            self.activate_plugin(instance)
            for kind in instance.kinds():
                self.move_plugin(instance, positions[kind], kind)
                positions[kind] += 1
            activated.append(instance)
        return activated

    def deactivate_plugin(self, plugin: Plugin) -> None:
        """Remove an active instance from every order it is in."""
        if not self.is_activated(plugin):
            return
        for kind in plugin.kinds():
            self._order[kind] = [uid for uid in self._order[kind] if uid != plugin.uid]
        del self._activated[plugin.uid]

    def deactivate_index(self, index: int) -> None:
        """Deactivate the instance at ``index`` among active instances sorted by uid."""
        uids = sorted(self._activated)
        if 0 <= index < len(uids):
            self.deactivate_plugin(self._activated[uids[index]])

    def is_activated(self, plugin: Plugin) -> bool:
        """Whether this very instance is active."""
        return any(active is plugin for active in self._activated.values())

    def active_plugin(self, uid: str) -> Plugin | None:
        """The active instance with ``uid``, if any."""
        for key in sorted(self._activated):
            plugin = self._activated[key]
            if plugin.uid == uid:
                return plugin
        return None

    def active_plugins(self, kind: PluginKind) -> list[Plugin]:
        """Active instances of ``kind`` in pipeline order."""
        kind = PluginKind(kind)
        result = []
        for uid in self._order[kind]:
            plugin = self._activated.get(uid)
            if plugin is not None and kind in plugin.kinds():
                result.append(plugin)
        return result

    def move_plugin(self, plugin: Plugin, index: int, kind: PluginKind | None = None) -> None:
        """Move an active instance to ``index`` in the order of ``kind`` (all its kinds if None)."""
        if plugin is None:
            return
        if index < 0:
            raise IndexError("position must not be negative")
        kinds = plugin.kinds() if kind is None else (PluginKind(kind),)
        for each in kinds:
            order = self._order[each]
            if index > len(order) - 1 or plugin.uid not in order:
                continue
            order.insert(index, order.pop(order.index(plugin.uid)))


_instance: PluginLoader | None = None


def get_instance() -> PluginLoader:
    """The shared plugin loader, created on first use."""
    global _instance
    if _instance is None:
        _instance = PluginLoader()
    return _instance


def destroy_instance() -> None:
    """Save and drop the shared plugin loader."""
    global _instance
    if _instance is not None:
        _instance.save_config()
    _instance = None