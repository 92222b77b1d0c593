"""Plugin manager -- discovery, loading, and lifecycle management.

This module contains :class:`PluginManager`, the bootstrap routine of a
hookloader process. It discovers plugins registered as Python entry
points, applies enable/disable filtering from the global configuration,
lets every loaded plugin define its hooks on one shared
:class:`~hookloader.loader.HookLoader`, and commits that loader.

The entry-point group used for discovery is ``hookloader.plugins``.
Third-party packages register plugins by declaring an entry point under
this group in their ``pyproject.toml``::

    [project.entry-points."hookloader.plugins"]
    my-plugin = "my_package.plugin:MyPlugin"
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import Optional

from hookloader.exceptions import PluginError
from hookloader.dispatch import Dispatcher
from hookloader.loader import HookLoader, get_loader, set_loader
from hookloader.models import GlobalConfig
from hookloader.plugins.base import Plugin

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "hookloader.plugins"
"""The entry-point group name used for plugin discovery."""


class PluginManager:
    """Discovers, loads, and manages the lifecycle of hookloader plugins.

    The *enabled* and *disabled* lists in
    :class:`~hookloader.models.PluginsConfig` act as an explicit
    allowlist/blocklist. When *enabled* is non-empty only those plugins are
    loaded; otherwise all discovered plugins that are **not** in *disabled*
    are loaded.

    Args:
        loader: The loader plugins define their hooks on. Defaults to the
            process-wide loader from :func:`~hookloader.loader.get_loader`.

    Example:
        Typical bootstrap::

            manager = PluginManager(HookLoader(host_dispatcher))
            manager.discover(global_config)
            manager.run()
    """

    def __init__(self, loader: Optional[HookLoader] = None) -> None:
        self._loader = loader if loader is not None else get_loader()
        self._plugins: dict[str, Plugin] = {}

    @property
    def loader(self) -> HookLoader:
        return self._loader

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def discover(self, config: GlobalConfig) -> list[str]:
        """Discover and load available plugins via Python entry points.

        Args:
            config: The global configuration whose ``plugins.enabled`` and
                ``plugins.disabled`` lists control which plugins are loaded.

        Returns:
            A list of plugin names that were successfully loaded. Plugins
            that fail to load are logged as warnings and skipped.
        """
        loaded_names: list[str] = []
        enabled_set = set(config.plugins.enabled)
        disabled_set = set(config.plugins.disabled)

        for ep in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
            name = ep.name

            if enabled_set and name not in enabled_set:
                logger.debug("Plugin '%s' not in enabled list, skipping", name)
                continue
            if name in disabled_set:
                logger.debug("Plugin '%s' is disabled, skipping", name)
                continue

            try:
                plugin_cls = ep.load()
                plugin: Plugin = plugin_cls()
                self.load_plugin(name, plugin, config)
                loaded_names.append(name)
            except Exception as exc:
                logger.warning("Failed to load plugin '%s': %s", name, exc)

        return loaded_names

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_plugin(self, name: str, plugin: Plugin, config: GlobalConfig) -> None:
        """Load a single plugin instance and let it define its hooks.

        Calls :meth:`~hookloader.plugins.base.Plugin.on_init` and then
        :meth:`~hookloader.plugins.base.Plugin.define_hooks`. Hooks are
        staged on a scratch loader and merged into the shared one only
        once ``define_hooks`` returns, so a plugin that fails halfway
        leaves no bindings behind.

        Args:
            name: The unique name to register the plugin under.
            plugin: The plugin instance to load.
            config: The global configuration passed to ``on_init``.

        Raises:
            PluginError: If a plugin with the same *name* is already loaded.
        """
        if name in self._plugins:
            raise PluginError(f"Plugin '{name}' is already loaded")

        plugin.on_init(config)
        staged = HookLoader(self._loader.dispatcher)
        plugin.define_hooks(staged)
        self._loader.merge(staged)
        self._plugins[name] = plugin
        logger.info("Loaded plugin '%s' v%s", name, plugin.version)

    # ------------------------------------------------------------------
    # Querying
    # ------------------------------------------------------------------

    def get_plugin(self, name: str) -> Plugin:
        """Retrieve a loaded plugin by its registered name.

        Raises:
            PluginError: If no plugin with the given *name* is loaded.
        """
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginError(f"Plugin '{name}' is not loaded") from None

    def list_plugins(self) -> list[dict[str, str]]:
        """List all loaded plugins with their name, version and description."""
        return [
            {
                "name": plugin.name,
                "version": plugin.version,
                "description": plugin.description,
            }
            for plugin in self._plugins.values()
        ]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Commit the shared loader, handing every binding to the host."""
        self._loader.commit()

    def cleanup(self) -> None:
        """Clean up all loaded plugins and forget them.

        Exceptions from individual plugins are logged and swallowed so that
        one plugin's failure does not prevent others from cleaning up. The
        loader's bindings are left as they are.
        """
        for name, plugin in self._plugins.items():
            try:
                plugin.cleanup()
            except Exception as exc:
                logger.warning("Error cleaning up plugin '%s': %s", name, exc)
        self._plugins.clear()


def bootstrap(config: GlobalConfig, dispatcher: Optional[Dispatcher] = None) -> PluginManager:
    """Build a loader, install it process-wide, load every plugin, and commit.

    This is the explicit initialization path: the loader is constructed
    here with *dispatcher* and threaded through the returned manager.

    Args:
        config: Global configuration used for plugin filtering and ``on_init``.
        dispatcher: Host dispatcher. Defaults to a fresh ``HookTable``.

    Returns:
        The manager holding the loaded plugins and the committed loader.
    """
    loader = HookLoader(dispatcher)
    set_loader(loader)
    manager = PluginManager(loader)
    loaded = manager.discover(config)
    logger.debug("Discovered plugins: %s", ", ".join(loaded) or "none")
    manager.run()
    return manager
