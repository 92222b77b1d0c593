"""Plugin system for hookloader -- discovery, loading, and hook definition.

Third-party packages register plugins by declaring an entry point in the
``hookloader.plugins`` group. At runtime :class:`PluginManager` discovers
and loads those entry points, each plugin adds its bindings to the shared
:class:`~hookloader.loader.HookLoader`, and :meth:`PluginManager.run`
commits them to the host.

Key classes:

* :class:`Plugin` -- Abstract base class that all plugins must extend.
* :class:`PluginManager` -- Discovers, loads, and commits plugins.

Example:
    Typical bootstrap::

        from hookloader.plugins import PluginManager

        manager = PluginManager()
        manager.discover(global_config)
        manager.run()
"""

from hookloader.plugins.base import Plugin
from hookloader.plugins.manager import PluginManager, bootstrap

__all__ = ["Plugin", "PluginManager", "bootstrap"]
