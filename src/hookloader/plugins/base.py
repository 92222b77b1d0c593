"""Abstract base class for hookloader plugins.

Every plugin must subclass :class:`Plugin` and implement the :attr:`name`
property. The lifecycle methods (``on_init``, ``define_hooks``,
``cleanup``) are optional -- default implementations are no-ops so plugins
only override what they need.

Plugins are registered as entry points in the ``hookloader.plugins`` group
and discovered at runtime by :class:`~hookloader.plugins.manager.PluginManager`.

Example:
    Minimal plugin that adds a shortcode::

        class GreetingPlugin(Plugin):
            @property
            def name(self) -> str:
                return "greeting"

            def define_hooks(self, loader):
                loader.add_shortcode("hello", self, "render_hello")

            def render_hello(self, attrs, content=""):
                return "Hello!"
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from hookloader.loader import HookLoader
from hookloader.models import GlobalConfig


class Plugin(ABC):
    """Base class for all hookloader plugins.

    The plugin lifecycle is:

    1. Instantiation -- the :class:`PluginManager` calls the no-arg constructor.
    2. :meth:`on_init` -- called once with the global configuration.
    3. :meth:`define_hooks` -- called once with the loader; the plugin adds
       its actions, filters and shortcodes.
    4. The manager commits the loader; the host now owns the bindings.
    5. :meth:`cleanup` -- called once during shutdown.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the unique plugin name used for discovery and logging."""
        ...

    @property
    def version(self) -> str:
        """Return the plugin version string. Defaults to ``"0.1.0"``."""
        return "0.1.0"

    @property
    def description(self) -> str:
        """Return a one-line description. Defaults to ``""``."""
        return ""

    def on_init(self, config: GlobalConfig) -> None:
        """Called once when the plugin is loaded.

        Override to read settings from the global configuration before
        hooks are defined.

        Args:
            config: The global hookloader configuration.
        """

    def define_hooks(self, loader: HookLoader) -> None:
        """Add this plugin's actions, filters and shortcodes to *loader*.

        Nothing added here reaches the host until the loader is committed.

        Args:
            loader: The loader shared by every plugin in the process.
        """

    def cleanup(self) -> None:
        """Called once during shutdown to release plugin resources."""
