"""Admin-area functionality of a plugin.

:class:`PluginAdmin` knows the plugin's name and version and enqueues the
admin stylesheet and script. Its methods are meant to be bound to the
host's ``admin_enqueue_scripts`` action through a
:class:`~hookloader.loader.HookLoader`; see
:class:`~hookloader.plugins.boilerplate.BoilerplatePlugin`.
"""

from __future__ import annotations

import logging

from hookloader.assets import AssetEnqueuer

logger = logging.getLogger(__name__)


class PluginAdmin:
    """Enqueues admin assets for one plugin.

    Args:
        plugin_name: Plugin slug, used as the asset handle and file prefix.
        version: Plugin version, appended by the host for cache busting.
        assets: Host asset queue.
        asset_url: URL of the plugin's admin directory, with a trailing
            slash (e.g. ``/wp-content/plugins/plugin-name/admin/``).
    """

    def __init__(
        self,
        plugin_name: str,
        version: str,
        assets: AssetEnqueuer,
        asset_url: str,
    ) -> None:
        self.plugin_name = plugin_name
        self.version = version
        self._assets = assets
        self._asset_url = asset_url if asset_url.endswith("/") else asset_url + "/"

    def enqueue_styles(self, hook: str) -> None:
        """Register the stylesheet for the admin area.

        Args:
            hook: Id of the admin screen being rendered. Accepted so the
                method matches the host action signature; use it to limit
                the stylesheet to particular screens.
        """
        self._assets.enqueue_style(
            self.plugin_name,
            f"{self._asset_url}css/{self.plugin_name}-admin.css",
            [],
            self.version,
        )

    def enqueue_scripts(self, hook: str) -> None:
        """Register the JavaScript for the admin area.

        Args:
            hook: Id of the admin screen being rendered.
        """
        self._assets.enqueue_script(
            self.plugin_name,
            f"{self._asset_url}js/{self.plugin_name}-admin.js",
            ["jquery"],
            self.version,
            False,
        )

    def run_daily_event(self) -> None:
        """Example daily event."""
        logger.debug("Daily event for '%s'", self.plugin_name)
