"""Bundled boilerplate plugin.

This module provides :class:`BoilerplatePlugin`, the starting point for a
new plugin. It defines the plugin's name and version, builds the
admin-area handler and binds it to the host through the shared loader:

* ``admin_enqueue_scripts`` -> :meth:`PluginAdmin.enqueue_styles`
* ``admin_enqueue_scripts`` -> :meth:`PluginAdmin.enqueue_scripts`
* ``plugin_name_daily_event`` -> :meth:`PluginAdmin.run_daily_event`

Copy the package, rename the slug, and add public-facing hooks next to the
admin ones.
"""

from __future__ import annotations

from typing import Optional

from hookloader.admin import PluginAdmin
from hookloader.assets import AssetEnqueuer, AssetQueue
from hookloader.loader import HookLoader
from hookloader.models import GlobalConfig
from hookloader.plugins.base import Plugin

PLUGIN_NAME = "plugin-name"
PLUGIN_VERSION = "1.0.0"
DAILY_EVENT = "plugin_name_daily_event"


class BoilerplatePlugin(Plugin):
    """Admin stylesheet/script enqueueing plus a daily-event stub.

    Args:
        assets: Host asset queue handed to :class:`PluginAdmin`. Defaults
            to an in-memory :class:`AssetQueue`.
    """

    def __init__(self, assets: Optional[AssetEnqueuer] = None) -> None:
        self._assets = assets if assets is not None else AssetQueue()
        self._base_url = GlobalConfig().assets.base_url
        self.admin: Optional[PluginAdmin] = None

    @property
    def name(self) -> str:
        return PLUGIN_NAME

    @property
    def version(self) -> str:
        return PLUGIN_VERSION

    @property
    def description(self) -> str:
        return "Boilerplate admin assets and daily event"

    @property
    def assets(self) -> AssetEnqueuer:
        return self._assets

    def on_init(self, config: GlobalConfig) -> None:
        self._base_url = config.assets.base_url

    def define_hooks(self, loader: HookLoader) -> None:
        """Register the admin-area hooks."""
        asset_url = f"{self._base_url.rstrip('/')}/{PLUGIN_NAME}/admin/"
        self.admin = PluginAdmin(PLUGIN_NAME, PLUGIN_VERSION, self._assets, asset_url)

        loader.add_action("admin_enqueue_scripts", self.admin, "enqueue_styles")
        loader.add_action("admin_enqueue_scripts", self.admin, "enqueue_scripts")
        loader.add_action(DAILY_EVENT, self.admin, "run_daily_event", accepted_args=0)

    def cleanup(self) -> None:
        self.admin = None
