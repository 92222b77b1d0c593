"""Tests for admin asset enqueueing and the in-memory asset queue."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from hookloader.admin import PluginAdmin
from hookloader.assets import AssetEnqueuer, AssetQueue
from hookloader.models import ScriptAsset, StyleAsset


ASSET_URL = "/wp-content/plugins/plugin-name/admin/"


@pytest.fixture
def queue() -> AssetQueue:
    return AssetQueue()


@pytest.fixture
def admin(queue: AssetQueue) -> PluginAdmin:
    return PluginAdmin("plugin-name", "1.0.0", queue, ASSET_URL)


class TestPluginAdmin:
    def test_enqueue_styles(self, admin: PluginAdmin, queue: AssetQueue) -> None:
        admin.enqueue_styles("toplevel_page_plugin-name")
        assert queue.styles == [
            StyleAsset(
                handle="plugin-name",
                url=ASSET_URL + "css/plugin-name-admin.css",
                dependencies=[],
                version="1.0.0",
            )
        ]

    def test_enqueue_scripts(self, admin: PluginAdmin, queue: AssetQueue) -> None:
        admin.enqueue_scripts("index.php")
        assert queue.scripts == [
            ScriptAsset(
                handle="plugin-name",
                url=ASSET_URL + "js/plugin-name-admin.js",
                dependencies=["jquery"],
                version="1.0.0",
                in_footer=False,
            )
        ]

    def test_forwards_to_enqueuer(self) -> None:
        assets = MagicMock(spec=AssetEnqueuer)
        admin = PluginAdmin("my-plugin", "2.1", assets, "https://cdn.example.com/my-plugin/admin")

        admin.enqueue_styles("edit.php")
        admin.enqueue_scripts("edit.php")

        assets.enqueue_style.assert_called_once_with(
            "my-plugin", "https://cdn.example.com/my-plugin/admin/css/my-plugin-admin.css", [], "2.1"
        )
        assets.enqueue_script.assert_called_once_with(
            "my-plugin",
            "https://cdn.example.com/my-plugin/admin/js/my-plugin-admin.js",
            ["jquery"],
            "2.1",
            False,
        )

    def test_screen_id_does_not_matter(self, admin: PluginAdmin, queue: AssetQueue) -> None:
        admin.enqueue_styles("a")
        admin.enqueue_styles("b")
        assert len(queue.styles) == 1

    def test_run_daily_event_is_noop(self, admin: PluginAdmin, queue: AssetQueue) -> None:
        assert admin.run_daily_event() is None
        assert queue.styles == []
        assert queue.scripts == []


class TestAssetQueue:
    def test_first_enqueue_wins(self, queue: AssetQueue) -> None:
        queue.enqueue_style("main", "/a.css", [], "1")
        queue.enqueue_style("main", "/b.css", [], "2")
        [style] = queue.styles
        assert style.url == "/a.css"

    def test_styles_and_scripts_separate_namespaces(self, queue: AssetQueue) -> None:
        queue.enqueue_style("main", "/a.css", [], None)
        queue.enqueue_script("main", "/a.js", [], None, True)
        assert len(queue.styles) == 1
        assert queue.scripts[0].in_footer is True

    def test_enqueue_order(self, queue: AssetQueue) -> None:
        for handle in ["c", "a", "b"]:
            queue.enqueue_script(handle, f"/{handle}.js", [], None, False)
        assert [s.handle for s in queue.scripts] == ["c", "a", "b"]

    def test_dependencies_copied(self, queue: AssetQueue) -> None:
        deps = ["jquery"]
        queue.enqueue_script("main", "/a.js", deps, None, False)
        deps.append("lodash")
        assert queue.scripts[0].dependencies == ["jquery"]
