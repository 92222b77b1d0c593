"""Example third-party plugin: reading-time estimates for post content."""

from __future__ import annotations

import math
from typing import Any

from hookloader.loader import HookLoader
from hookloader.models import GlobalConfig
from hookloader.plugins.base import Plugin

WORDS_PER_MINUTE = 200


class ReadingTimePlugin(Plugin):
    """Appends a reading-time note to content and offers a ``[reading_time]`` shortcode."""

    def __init__(self) -> None:
        self._initialized = False

    @property
    def name(self) -> str:
        return "reading-time"

    @property
    def version(self) -> str:
        return "0.1.0"

    @property
    def description(self) -> str:
        return "Reading-time filter and shortcode"

    def on_init(self, config: GlobalConfig) -> None:
        self._initialized = True

    def define_hooks(self, loader: HookLoader) -> None:
        loader.add_filter("the_content", self, "append_reading_time", priority=20)
        loader.add_shortcode("reading_time", self, "render_shortcode")

    def minutes(self, text: str) -> int:
        return max(1, math.ceil(len(text.split()) / WORDS_PER_MINUTE))

    def append_reading_time(self, content: str) -> str:
        return f"{content}\n\n{self.minutes(content)} min read"

    def render_shortcode(self, attrs: dict[str, Any], content: str = "") -> str:
        return f"{self.minutes(content)} min read"

    def cleanup(self) -> None:
        self._initialized = False
