"""Asset enqueueing interface and an in-memory implementation.

:class:`AssetEnqueuer` is the host's stylesheet/script queue as seen by
:class:`~hookloader.admin.PluginAdmin`. :class:`AssetQueue` keeps the
enqueued assets in memory, following the host rule that a handle is only
queued once.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from hookloader.models import ScriptAsset, StyleAsset

logger = logging.getLogger(__name__)


class AssetEnqueuer(ABC):
    """Host API for queueing stylesheets and scripts on a page."""

    @abstractmethod
    def enqueue_style(
        self,
        handle: str,
        url: str,
        dependencies: list[str],
        version: Optional[str],
    ) -> None:
        """Queue a stylesheet under *handle*."""

    @abstractmethod
    def enqueue_script(
        self,
        handle: str,
        url: str,
        dependencies: list[str],
        version: Optional[str],
        in_footer: bool,
    ) -> None:
        """Queue a script under *handle*, in the footer when *in_footer* is set."""


class AssetQueue(AssetEnqueuer):
    """Records enqueued assets in enqueue order.

    Styles and scripts have separate handle namespaces. Enqueueing a handle
    that is already queued is ignored.
    """

    def __init__(self) -> None:
        self._styles: dict[str, StyleAsset] = {}
        self._scripts: dict[str, ScriptAsset] = {}

    def enqueue_style(
        self,
        handle: str,
        url: str,
        dependencies: list[str],
        version: Optional[str],
    ) -> None:
        if handle in self._styles:
            logger.debug("Style '%s' already enqueued", handle)
            return
        self._styles[handle] = StyleAsset(
            handle=handle, url=url, dependencies=list(dependencies), version=version
        )

    def enqueue_script(
        self,
        handle: str,
        url: str,
        dependencies: list[str],
        version: Optional[str],
        in_footer: bool,
    ) -> None:
        if handle in self._scripts:
            logger.debug("Script '%s' already enqueued", handle)
            return
        self._scripts[handle] = ScriptAsset(
            handle=handle,
            url=url,
            dependencies=list(dependencies),
            version=version,
            in_footer=in_footer,
        )

    @property
    def styles(self) -> list[StyleAsset]:
        return list(self._styles.values())

    @property
    def scripts(self) -> list[ScriptAsset]:
        return list(self._scripts.values())
