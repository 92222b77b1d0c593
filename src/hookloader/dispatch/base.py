"""Abstract interface of the host event-dispatch system.

The loader never talks to a concrete host API. Whatever owns the real
action/filter/shortcode tables implements :class:`Dispatcher` and is
handed to :class:`~hookloader.loader.HookLoader` at construction time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Dispatcher(ABC):
    """Registration side of a host's action/filter/shortcode API.

    Callbacks are identified by an ``(owner, callback_name)`` pair, which
    is how the host resolves and later unregisters them.
    """

    @abstractmethod
    def register_filter(
        self,
        hook_name: str,
        owner: Any,
        callback_name: str,
        priority: int,
        accepted_args: int,
    ) -> None:
        """Attach a callback to the filter *hook_name*."""

    @abstractmethod
    def register_action(
        self,
        hook_name: str,
        owner: Any,
        callback_name: str,
        priority: int,
        accepted_args: int,
    ) -> None:
        """Attach a callback to the action *hook_name*."""

    @abstractmethod
    def register_shortcode(self, tag: str, owner: Any, callback_name: str) -> None:
        """Make *tag* a shortcode handled by the callback.

        Shortcodes take no priority: a tag has exactly one handler.
        """

    @abstractmethod
    def unregister_filter(self, hook_name: str, owner: Any, callback_name: str) -> None:
        """Detach a callback from the filter *hook_name*."""

    @abstractmethod
    def unregister_action(self, hook_name: str, owner: Any, callback_name: str) -> None:
        """Detach a callback from the action *hook_name*."""
