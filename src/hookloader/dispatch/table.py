"""In-memory dispatcher that records what a host would have registered.

:class:`HookTable` keeps, per hook name, the callbacks attached to it in
the order the host would run them. It never invokes a callback. It is the
dispatcher the CLI commits to, and a convenient stand-in for a real host
in tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from hookloader.dispatch.base import Dispatcher
from hookloader.models import HookKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Registration:
    """One callback attached to a hook in a :class:`HookTable`.

    Attributes:
        owner: The object defining the callback.
        callback_name: Name of the method on *owner*.
        priority: Execution-order hint (lower first).
        accepted_args: Number of arguments the host would pass.
    """

    owner: Any
    callback_name: str
    priority: int = 10
    accepted_args: int = 1

    def same_callback(self, owner: Any, callback_name: str) -> bool:
        return self.owner is owner and self.callback_name == callback_name


class HookTable(Dispatcher):
    """Records registrations per hook, ordered by priority.

    Re-registering the same owner object and callback name at the same
    priority replaces the earlier entry, so committing a loader twice
    leaves the table unchanged. Shortcodes hold a single handler per tag.
    """

    def __init__(self) -> None:
        self._hooks: dict[HookKind, dict[str, list[Registration]]] = {
            HookKind.FILTER: {},
            HookKind.ACTION: {},
        }
        self._shortcodes: dict[str, Registration] = {}

    # ------------------------------------------------------------------
    # Dispatcher interface
    # ------------------------------------------------------------------

    def register_filter(
        self,
        hook_name: str,
        owner: Any,
        callback_name: str,
        priority: int,
        accepted_args: int,
    ) -> None:
        self._register(HookKind.FILTER, hook_name, owner, callback_name, priority, accepted_args)

    def register_action(
        self,
        hook_name: str,
        owner: Any,
        callback_name: str,
        priority: int,
        accepted_args: int,
    ) -> None:
        self._register(HookKind.ACTION, hook_name, owner, callback_name, priority, accepted_args)

    def register_shortcode(self, tag: str, owner: Any, callback_name: str) -> None:
        self._shortcodes[tag] = Registration(owner=owner, callback_name=callback_name)
        logger.debug("Registered shortcode [%s] -> %s", tag, callback_name)

    def unregister_filter(self, hook_name: str, owner: Any, callback_name: str) -> None:
        self._unregister(HookKind.FILTER, hook_name, owner, callback_name)

    def unregister_action(self, hook_name: str, owner: Any, callback_name: str) -> None:
        self._unregister(HookKind.ACTION, hook_name, owner, callback_name)

    # ------------------------------------------------------------------
    # Querying
    # ------------------------------------------------------------------

    def registrations(self, kind: HookKind, hook_name: str) -> list[Registration]:
        """Return the callbacks attached to *hook_name* in run order.

        Sorted by priority; equal priorities keep registration order.
        A shortcode tag yields a list of at most one entry.
        """
        if kind == HookKind.SHORTCODE:
            registration = self._shortcodes.get(hook_name)
            return [registration] if registration is not None else []
        entries = self._hooks[kind].get(hook_name, [])
        return sorted(entries, key=lambda r: r.priority)

    def hook_names(self, kind: HookKind) -> list[str]:
        """Return the hook names (or shortcode tags) that have callbacks."""
        if kind == HookKind.SHORTCODE:
            return list(self._shortcodes)
        return [name for name, entries in self._hooks[kind].items() if entries]

    def has(self, kind: HookKind, hook_name: str) -> bool:
        return bool(self.registrations(kind, hook_name))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _register(
        self,
        kind: HookKind,
        hook_name: str,
        owner: Any,
        callback_name: str,
        priority: int,
        accepted_args: int,
    ) -> None:
        entries = self._hooks[kind].setdefault(hook_name, [])
        new = Registration(owner, callback_name, priority, accepted_args)
        for index, existing in enumerate(entries):
            if existing.same_callback(owner, callback_name) and existing.priority == priority:
                entries[index] = new
                verb = "Re-registered"
                break
        else:
            entries.append(new)
            verb = "Registered"
        logger.debug(
            "%s %s '%s' -> %s (priority %d)",
            verb, kind.value, hook_name, callback_name, priority,
        )

    def _unregister(self, kind: HookKind, hook_name: str, owner: Any, callback_name: str) -> None:
        entries = self._hooks[kind].get(hook_name)
        if not entries:
            return
        self._hooks[kind][hook_name] = [
            r for r in entries if not r.same_callback(owner, callback_name)
        ]
        logger.debug("Unregistered %s '%s' -> %s", kind.value, hook_name, callback_name)
