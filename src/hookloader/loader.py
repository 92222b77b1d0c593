"""Deferred registry of actions, filters and shortcodes.

Plugins declare their hooks on a :class:`HookLoader` while they bootstrap;
nothing reaches the host until :meth:`HookLoader.commit` forwards every
stored binding to the injected :class:`~hookloader.dispatch.Dispatcher`.

Bindings are keyed by :class:`~hookloader.models.BindingKey`, built from
the hook name, the owner's *type* and the callback name. Adding a binding
whose key is already present replaces the stored one in place: the last
registration wins, and it keeps the position of the first.

A process normally has one loader. :func:`get_loader` creates it lazily;
bootstrap code can build one explicitly and install it with
:func:`set_loader`.

Example::

    loader = HookLoader(HookTable())
    loader.add_filter("the_content", handler, "wrap_content", priority=5)
    loader.add_action("init", handler, "on_init")
    loader.commit()
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from hookloader.dispatch import Dispatcher, HookTable
from hookloader.models import BindingKey, HookBinding, HookKind, type_tag

logger = logging.getLogger(__name__)


def binding_key(hook_name: str, owner: Any, callback_name: str) -> BindingKey:
    """Return the deduplication key for a ``(hook, owner, callback)`` triple.

    Only the owner's type contributes, so different instances of one
    class produce the same key.
    """
    return BindingKey(hook_name, type_tag(owner), callback_name)


class HookLoader:
    """Keyed collections of deferred hook bindings.

    Filters, actions and shortcodes live in three independent mappings.
    None of the operations validate their input or raise.

    Args:
        dispatcher: Host dispatcher that :meth:`commit` and :meth:`remove`
            forward to. Defaults to a fresh :class:`HookTable`.
    """

    def __init__(self, dispatcher: Optional[Dispatcher] = None) -> None:
        self._dispatcher = dispatcher if dispatcher is not None else HookTable()
        self._filters: dict[BindingKey, HookBinding] = {}
        self._actions: dict[BindingKey, HookBinding] = {}
        self._shortcodes: dict[BindingKey, HookBinding] = {}
        self._lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> HookLoader:
        """Return the process-wide loader, creating it on first call."""
        return get_loader()

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_action(
        self,
        hook_name: str,
        owner: Any,
        callback_name: str,
        priority: int = 10,
        accepted_args: int = 1,
    ) -> None:
        """Add an action binding, replacing any binding with the same key.

        Args:
            hook_name: Name of the host action.
            owner: Object on which the callback is defined.
            callback_name: Name of the method on *owner*.
            priority: Order in which the host runs the callback. Default 10.
            accepted_args: Number of arguments passed to the callback.
                Default 1.
        """
        self._add(self._actions, hook_name, owner, callback_name, priority, accepted_args)

    def add_filter(
        self,
        hook_name: str,
        owner: Any,
        callback_name: str,
        priority: int = 10,
        accepted_args: int = 1,
    ) -> None:
        """Add a filter binding, replacing any binding with the same key.

        Arguments are as for :meth:`add_action`.
        """
        self._add(self._filters, hook_name, owner, callback_name, priority, accepted_args)

    def add_shortcode(
        self,
        tag: str,
        owner: Any,
        callback_name: str,
        priority: int = 10,
        accepted_args: int = 1,
    ) -> None:
        """Add a shortcode binding, replacing any binding with the same key.

        *priority* and *accepted_args* are stored but never forwarded:
        hosts register shortcodes without them.
        """
        self._add(self._shortcodes, tag, owner, callback_name, priority, accepted_args)

    def _add(
        self,
        bindings: dict[BindingKey, HookBinding],
        hook_name: str,
        owner: Any,
        callback_name: str,
        priority: int,
        accepted_args: int,
    ) -> None:
        binding = HookBinding(
            hook_name=hook_name,
            owner=owner,
            callback_name=callback_name,
            priority=priority,
            accepted_args=accepted_args,
        )
        with self._lock:
            if binding.key in bindings:
                logger.debug("Replacing binding %s", binding.key)
            bindings[binding.key] = binding

    def merge(self, other: HookLoader) -> None:
        """Copy every binding of *other* into this loader.

        Keys already present are overwritten in place, exactly as if the
        bindings had been added here one by one.
        """
        with other._lock:
            staged = (
                dict(other._filters),
                dict(other._actions),
                dict(other._shortcodes),
            )
        with self._lock:
            for target, source in zip((self._filters, self._actions, self._shortcodes), staged):
                target.update(source)

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove(self, hook_name: str, owner: Any, callback_name: str) -> None:
        """Ask the host to drop a binding previously added through this loader.

        If a filter is stored under the key, the dispatcher's
        ``unregister_filter`` is called with the stored filter's values;
        independently, if an action is stored under it,
        ``unregister_action`` is called with the stored action's values.
        The loader's own collections are left untouched, so a later
        :meth:`commit` registers the binding again.
        """
        key = binding_key(hook_name, owner, callback_name)
        with self._lock:
            stored_filter = self._filters.get(key)
            stored_action = self._actions.get(key)

        if stored_filter is not None:
            self._dispatcher.unregister_filter(
                stored_filter.hook_name, stored_filter.owner, stored_filter.callback_name
            )
        if stored_action is not None:
            self._dispatcher.unregister_action(
                stored_action.hook_name, stored_action.owner, stored_action.callback_name
            )

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def commit(self) -> None:
        """Forward every stored binding to the dispatcher.

        Filters go first, then actions, then shortcodes; each collection in
        insertion order. The collections are not cleared, so calling this
        again submits the same bindings again.
        """
        with self._lock:
            filters = list(self._filters.values())
            actions = list(self._actions.values())
            shortcodes = list(self._shortcodes.values())

        for b in filters:
            self._dispatcher.register_filter(
                b.hook_name, b.owner, b.callback_name, b.priority, b.accepted_args
            )
        for b in actions:
            self._dispatcher.register_action(
                b.hook_name, b.owner, b.callback_name, b.priority, b.accepted_args
            )
        for b in shortcodes:
            self._dispatcher.register_shortcode(b.hook_name, b.owner, b.callback_name)

        logger.info(
            "Committed %d filter(s), %d action(s), %d shortcode(s)",
            len(filters), len(actions), len(shortcodes),
        )

    # ------------------------------------------------------------------
    # Querying
    # ------------------------------------------------------------------

    @property
    def filters(self) -> list[HookBinding]:
        with self._lock:
            return list(self._filters.values())

    @property
    def actions(self) -> list[HookBinding]:
        with self._lock:
            return list(self._actions.values())

    @property
    def shortcodes(self) -> list[HookBinding]:
        with self._lock:
            return list(self._shortcodes.values())

    def bindings(self) -> list[tuple[HookKind, HookBinding]]:
        """Return every binding paired with its kind, in commit order."""
        with self._lock:
            return (
                [(HookKind.FILTER, b) for b in self._filters.values()]
                + [(HookKind.ACTION, b) for b in self._actions.values()]
                + [(HookKind.SHORTCODE, b) for b in self._shortcodes.values()]
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._filters) + len(self._actions) + len(self._shortcodes)


# ------------------------------------------------------------------ #
# Process-wide loader
# ------------------------------------------------------------------ #

_loader: Optional[HookLoader] = None
_loader_lock = threading.Lock()


def get_loader() -> HookLoader:
    """Return the process-wide :class:`HookLoader`.

    If none has been installed via :func:`set_loader`, one backed by a
    fresh :class:`HookTable` is created on first call.
    """
    global _loader
    with _loader_lock:
        if _loader is None:
            _loader = HookLoader()
        return _loader


def set_loader(loader: HookLoader) -> None:
    """Install *loader* as the process-wide instance."""
    global _loader
    with _loader_lock:
        _loader = loader


def reset_loader() -> None:
    """Drop the process-wide loader. Primarily useful in test suites."""
    global _loader
    with _loader_lock:
        _loader = None
