"""Canonical Pydantic models shared across all hookloader modules.

The models fall into three groups:

**Hook models** -- the registry's data shapes:
    :class:`HookKind`, :class:`BindingKey` and :class:`HookBinding`.

**Asset models** -- what an :class:`~hookloader.assets.AssetQueue` records:
    :class:`StyleAsset` and :class:`ScriptAsset`.

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`OutputConfig`, :class:`PluginsConfig`, :class:`AssetsConfig`
    and :class:`GlobalConfig`.
"""

from __future__ import annotations

import enum
from typing import Any, Callable, NamedTuple

from pydantic import BaseModel, ConfigDict, Field


# --- Hooks ---


class HookKind(str, enum.Enum):
    """The three host extension points a binding can target."""

    ACTION = "action"
    FILTER = "filter"
    SHORTCODE = "shortcode"


class BindingKey(NamedTuple):
    """Deduplication key of a :class:`HookBinding`.

    Built from the hook name, the owner's type tag and the callback name.
    Priority, accepted argument count and the owner's identity are not
    part of the key, so two instances of the same class registering the
    same callback on the same hook share one key.
    """

    hook_name: str
    owner_type: str
    callback_name: str


def type_tag(owner: Any) -> str:
    """Return the stable type tag of *owner* (``"<module>.<qualname>"``)."""
    cls = type(owner)
    return f"{cls.__module__}.{cls.__qualname__}"


class HookBinding(BaseModel):
    """One deferred callback association held by the loader.

    The owner is a plain reference: the binding does not copy it and the
    loader does not manage its lifetime. For shortcodes ``hook_name`` is the
    shortcode tag.

    Example::

        HookBinding(hook_name="init", owner=handler, callback_name="on_init")
    """

    model_config = ConfigDict(frozen=True)

    hook_name: str
    owner: Any
    callback_name: str
    priority: int = Field(default=10, description="Lower runs earlier")
    accepted_args: int = Field(
        default=1, description="Number of arguments the host passes to the callback"
    )

    @property
    def key(self) -> BindingKey:
        return BindingKey(self.hook_name, type_tag(self.owner), self.callback_name)

    @property
    def callback(self) -> Callable[..., Any]:
        """The bound callable, resolved from the owner on each access.

        Raises:
            AttributeError: If the owner has no attribute named
                ``callback_name``.
        """
        return getattr(self.owner, self.callback_name)


# --- Assets ---


class StyleAsset(BaseModel):
    """A stylesheet enqueued through an asset enqueuer."""

    handle: str
    url: str
    dependencies: list[str] = Field(default_factory=list)
    version: str | None = None


class ScriptAsset(BaseModel):
    """A script enqueued through an asset enqueuer."""

    handle: str
    url: str
    dependencies: list[str] = Field(default_factory=list)
    version: str | None = None
    in_footer: bool = False


# --- Configuration ---


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: str = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class PluginsConfig(BaseModel):
    """Explicit plugin allow/deny lists stored in :class:`GlobalConfig`."""

    enabled: list[str] = Field(default_factory=list)
    disabled: list[str] = Field(default_factory=list)


class AssetsConfig(BaseModel):
    """Where plugin assets are served from."""

    base_url: str = Field(
        default="/wp-content/plugins/",
        description="URL prefix under which each plugin's directory is served",
    )


class GlobalConfig(BaseModel):
    """User-level configuration loaded from ``config.json``.

    Persisted by :func:`~hookloader.config.save_global_config`. Every field
    has a default so an empty or missing file yields a usable config.
    """

    output: OutputConfig = Field(default_factory=OutputConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
    assets: AssetsConfig = Field(default_factory=AssetsConfig)
    log_level: str = Field(default="WARNING", description="Level for the hookloader logger")
