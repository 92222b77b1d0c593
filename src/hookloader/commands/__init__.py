"""Built-in CLI sub-commands for hookloader.

* :mod:`~hookloader.commands.plugins` -- list discovered plugins.
* :mod:`~hookloader.commands.hooks` -- show committed hook bindings.
* :mod:`~hookloader.commands.config` -- view and modify global settings.

Each module exports a :class:`typer.Typer` sub-application registered on
the root app by :func:`hookloader.app.main`.
"""

from __future__ import annotations

import typer

from hookloader.models import GlobalConfig


def context_config(ctx: typer.Context) -> GlobalConfig:
    """Return the configuration resolved by the root callback.

    Falls back to a fresh resolution when the sub-app is invoked on its own
    (as in tests).
    """
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and isinstance(obj.get("config"), GlobalConfig):
        return obj["config"]
    from hookloader.config import resolve_config

    return resolve_config()
