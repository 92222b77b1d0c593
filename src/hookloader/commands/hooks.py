"""Hook commands -- inspect what loaded plugins hand to the host.

``hooks list`` shows the loader's bindings in commit order.
``hooks table`` shows the host's view after the commit: every hook with
its callbacks in the order the host would run them.
"""

from __future__ import annotations

from typing import Optional

import typer

from hookloader.commands import context_config
from hookloader.dispatch import HookTable
from hookloader.models import HookKind, type_tag
from hookloader.output import info, print_table

hooks_app = typer.Typer(no_args_is_help=True)


def _describe(owner: object, callback_name: str) -> str:
    return f"{type_tag(owner)}.{callback_name}"


@hooks_app.command("list")
def hooks_list(
    ctx: typer.Context,
    kind: Optional[HookKind] = typer.Option(
        None, "--kind", "-k", help="Only show one kind of binding."
    ),
) -> None:
    """List the bindings plugins added, in commit order.

    Example::

        hookloader hooks list
        hookloader hooks list --kind action
    """
    from hookloader.plugins import bootstrap

    manager = bootstrap(context_config(ctx))
    rows = [
        [
            k.value,
            b.hook_name,
            _describe(b.owner, b.callback_name),
            str(b.priority),
            str(b.accepted_args),
        ]
        for k, b in manager.loader.bindings()
        if kind is None or k == kind
    ]
    if not rows:
        info("No hooks registered.")
        return
    print_table(["Kind", "Hook", "Callback", "Priority", "Args"], rows, title="Hooks")


@hooks_app.command("table")
def hooks_table(ctx: typer.Context) -> None:
    """Show every committed hook with its callbacks in run order.

    Example::

        hookloader hooks table
    """
    from hookloader.plugins import bootstrap

    table = HookTable()
    bootstrap(context_config(ctx), table)

    rows: list[list[str]] = []
    for kind in (HookKind.FILTER, HookKind.ACTION, HookKind.SHORTCODE):
        for hook_name in table.hook_names(kind):
            for position, reg in enumerate(table.registrations(kind, hook_name), start=1):
                rows.append(
                    [
                        kind.value,
                        hook_name,
                        str(position),
                        _describe(reg.owner, reg.callback_name),
                        str(reg.priority),
                    ]
                )
    if not rows:
        info("No hooks committed.")
        return
    print_table(["Kind", "Hook", "#", "Callback", "Priority"], rows, title="Host hook table")
