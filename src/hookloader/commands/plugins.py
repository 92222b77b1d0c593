"""Plugin commands -- list the plugins a bootstrap would load."""

from __future__ import annotations

import typer

from hookloader.commands import context_config
from hookloader.output import info, print_table

plugins_app = typer.Typer(no_args_is_help=True)


@plugins_app.command("list")
def plugins_list(ctx: typer.Context) -> None:
    """List plugins discovered in the ``hookloader.plugins`` entry-point group.

    Honours the ``plugins.enabled`` and ``plugins.disabled`` lists of the
    active configuration.

    Example::

        hookloader plugins list
        hookloader --json plugins list
    """
    from hookloader.plugins import bootstrap

    manager = bootstrap(context_config(ctx))
    plugins = manager.list_plugins()
    if not plugins:
        info("No plugins found.")
        return
    rows = [[p["name"], p["version"], p["description"]] for p in plugins]
    print_table(["Name", "Version", "Description"], rows, title="Plugins")
