"""hookloader -- deferred hook registration for host CMS plugins.

A plugin declares its actions, filters and shortcodes on a
:class:`~hookloader.loader.HookLoader` while it bootstraps. Once every
plugin has been loaded the loader is committed, forwarding each binding to
the host's dispatch API in a fixed order (filters, actions, shortcodes).

Typical workflow::

    hookloader plugins list      # show discovered plugins
    hookloader hooks list        # show what would be committed

Modules:
    loader: The hook registry and its process-wide default instance.
    dispatch: Host dispatcher interface and the in-memory ``HookTable``.
    assets: Asset enqueuer interface and the in-memory ``AssetQueue``.
    admin: Admin-area stylesheet/script enqueueing.
    plugins: Plugin base class, manager and the bundled boilerplate plugin.
    models: Pydantic models shared across the package.
    config: XDG-aware configuration management.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr formatting with Rich support.
    app: Typer application and CLI entry point.
"""

__version__ = "1.0.0"
