"""Config commands -- view and modify the global configuration.

Provides the ``hookloader config`` sub-command group for reading, updating
and resetting :class:`~hookloader.models.GlobalConfig`.
"""

from __future__ import annotations

from typing import Any

import typer

from hookloader.exceptions import InvalidUsageError
from hookloader.output import format_response, info, success

config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show the persisted global configuration.

    Example::

        hookloader config show
        hookloader --json config show
    """
    from hookloader.config import global_config_path, load_global_config

    config = load_global_config()
    info(f"Config file: {global_config_path()}")
    format_response(config.model_dump(mode="json"))


def _coerce(key: str, current: Any, value: str) -> Any:
    if isinstance(current, bool):
        return value.lower() in ("true", "1", "yes")
    if isinstance(current, int):
        try:
            return int(value)
        except ValueError:
            raise InvalidUsageError(f"Expected integer for {key}, got: {value}") from None
    if isinstance(current, list):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        help="Config key (dot notation, e.g., 'assets.base_url')."
    ),
    value: str = typer.Argument(help="Value to set. Lists take comma-separated items."),
) -> None:
    """Set a configuration value.

    The value is coerced to the type of the existing field and the result
    is validated before it is saved.

    Raises:
        InvalidUsageError: If the key is unknown or the value is invalid.

    Example::

        hookloader config set output.format json
        hookloader config set plugins.disabled plugin-name,legacy
    """
    from hookloader.config import load_global_config, save_global_config
    from hookloader.models import GlobalConfig

    data = load_global_config().model_dump(mode="json")

    keys = key.split(".")
    target = data
    for k in keys[:-1]:
        if not isinstance(target.get(k), dict):
            raise InvalidUsageError(f"Invalid config key: {key}")
        target = target[k]

    final_key = keys[-1]
    if final_key not in target:
        raise InvalidUsageError(f"Unknown config key: {key}")

    coerced = _coerce(key, target[final_key], value)
    target[final_key] = coerced

    try:
        new_config = GlobalConfig.model_validate(data)
    except ValueError as exc:
        raise InvalidUsageError(f"Validation error: {exc}") from None

    save_global_config(new_config)
    success(f"Set {key} = {coerced}")


@config_app.command("reset")
def config_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
) -> None:
    """Reset configuration to defaults.

    Example::

        hookloader config reset --force
    """
    from hookloader.config import save_global_config
    from hookloader.models import GlobalConfig

    if not force and not typer.confirm("Reset all config to defaults?"):
        info("Cancelled.")
        raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")
