"""Exception hierarchy for hookloader.

The hook registry itself never raises: duplicate bindings overwrite
silently. Errors only come from the surrounding layers (plugin loading,
configuration files, CLI usage). All of them inherit from
:class:`HookloaderError`, which carries an ``exit_code`` that
:func:`hookloader.app.main` passes to ``sys.exit``.

Subclass hierarchy::

    HookloaderError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- PluginError         (exit 10)
    +-- ConfigError         (exit 1)
"""

from hookloader.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_PLUGIN_ERROR,
)


class HookloaderError(Exception):
    """Base exception for all hookloader errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(HookloaderError):
    """Raised for invalid CLI arguments (unknown config keys, bad values)."""

    exit_code = EXIT_INVALID_USAGE


class PluginError(HookloaderError):
    """Raised when a plugin fails to load or is loaded twice under one name."""

    exit_code = EXIT_PLUGIN_ERROR


class ConfigError(HookloaderError):
    """Raised for configuration problems (invalid JSON, failed validation)."""

    exit_code = EXIT_GENERIC_FAILURE
