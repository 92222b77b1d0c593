"""Boilerplate plugin shipped with hookloader.

See Also:
    :class:`~hookloader.plugins.boilerplate.plugin.BoilerplatePlugin`
"""

from hookloader.plugins.boilerplate.plugin import BoilerplatePlugin

__all__ = ["BoilerplatePlugin"]
