"""Extension layer — extra robot commands via pluggy.

INVARIANT: Plugin failures are warnings, never errors.
"""

from toyrobot.plugins.hookspecs import hookimpl
from toyrobot.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
