"""Robot command registry and built-in verbs.

Provides build_registry(), which registers the built-ins plus any
plugin-contributed commands and returns a frozen registry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from toyrobot.commands.builtins import BUILTIN_COMMANDS
from toyrobot.commands.registry import (
    Command,
    CommandRegistry,
    FunctionCommand,
    Resolution,
)

logger = logging.getLogger(__name__)

__all__ = [
    "Command",
    "CommandRegistry",
    "FunctionCommand",
    "Resolution",
    "build_registry",
]


def build_registry(extra: Iterable[Command] = ()) -> CommandRegistry:
    """Create a frozen registry with the built-ins followed by *extra*.

    Extra commands that clash with an existing name are skipped with a
    warning.
    """
    registry = CommandRegistry()
    for command_cls in BUILTIN_COMMANDS:
        registry.register(command_cls())
    for command in extra:
        try:
            registry.register(command)
        except ValueError:
            logger.warning("Skipping command registration %r", command.name, exc_info=True)
    registry.freeze()
    return registry
