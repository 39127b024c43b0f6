"""Pluggy hook specifications for toyrobot.

Plugins contribute commands once at startup, before the registry is
frozen. Built-in verbs cannot be overridden.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from toyrobot.commands.registry import Command

PROJECT_NAME = "toyrobot"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class ToyRobotHookSpec:
    """Hook specifications for the toyrobot plugin system."""

    @hookspec
    def register_commands(self) -> list[Command] | None:
        """Return extra commands to add to the registry."""
