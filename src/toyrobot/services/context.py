"""SessionContext — what a command can see while it runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toyrobot.commands.registry import CommandRegistry
    from toyrobot.domain.grid import Grid
    from toyrobot.domain.robot import Robot
    from toyrobot.output.sinks import LineSink


@dataclass
class SessionContext:
    """References held for the duration of one session run.

    Not part of the simulation state; the robot owns that.
    """

    robot: Robot
    grid: Grid
    registry: CommandRegistry
    output: LineSink
    error: LineSink
