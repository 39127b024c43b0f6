"""Built-in robot verbs: PLACE, LEFT, RIGHT, MOVE, REPORT, HELP.

Every built-in returns True; the session ends only when input runs out
(or, interactively, on an unknown verb).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from toyrobot.commands.parsing import parse_placement
from toyrobot.commands.registry import Command

if TYPE_CHECKING:
    from toyrobot.domain.robot import Robot
    from toyrobot.services.context import SessionContext

logger = logging.getLogger(__name__)

HELP_TITLE = "Usage:"
HELP_RULE = "-----"


class PlaceCommand(Command):
    name = "PLACE"
    usage = "<XPos>,<YPos>,<Facing>"

    def invoke(self, robot: Robot, context: SessionContext, args: str) -> bool:
        placement = parse_placement(args)
        if placement is None:
            logger.debug("Ignored malformed PLACE arguments: %r", args)
            return True
        robot.place(placement.x, placement.y, placement.facing, context.grid)
        return True


class LeftCommand(Command):
    name = "LEFT"

    def invoke(self, robot: Robot, context: SessionContext, args: str) -> bool:
        robot.turn_left()
        return True


class RightCommand(Command):
    name = "RIGHT"

    def invoke(self, robot: Robot, context: SessionContext, args: str) -> bool:
        robot.turn_right()
        return True


class MoveCommand(Command):
    name = "MOVE"

    def invoke(self, robot: Robot, context: SessionContext, args: str) -> bool:
        robot.move()
        return True


class ReportCommand(Command):
    """Write the robot's position to the output sink, if it has one."""

    name = "REPORT"

    def invoke(self, robot: Robot, context: SessionContext, args: str) -> bool:
        report = robot.report()
        if report:
            context.output.write_line(report)
        return True


class HelpCommand(Command):
    """List every registered command with its usage hint."""

    name = "HELP"

    def invoke(self, robot: Robot, context: SessionContext, args: str) -> bool:
        context.output.write_line(HELP_TITLE)
        context.output.write_line(HELP_RULE)
        for command in context.registry:
            context.output.write_line(command.help_line)
        context.output.write_line(HELP_RULE)
        return True


BUILTIN_COMMANDS: tuple[type[Command], ...] = (
    PlaceCommand,
    LeftCommand,
    RightCommand,
    MoveCommand,
    ReportCommand,
    HelpCommand,
)
