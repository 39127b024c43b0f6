"""Command capability and the registry that resolves verbs to commands.

The registry is built once at startup, frozen, and handed to the session
controller. Lookup is case-insensitive; HELP lists commands in
registration order.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, NamedTuple

from toyrobot.commands.parsing import split_command

if TYPE_CHECKING:
    from toyrobot.domain.robot import Robot
    from toyrobot.services.context import SessionContext

logger = logging.getLogger(__name__)

Handler = Callable[["Robot", "SessionContext", str], bool]


class Command(ABC):
    """A verb the session can invoke against the robot.

    Subclasses set ``name`` and ``usage`` and implement :meth:`invoke`,
    which returns True if the session should keep going.
    """

    name: str = ""
    usage: str = ""

    @abstractmethod
    def invoke(self, robot: Robot, context: SessionContext, args: str) -> bool:
        """Run the command with the raw argument string."""

    @property
    def help_line(self) -> str:
        """``"NAME usage"``, or just ``"NAME"`` when there is no usage."""
        return f"{self.name} {self.usage}" if self.usage else self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FunctionCommand(Command):
    """Adapts a plain ``handler(robot, context, args) -> bool`` to a Command."""

    def __init__(self, name: str, usage: str, handler: Handler) -> None:
        self.name = name
        self.usage = usage
        self._handler = handler

    def invoke(self, robot: Robot, context: SessionContext, args: str) -> bool:
        return self._handler(robot, context, args)


class Resolution(NamedTuple):
    """A resolved command line."""

    command: Command
    args: str


class CommandRegistry:
    """Mapping of uppercase verb -> :class:`Command`."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._frozen = False

    def register(self, command: Command) -> None:
        """Add *command* under its uppercased name.

        Raises:
            ValueError: Blank name or a name that is already registered.
            RuntimeError: The registry has been frozen.
        """
        if self._frozen:
            msg = f"Cannot register {command.name!r}: registry is frozen"
            raise RuntimeError(msg)
        key = command.name.strip().upper()
        if not key or any(ch.isspace() for ch in key):
            msg = f"Invalid command name {command.name!r}"
            raise ValueError(msg)
        if key in self._commands:
            msg = f"Command {key!r} is already registered"
            raise ValueError(msg)
        self._commands[key] = command
        logger.debug("Registered command: %s", key)

    def freeze(self) -> None:
        """Reject further registrations."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> Command | None:
        """Return the command registered as *name* (any case), or None."""
        return self._commands.get(name.strip().upper())

    def resolve(self, line: str | None) -> Resolution | None:
        """Resolve a raw command line to ``(command, args)``.

        None for blank input or an unknown verb.
        """
        split = split_command(line)
        if split is None:
            return None
        verb, args = split
        command = self._commands.get(verb)
        if command is None:
            return None
        return Resolution(command, args)

    @property
    def names(self) -> list[str]:
        return list(self._commands)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().upper() in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
