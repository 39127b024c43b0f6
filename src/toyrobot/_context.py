"""AppContext — wiring for one CLI run.

Created by the root command from :class:`RobotSettings`. Configures
logging, builds the command registry (built-ins plus plugin commands),
and hands a ready :class:`SessionController` to the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from toyrobot.commands import build_registry
from toyrobot.config.logging import configure_logging
from toyrobot.domain.robot import Robot
from toyrobot.infrastructure.sources import StreamInput
from toyrobot.output.console import create_console
from toyrobot.output.sinks import ConsoleSink, EchoSink
from toyrobot.services.context import SessionContext
from toyrobot.services.session import SessionController

if TYPE_CHECKING:
    from toyrobot.commands.registry import Command, CommandRegistry
    from toyrobot.config.settings import RobotSettings
    from toyrobot.services.result import ServiceResult


class AppContext:
    """Builds the session for a CLI invocation and reports its outcome."""

    def __init__(self, settings: RobotSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def plugin_commands(self) -> list[Command]:
        """Commands contributed by installed plugins (empty if disabled)."""
        if not self.settings.plugins.enabled:
            return []
        from toyrobot.plugins.manager import PluginManager

        manager = PluginManager()
        manager.discover_and_load()
        return manager.collect_commands()

    def build_registry(self) -> CommandRegistry:
        return build_registry(self.plugin_commands())

    def create_session(self, stdin: TextIO | None = None) -> SessionController:
        """Assemble robot, grid, registry and sinks into a controller."""
        context = SessionContext(
            robot=Robot(),
            grid=self.settings.grid.to_grid(),
            registry=self.build_registry(),
            output=EchoSink(),
            error=ConsoleSink(create_console(stderr=True), style="toy.error"),
        )
        return SessionController(
            context,
            StreamInput(stdin if stdin is not None else _stdin()),
            stop_on_unknown=self.settings.session.stop_on_unknown,
        )

    def emit(self, result: ServiceResult) -> None:
        """Exit with code 1 if the run failed; the error was already reported."""
        if not result.ok:
            raise SystemExit(1)


def _stdin() -> TextIO:
    """Stdin with undecodable bytes replaced, so bad input is an unknown verb."""
    return click.get_text_stream("stdin", errors="replace")
