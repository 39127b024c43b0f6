"""Shared pytest fixtures for toyrobot tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest
from click.testing import CliRunner

from toyrobot.commands import CommandRegistry, build_registry
from toyrobot.domain.grid import Grid
from toyrobot.domain.robot import Robot
from toyrobot.infrastructure.sources import LineQueueInput
from toyrobot.output.sinks import BufferSink
from toyrobot.services.context import SessionContext
from toyrobot.services.session import SessionController


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def grid() -> Grid:
    """The standard 5x5 table."""
    return Grid(5, 5)


@pytest.fixture
def robot() -> Robot:
    return Robot()


@pytest.fixture
def registry() -> CommandRegistry:
    """Frozen registry with only the built-in commands."""
    return build_registry()


@pytest.fixture
def output() -> BufferSink:
    return BufferSink()


@pytest.fixture
def errors() -> BufferSink:
    return BufferSink()


@pytest.fixture
def context(
    robot: Robot,
    grid: Grid,
    registry: CommandRegistry,
    output: BufferSink,
    errors: BufferSink,
) -> SessionContext:
    return SessionContext(robot=robot, grid=grid, registry=registry, output=output, error=errors)


@pytest.fixture
def make_session(context: SessionContext) -> Callable[..., SessionController]:
    """Factory for a controller whose interactive input is *lines*."""

    def _make(lines: Iterable[str] = (), *, stop_on_unknown: bool = True) -> SessionController:
        return SessionController(
            context,
            LineQueueInput(lines),
            stop_on_unknown=stop_on_unknown,
        )

    return _make
