"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from toyrobot.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    toy = logging.getLogger("toyrobot")
    toy_level = toy.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    toy.setLevel(toy_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("toyrobot").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("toyrobot").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("toyrobot.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "toyrobot.test"
        assert "timestamp" in parsed

    def test_robot_debug_logs_are_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        from toyrobot.domain.robot import Robot

        configure_logging(verbose=True, log_json=True)
        Robot().move()
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Ignored move: robot not placed"
        assert parsed["logger"] == "toyrobot.domain.robot"
        assert parsed["level"] == "debug"

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        from toyrobot.domain.robot import Robot

        configure_logging(verbose=False, log_json=True)
        Robot().move()
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
