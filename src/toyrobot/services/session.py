"""SessionController — the command dispatch loop.

One run reads either a command file or an interactive input source and
applies each command to the robot, strictly one at a time, in order.

Unknown verbs are skipped in file mode but end an interactive session
(unless ``stop_on_unknown`` is turned off). A command that returns False
ends the run in either mode.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

from toyrobot.infrastructure.commandfile import is_command_file, read_command_lines
from toyrobot.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from toyrobot.infrastructure.sources import InputSource
    from toyrobot.services.context import SessionContext

logger = logging.getLogger(__name__)


class SessionMode(StrEnum):
    FILE = "file"
    INTERACTIVE = "interactive"


class Outcome(StrEnum):
    """Result of dispatching a single line."""

    CONTINUE = "continue"
    STOP = "stop"
    UNKNOWN = "unknown"


class SessionController:
    """Drives a robot from a command file or an interactive source."""

    def __init__(
        self,
        context: SessionContext,
        source: InputSource,
        *,
        stop_on_unknown: bool = True,
    ) -> None:
        self.context = context
        self.source = source
        self.stop_on_unknown = stop_on_unknown
        self._processed = 0
        self._skipped = 0

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self, path: str | Path | None = None) -> ServiceResult:
        """Process *path* if it names an existing file, else read interactively."""
        if path and is_command_file(path):
            return self.process_file(Path(path))
        if path:
            logger.debug("No command file at %s; reading interactively", path)
        return self.run_interactive()

    # ------------------------------------------------------------------
    # Modes
    # ------------------------------------------------------------------

    def process_file(self, path: Path) -> ServiceResult:
        """Apply every non-blank line of *path*; unknown verbs are skipped.

        A read failure is reported to the error sink and does not fall
        back to interactive mode.
        """
        self._reset_counters()
        try:
            lines = read_command_lines(path)
        except (OSError, UnicodeDecodeError) as exc:
            message = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
            self.context.error.write_line(f"Error processing file: {path}; {message}")
            logger.debug("Failed to read command file %s", path, exc_info=True)
            return ServiceResult(
                ok=False,
                op="run",
                data=self._stats(SessionMode.FILE),
                error=ServiceError(
                    code="FILE_READ_ERROR",
                    message=message,
                    detail={"path": str(path)},
                ),
            )

        logger.debug("Processing %d commands from %s", len(lines), path)
        for line in lines:
            if self.dispatch(line) is Outcome.STOP:
                break
        return ServiceResult(ok=True, op="run", data=self._stats(SessionMode.FILE))

    def run_interactive(self) -> ServiceResult:
        """Read and apply lines until the source is exhausted.

        Blank lines are skipped. An unknown verb ends the session when
        ``stop_on_unknown`` is set.
        """
        self._reset_counters()
        while (line := self.source.read_line()) is not None:
            if not line.strip():
                continue
            outcome = self.dispatch(line)
            if outcome is Outcome.STOP:
                break
            if outcome is Outcome.UNKNOWN and self.stop_on_unknown:
                logger.debug("Unknown command %r ends the session", line)
                break
        return ServiceResult(ok=True, op="run", data=self._stats(SessionMode.INTERACTIVE))

    # ------------------------------------------------------------------
    # Single commands
    # ------------------------------------------------------------------

    def dispatch(self, line: str | None) -> Outcome:
        """Resolve *line* and invoke it against the robot."""
        resolution = self.context.registry.resolve(line)
        if resolution is None:
            self._skipped += 1
            logger.debug("Unknown command: %r", line)
            return Outcome.UNKNOWN
        self._processed += 1
        keep_going = resolution.command.invoke(
            self.context.robot,
            self.context,
            resolution.args,
        )
        return Outcome.CONTINUE if keep_going else Outcome.STOP

    def process_command(self, line: str | None) -> bool:
        """Dispatch *line*; True if it resolved and the session should continue."""
        return self.dispatch(line) is Outcome.CONTINUE

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _reset_counters(self) -> None:
        self._processed = 0
        self._skipped = 0

    def _stats(self, mode: SessionMode) -> dict[str, object]:
        return {
            "mode": str(mode),
            "processed": self._processed,
            "skipped": self._skipped,
        }
