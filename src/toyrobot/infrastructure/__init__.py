"""I/O collaborators for the session: input sources and command files."""

from toyrobot.infrastructure.commandfile import is_command_file, read_command_lines
from toyrobot.infrastructure.sources import InputSource, LineQueueInput, StreamInput

__all__ = [
    "InputSource",
    "LineQueueInput",
    "StreamInput",
    "is_command_file",
    "read_command_lines",
]
