"""Line-at-a-time input sources for interactive sessions.

A source returns the next line without its line ending, or None once
input is exhausted.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Protocol, TextIO


class InputSource(Protocol):
    def read_line(self) -> str | None: ...


class StreamInput:
    """Reads lines from a text stream such as ``sys.stdin``."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def read_line(self) -> str | None:
        line = self._stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")


class LineQueueInput:
    """Serves a fixed sequence of lines, then None."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: deque[str] = deque(lines)

    def push(self, line: str) -> None:
        self._lines.append(line)

    def read_line(self) -> str | None:
        if not self._lines:
            return None
        return self._lines.popleft()

    def __len__(self) -> int:
        return len(self._lines)
