"""Output sinks.

A sink accepts whole lines of text. The session writes exactly one line
per REPORT, the framed listing for HELP, and one line per file error.
"""

from __future__ import annotations

from typing import Protocol

import click
from rich.console import Console


class LineSink(Protocol):
    def write_line(self, text: str) -> None: ...


class EchoSink:
    """Writes plain lines to stdout (or stderr) via ``click.echo``."""

    def __init__(self, *, err: bool = False) -> None:
        self._err = err

    def write_line(self, text: str) -> None:
        click.echo(text, err=self._err)


class ConsoleSink:
    """Writes lines through a Rich Console, optionally styled."""

    def __init__(self, console: Console, *, style: str | None = None) -> None:
        self._console = console
        self._style = style

    def write_line(self, text: str) -> None:
        self._console.print(text, style=self._style, markup=False, emoji=False, highlight=False)


class BufferSink:
    """Collects lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def getvalue(self) -> str:
        """All collected lines joined with newlines (trailing newline included)."""
        return "".join(f"{line}\n" for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()
