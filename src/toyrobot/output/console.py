"""Rich Console factory and theme for toyrobot diagnostics.

Reports and help text stay plain so they can be piped; the error stream
goes through a themed Console. In non-TTY environments (tests, pipes)
Rich disables color codes on its own.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console
from rich.theme import Theme

TOY_THEME = Theme({"toy.error": "bold red"})


def create_console(
    *,
    stderr: bool = False,
    file: TextIO | None = None,
    no_color: bool = False,
) -> Console:
    """Create a themed Console.

    Args:
        stderr: Write to ``sys.stderr`` instead of ``sys.stdout``.
        file: Explicit stream; overrides *stderr*.
        no_color: Disable ANSI escape codes.
    """
    return Console(
        file=file,
        stderr=stderr,
        theme=TOY_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
    )
