"""Command file reading.

A command file is plain UTF-8 text, one command per line. Blank lines
are dropped here so callers only see candidate commands.
"""

from __future__ import annotations

from pathlib import Path


def is_command_file(path: str | Path | None) -> bool:
    """True if *path* names an existing regular file."""
    if not path:
        return False
    try:
        return Path(path).is_file()
    except (OSError, ValueError):
        # Unsearchable parents, over-long names and NUL bytes read as "no file".
        return False


def read_command_lines(path: Path) -> list[str]:
    """Read *path* and return its non-blank lines in order.

    Raises:
        OSError: The file could not be read.
        UnicodeDecodeError: The file is not valid UTF-8.
    """
    content = path.read_text(encoding="utf-8")
    return [line for line in content.splitlines() if line.strip()]
