"""Text normalization for command lines and command arguments.

Rules:
- A command line is trimmed, then split on its first whitespace run into
  ``(verb, args)``. The verb is uppercased; args pass through verbatim.
- PLACE arguments are split on commas and/or whitespace, empty tokens dropped.
"""

from __future__ import annotations

import re

from toyrobot.domain.orientation import Orientation
from toyrobot.domain.robot import Placement

_ARG_SEPARATORS = re.compile(r"[,\s]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def split_command(line: str | None) -> tuple[str, str] | None:
    """Split *line* into ``(VERB, args)``. None for blank input."""
    if not line:
        return None
    parts = line.strip().split(None, 1)
    if not parts:
        return None
    verb = parts[0].upper()
    args = parts[1] if len(parts) > 1 else ""
    return verb, args


def tokenize_args(args: str) -> list[str]:
    """Split an argument string on commas or whitespace, dropping empties."""
    return [token for token in _ARG_SEPARATORS.split(args) if token]


def parse_int(token: str) -> int | None:
    """Parse an optionally signed decimal integer, or return None."""
    if not _INTEGER.fullmatch(token):
        return None
    return int(token)


def parse_placement(args: str) -> Placement | None:
    """Parse ``X,Y,FACING`` into a :class:`Placement`.

    Returns None for wrong arity, non-integer coordinates, or an unknown
    facing. Grid bounds are not checked here.
    """
    tokens = tokenize_args(args)
    if len(tokens) != 3:
        return None
    x = parse_int(tokens[0])
    y = parse_int(tokens[1])
    facing = Orientation.parse(tokens[2])
    if x is None or y is None or facing is None:
        return None
    return Placement(x, y, facing)
