"""Compass facings and their rotation order."""

from __future__ import annotations

from enum import StrEnum


class Orientation(StrEnum):
    """Direction the robot faces, in clockwise order."""

    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"

    @classmethod
    def parse(cls, text: str) -> Orientation | None:
        """Look up a facing by name (case-insensitive). None if unknown."""
        try:
            return cls[text.strip().upper()]
        except KeyError:
            return None

    def right(self) -> Orientation:
        """Facing after a 90 degree clockwise turn."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % len(_CLOCKWISE)]

    def left(self) -> Orientation:
        """Facing after a 90 degree counter-clockwise turn."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % len(_CLOCKWISE)]

    @property
    def step(self) -> tuple[int, int]:
        """Unit ``(dx, dy)`` for one move in this direction."""
        return _STEPS[self]


_CLOCKWISE: list[Orientation] = list(Orientation)

_STEPS: dict[Orientation, tuple[int, int]] = {
    Orientation.NORTH: (0, 1),
    Orientation.EAST: (1, 0),
    Orientation.SOUTH: (0, -1),
    Orientation.WEST: (-1, 0),
}
