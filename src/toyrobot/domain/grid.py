"""The bounded surface the robot moves on."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Grid:
    """Immutable ``width x height`` grid of discrete cells.

    Valid positions satisfy ``0 <= x < width`` and ``0 <= y < height``.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            msg = f"Grid dimensions must be positive, got {self.width}x{self.height}"
            raise ValueError(msg)

    def is_valid(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` lies on the grid."""
        return 0 <= x < self.width and 0 <= y < self.height
