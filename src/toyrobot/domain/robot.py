"""Robot state machine: UNPLACED -> PLACED, never off the grid.

INVARIANT: Whenever the robot is placed, its position is valid on the grid
it was placed on. Every mutating operation is ignored silently when the robot
has not been placed yet, or when applying it would break the invariant.
Invalid input is inert; nothing here raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum

from toyrobot.domain.grid import Grid
from toyrobot.domain.orientation import Orientation

logger = logging.getLogger(__name__)


class RobotState(StrEnum):
    """Lifecycle of a robot within a session."""

    UNPLACED = "unplaced"
    PLACED = "placed"


@dataclass(frozen=True)
class Placement:
    """Position and facing of a placed robot."""

    x: int
    y: int
    facing: Orientation

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.facing.name}"


class Robot:
    """A single toy robot moving on a :class:`Grid`.

    The grid is supplied on placement and kept for later moves. Placement
    is replaced atomically, so the robot is never observed half-updated.
    """

    def __init__(self) -> None:
        self._placement: Placement | None = None
        self._grid: Grid | None = None

    @property
    def state(self) -> RobotState:
        if self._placement is None:
            return RobotState.UNPLACED
        return RobotState.PLACED

    @property
    def is_placed(self) -> bool:
        return self._placement is not None

    @property
    def placement(self) -> Placement | None:
        """Current placement, or None before the first valid PLACE."""
        return self._placement

    def place(self, x: int, y: int, facing: Orientation, grid: Grid) -> None:
        """Put the robot at ``(x, y)`` facing *facing* if the cell is on *grid*."""
        if not grid.is_valid(x, y):
            logger.debug("Ignored placement outside grid: %d,%d", x, y)
            return
        self._grid = grid
        self._placement = Placement(x, y, facing)

    def move(self) -> None:
        """Step one cell forward unless that would leave the grid."""
        current = self._placement
        if current is None or self._grid is None:
            logger.debug("Ignored move: robot not placed")
            return
        dx, dy = current.facing.step
        new_x, new_y = current.x + dx, current.y + dy
        if not self._grid.is_valid(new_x, new_y):
            logger.debug("Ignored move off grid from %s", current)
            return
        self._placement = replace(current, x=new_x, y=new_y)

    def turn_left(self) -> None:
        """Rotate 90 degrees counter-clockwise."""
        self._turn(clockwise=False)

    def turn_right(self) -> None:
        """Rotate 90 degrees clockwise."""
        self._turn(clockwise=True)

    def _turn(self, *, clockwise: bool) -> None:
        current = self._placement
        if current is None:
            logger.debug("Ignored turn: robot not placed")
            return
        facing = current.facing.right() if clockwise else current.facing.left()
        self._placement = replace(current, facing=facing)

    def report(self) -> str:
        """Return ``"X,Y,FACING"``, or an empty string when not placed."""
        if self._placement is None:
            return ""
        return str(self._placement)
