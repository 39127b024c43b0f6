"""Domain layer — grid, orientation, and the robot state machine.

Pure logic only: no I/O, no CLI, no configuration.
"""

from toyrobot.domain.grid import Grid
from toyrobot.domain.orientation import Orientation
from toyrobot.domain.robot import Placement, Robot, RobotState

__all__ = ["Grid", "Orientation", "Placement", "Robot", "RobotState"]
