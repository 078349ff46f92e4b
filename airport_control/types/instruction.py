"""Define types for instructions issued to planes."""
from dataclasses import dataclass
from enum import Enum

from airport_control.types.plane import Plane


class Action(Enum):
    """The movement a plane is instructed to make."""

    LAND = "land"
    TAKE_OFF = "take_off"


@dataclass
class Instruction:
    """An instruction for a single plane.

    Attributes:
        plane: The plane receiving the instruction.
        action: Whether the plane should land or take off.
    """

    plane: Plane
    action: Action

    def __str__(self) -> str:
        return f"{self.plane}_{self.action.value}"
