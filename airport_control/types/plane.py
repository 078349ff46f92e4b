"""Define a class representing a plane."""
from dataclasses import dataclass

from airport_control.types.util import TailNumber


@dataclass(eq=False)
class Plane:
    """A plane that can land at and take off from an airport.

    Planes compare by identity, so two planes sharing a tail number are still
    tracked separately on the apron.

    Attributes:
        tail_number: The registration of the plane.
    """

    tail_number: TailNumber

    def __str__(self) -> str:
        return self.tail_number
