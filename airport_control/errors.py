"""Define the errors raised when an airport refuses an instruction."""
from enum import Enum


class ErrorKind(Enum):
    """The reasons an airport can refuse a landing or take-off."""

    CAPACITY_EXCEEDED = "capacity_exceeded"
    STORMY_WEATHER = "stormy_weather"
    PLANE_NOT_PRESENT = "plane_not_present"


class AirportError(Exception):
    """Base class for refused instructions.

    Attributes:
        kind: The reason the instruction was refused.
    """

    kind: ErrorKind


class CapacityExceeded(AirportError):
    kind = ErrorKind.CAPACITY_EXCEEDED

    def __init__(self, message: str = "Cannot land. Airport is full"):
        super().__init__(message)


class StormyWeather(AirportError):
    kind = ErrorKind.STORMY_WEATHER

    def __init__(self, message: str = "Cannot move due to stormy weather"):
        super().__init__(message)


class PlaneNotPresent(AirportError):
    kind = ErrorKind.PLANE_NOT_PRESENT

    def __init__(
        self, message: str = "Plane cannot take off. Plane at another airport"
    ):
        super().__init__(message)
