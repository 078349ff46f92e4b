"""Define types used in the airport simulation."""
from airport_control.types.instruction import Action, Instruction
from airport_control.types.plane import Plane
from airport_control.types.util import TailNumber
from airport_control.types.weather import WeatherProvider

__all__ = [
    "TailNumber",
    "Plane",
    "Action",
    "Instruction",
    "WeatherProvider",
]
