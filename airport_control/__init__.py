"""Simulate an airport controlling landings and take-offs."""
from airport_control.airport import DEFAULT_CAPACITY, Airport
from airport_control.errors import (
    AirportError,
    CapacityExceeded,
    ErrorKind,
    PlaneNotPresent,
    StormyWeather,
)
from airport_control.types import Action, Instruction, Plane, WeatherProvider
from airport_control.weather import FixedWeather, RandomWeather, ScriptedWeather

__all__ = [
    "DEFAULT_CAPACITY",
    "Airport",
    "AirportError",
    "CapacityExceeded",
    "ErrorKind",
    "PlaneNotPresent",
    "StormyWeather",
    "Action",
    "Instruction",
    "Plane",
    "WeatherProvider",
    "FixedWeather",
    "RandomWeather",
    "ScriptedWeather",
]
