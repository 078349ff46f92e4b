"""Define the interface airports use to query the weather."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class WeatherProvider(Protocol):
    """Anything that can report whether the weather is currently stormy."""

    def is_stormy(self) -> bool:
        ...
