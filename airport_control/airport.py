"""Define a class representing an airport."""
import logging

from airport_control.errors import CapacityExceeded, PlaneNotPresent, StormyWeather
from airport_control.types import Plane, WeatherProvider

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 20


class Airport:
    """Controls the planes landing at and taking off from a single airport.

    The weather is queried every time an instruction is checked, so the
    provider may change its answer between calls.

    Attributes:
        weather: The weather provider shared with the rest of the simulation.
        capacity: The maximum number of planes on the apron.
        planes: The planes currently on the apron, in landing order.
    """

    def __init__(self, weather: WeatherProvider, capacity: int = DEFAULT_CAPACITY):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"Capacity must be an integer, got {capacity!r}")
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}")

        self._weather = weather
        self._capacity = capacity
        self._planes: list[Plane] = []

    @property
    def weather(self) -> WeatherProvider:
        return self._weather

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def planes(self) -> tuple[Plane, ...]:
        return tuple(self._planes)

    def __len__(self) -> int:
        return len(self._planes)

    def __contains__(self, plane: Plane) -> bool:
        return self._at_airport(plane)

    def instruct_landing(self, plane: Plane) -> None:
        """Land a plane on the apron.

        Args:
            plane: The plane to land.

        Raises:
            CapacityExceeded: if the apron is full. Checked before the weather.
            StormyWeather: if the weather is stormy.
        """
        if self._full():
            raise CapacityExceeded()
        if self._stormy():
            raise StormyWeather("Cannot land due to stormy weather")

        self._planes.append(plane)
        logger.debug(
            "%s landed (%d/%d on apron)", plane, len(self._planes), self._capacity
        )

    def instruct_take_off(self, plane: Plane) -> None:
        """Clear a plane on the apron for take-off and release its slot.

        Args:
            plane: The plane to take off.

        Raises:
            StormyWeather: if the weather is stormy. Checked before presence.
            PlaneNotPresent: if the plane is not on the apron.
        """
        if self._stormy():
            raise StormyWeather("Cannot take off due to stormy weather")
        if not self._at_airport(plane):
            raise PlaneNotPresent()

        self._remove(plane)
        logger.debug(
            "%s took off (%d/%d on apron)", plane, len(self._planes), self._capacity
        )

    def _full(self) -> bool:
        return len(self._planes) >= self._capacity

    def _stormy(self) -> bool:
        return bool(self._weather.is_stormy())

    def _at_airport(self, plane: Plane) -> bool:
        return any(landed is plane for landed in self._planes)

    def _remove(self, plane: Plane) -> None:
        # Remove by identity rather than equality
        for i, landed in enumerate(self._planes):
            if landed is plane:
                del self._planes[i]
                return
