"""Define weather providers that airports can query."""
from dataclasses import dataclass, field
from itertools import cycle as cycle_forever
from typing import Iterator, Sequence

import pyro
import pyro.distributions as dist
import torch

DEFAULT_STORM_PROBABILITY = 0.2


@dataclass
class FixedWeather:
    """Weather that only changes when the caller changes it.

    Attributes:
        stormy: Whether it is currently stormy.
    """

    stormy: bool = False

    def is_stormy(self) -> bool:
        return self.stormy


class ScriptedWeather:
    """Weather that follows a predetermined forecast, one entry per query."""

    def __init__(self, forecast: Sequence[bool], cycle: bool = False):
        """
        Args:
            forecast: the stormy/clear answers to give, in order.
            cycle: if True, start again from the beginning once the forecast is
                used up; otherwise running out of forecast is an error.
        """
        if len(forecast) == 0:
            raise ValueError("Forecast must contain at least one entry")

        self.forecast = [bool(stormy) for stormy in forecast]
        self.cycle = cycle
        self._remaining: Iterator[bool] = (
            cycle_forever(self.forecast) if cycle else iter(self.forecast)
        )

    def is_stormy(self) -> bool:
        try:
            return next(self._remaining)
        except StopIteration:
            raise IndexError(
                f"Forecast of {len(self.forecast)} entries has been used up"
            ) from None


@dataclass
class RandomWeather:
    """Weather that is stormy at random.

    Each query draws a new Bernoulli sample, so the answer is independent of
    previous queries. Every draw is a named pyro sample site, which makes the
    weather visible to pyro handlers (e.g. for conditioning or tracing).

    Attributes:
        storm_probability: The probability that any one query reports a storm.
        var_prefix: The prefix for sampled variable names.
        num_queries: The number of times the weather has been queried.
    """

    storm_probability: float = DEFAULT_STORM_PROBABILITY
    var_prefix: str = ""
    num_queries: int = field(default=0, init=False)

    def __post_init__(self):
        if not 0.0 <= self.storm_probability <= 1.0:
            raise ValueError(
                f"Storm probability must be in [0, 1], got {self.storm_probability}"
            )

    def is_stormy(self) -> bool:
        var_name = f"{self.var_prefix}stormy_{self.num_queries}"
        self.num_queries += 1
        stormy = pyro.sample(
            var_name, dist.Bernoulli(torch.tensor(float(self.storm_probability)))
        )
        return bool(stormy.item())
