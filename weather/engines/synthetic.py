from __future__ import annotations

import math
import random
from collections.abc import Sequence
from datetime import date, timedelta

from .sampling import (
    CategoricalDistribution,
    RandomSource,
    round_half_up,
    uniform_int,
)
from .types import Condition, CurrentConditions, DayForecast

FORECAST_DAYS = 14

CONDITIONS: CategoricalDistribution[Condition] = CategoricalDistribution(
    [
        ("Sunny", 0.30),
        ("Partly Cloudy", 0.25),
        ("Cloudy", 0.20),
        ("Rainy", 0.15),
        ("Thunderstorms", 0.05),
        ("Drizzle", 0.05),
    ],
    fallback="Sunny",
)

# Half-open percentage ranges; unlisted conditions use DRY_PRECIPITATION.
PRECIPITATION_RANGES: dict[Condition, tuple[int, int]] = {
    "Rainy": (60, 90),
    "Thunderstorms": (60, 90),
    "Drizzle": (40, 60),
    "Cloudy": (20, 50),
    "Partly Cloudy": (10, 30),
}
DRY_PRECIPITATION = (0, 15)


class SyntheticWeatherEngine:
    """Fabricates plausible-looking conditions from a random source.

    Nothing here queries a real provider: temperatures follow a base value
    plus a slow sine drift, everything else is drawn from fixed ranges.
    """

    name = "synthetic"

    def __init__(self, source: RandomSource | None = None) -> None:
        self.source: RandomSource = source or random.Random()

    def base_temperature(self) -> int:
        """Draw the per-report base temperature in [15, 35) C."""

        return uniform_int(self.source, 15, 35)

    def sample_condition(self) -> Condition:
        return CONDITIONS.sample(self.source)

    def temperature(self, base: float, day_index: int) -> int:
        """Return the temperature for `day_index` days out.

        Each call redraws the random component, so two calls with the same
        arguments are independent samples.
        """

        seasonal = 3 * math.sin(day_index * 0.1)
        jitter = (self.source.random() - 0.5) * 4
        return round_half_up(base + seasonal + jitter)

    def precipitation(self, condition: Condition) -> int:
        low, high = PRECIPITATION_RANGES.get(condition, DRY_PRECIPITATION)
        return uniform_int(self.source, low, high)

    def current(self, base: float) -> CurrentConditions:
        return CurrentConditions(
            temperature=self.temperature(base, 0),
            condition=self.sample_condition(),
            humidity=uniform_int(self.source, 40, 80),
            wind_speed=uniform_int(self.source, 5, 30),
            pressure=uniform_int(self.source, 1000, 1100),
            visibility=uniform_int(self.source, 5, 20),
            uv_index=uniform_int(self.source, 0, 11),
        )

    def day(self, base: float, day_index: int, day: date) -> DayForecast:
        high = self.temperature(base, day_index)
        low = high - uniform_int(self.source, 5, 13)
        condition = self.sample_condition()
        return DayForecast(
            day=day,
            high=high,
            low=low,
            condition=condition,
            precipitation=self.precipitation(condition),
            wind_speed=uniform_int(self.source, 5, 25),
        )

    def forecast(
        self, base: float, start: date, days: int = FORECAST_DAYS
    ) -> Sequence[DayForecast]:
        """Return one entry per calendar day starting at `start`."""

        return tuple(
            self.day(base, idx, start + timedelta(days=idx))
            for idx in range(days)
        )
