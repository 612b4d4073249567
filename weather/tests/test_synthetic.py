from __future__ import annotations

# ruff: noqa: S101
import random
from datetime import date, timedelta

import pytest

from weather.engines.synthetic import (
    FORECAST_DAYS,
    PRECIPITATION_RANGES,
    SyntheticWeatherEngine,
)

from .fakes import ScriptedSource


def test_temperature_adds_seasonal_drift_and_jitter() -> None:
    engine = SyntheticWeatherEngine(ScriptedSource([0.5, 0.0, 0.9999, 0.5]))
    assert engine.temperature(20, 0) == 20
    assert engine.temperature(20, 0) == 18
    assert engine.temperature(20, 0) == 22
    # 3 * sin(1.0) ~= 2.52
    assert engine.temperature(20, 10) == 23


def test_temperature_redraws_on_every_call() -> None:
    source = ScriptedSource([0.1, 0.9])
    engine = SyntheticWeatherEngine(source)
    first = engine.temperature(25, 0)
    second = engine.temperature(25, 0)
    assert first != second
    assert source.calls == 2


def test_current_draw_order_and_lower_bounds() -> None:
    engine = SyntheticWeatherEngine(
        ScriptedSource([0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0])
    )
    current = engine.current(20)
    assert current.temperature == 20
    assert current.condition == "Sunny"
    assert current.humidity == 40
    assert current.wind_speed == 5
    assert current.pressure == 1000
    assert current.visibility == 5
    assert current.uv_index == 0


def test_current_upper_bounds() -> None:
    engine = SyntheticWeatherEngine(
        ScriptedSource([0.5, 0.99, 0.9999, 0.9999, 0.9999, 0.9999, 0.9999])
    )
    current = engine.current(20)
    assert current.condition == "Drizzle"
    assert current.humidity == 79
    assert current.wind_speed == 29
    assert current.pressure == 1099
    assert current.visibility == 19
    assert current.uv_index == 10


def test_day_uses_condition_specific_precipitation() -> None:
    engine = SyntheticWeatherEngine(ScriptedSource([0.5, 0.0, 0.80, 0.0, 0.0]))
    day = engine.day(20, 0, date(2025, 6, 1))
    assert day.day == date(2025, 6, 1)
    assert day.high == 20
    assert day.low == 15
    assert day.condition == "Rainy"
    assert day.precipitation == 60
    assert day.wind_speed == 5


@pytest.mark.parametrize(
    ("condition", "low", "high"),
    [
        ("Rainy", 60, 90),
        ("Thunderstorms", 60, 90),
        ("Drizzle", 40, 60),
        ("Cloudy", 20, 50),
        ("Partly Cloudy", 10, 30),
        ("Sunny", 0, 15),
    ],
)
def test_precipitation_ranges(condition: str, low: int, high: int) -> None:
    assert SyntheticWeatherEngine(ScriptedSource([0.0])).precipitation(
        condition  # type: ignore[arg-type]
    ) == low
    assert SyntheticWeatherEngine(ScriptedSource([0.9999])).precipitation(
        condition  # type: ignore[arg-type]
    ) == high - 1


def test_sunny_has_no_dedicated_precipitation_range() -> None:
    assert "Sunny" not in PRECIPITATION_RANGES


@pytest.mark.parametrize("seed", [0, 1, 42, 2024, 99991])
def test_forecast_shape_holds_for_seeded_sources(seed: int) -> None:
    engine = SyntheticWeatherEngine(random.Random(seed))
    start = date(2024, 2, 27)
    base = engine.base_temperature()
    assert 15 <= base < 35

    forecast = engine.forecast(base, start)
    assert len(forecast) == FORECAST_DAYS
    assert forecast[0].day == start
    for previous, current in zip(forecast, forecast[1:], strict=False):
        assert current.day - previous.day == timedelta(days=1)
    for day in forecast:
        assert 5 <= day.high - day.low <= 12
        assert 0 <= day.precipitation < 90
        assert 5 <= day.wind_speed < 25
        if day.condition in ("Rainy", "Thunderstorms"):
            assert 60 <= day.precipitation < 90


def test_forecast_crosses_month_and_leap_day() -> None:
    engine = SyntheticWeatherEngine(random.Random(3))
    forecast = engine.forecast(20, date(2024, 2, 25))
    days = [entry.day for entry in forecast]
    assert date(2024, 2, 29) in days
    assert days[-1] == date(2024, 3, 9)
