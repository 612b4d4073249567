"""Rule-based farming advice derived from a synthesized forecast.

Alerts, insights and the AI-style summary are pure functions of the
generated data; only the summary confidence consumes randomness.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal

from .engines.sampling import RandomSource, uniform_int
from .engines.types import (
    AIPrediction,
    Alert,
    CurrentConditions,
    DayForecast,
    FarmingInsights,
)

EXTREME_HIGH_C = 35
EXTREME_LOW_C = 5
HEAVY_RAIN_PCT = 80
DRY_DAY_PCT = 10
DRY_SPELL_MIN_DAYS = 5
RAIN_DAY_PCT = 30
HIGH_WIND_KMH = 20

EXTREME_TEMPERATURE_ALERT = Alert(
    type="warning",
    title="Extreme Temperature Alert",
    message=(
        "Extreme temperatures detected in forecast. "
        "Take protective measures for crops."
    ),
    priority="high",
)
HEAVY_RAINFALL_ALERT = Alert(
    type="warning",
    title="Heavy Rainfall Warning",
    message=(
        "Heavy rainfall expected. "
        "Check drainage systems and adjust irrigation."
    ),
    priority="medium",
)
DRY_PERIOD_ALERT = Alert(
    type="info",
    title="Dry Period Forecast",
    message="Extended dry period predicted. Plan irrigation accordingly.",
    priority="medium",
)
OPTIMAL_CONDITIONS_ALERT = Alert(
    type="info",
    title="Optimal Growing Conditions",
    message="Weather conditions are favorable for most farming activities.",
    priority="low",
)


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def derive_alerts(forecast: Sequence[DayForecast]) -> list[Alert]:
    """Return alerts in evaluation order; never empty."""

    alerts: list[Alert] = []
    if any(
        day.high > EXTREME_HIGH_C or day.low < EXTREME_LOW_C
        for day in forecast
    ):
        alerts.append(EXTREME_TEMPERATURE_ALERT)
    if any(day.precipitation > HEAVY_RAIN_PCT for day in forecast):
        alerts.append(HEAVY_RAINFALL_ALERT)
    dry_days = sum(1 for day in forecast if day.precipitation < DRY_DAY_PCT)
    if dry_days > DRY_SPELL_MIN_DAYS:
        alerts.append(DRY_PERIOD_ALERT)
    if not alerts:
        alerts.append(OPTIMAL_CONDITIONS_ALERT)
    return alerts


InsightField = Literal[
    "irrigation", "planting", "harvesting", "pest_management"
]


@dataclass(frozen=True)
class InsightInputs:
    humidity: int
    rain_days: int
    mean_wind_speed: float


InsightRule = tuple[Callable[[InsightInputs], bool], InsightField, str]

DEFAULT_INSIGHTS: dict[InsightField, str] = {
    "irrigation": "Standard irrigation schedule recommended",
    "planting": "Good conditions for most crops",
    "harvesting": "Weather suitable for harvesting activities",
    "pest_management": "Normal pest monitoring recommended",
}

# Applied top to bottom; a later rule overwrites an earlier one on the
# same field.
INSIGHT_RULES: tuple[InsightRule, ...] = (
    (
        lambda s: s.humidity > 70,
        "irrigation",
        "Reduce irrigation due to high humidity levels",
    ),
    (
        lambda s: s.humidity > 70,
        "pest_management",
        "Increased risk of fungal diseases - monitor closely",
    ),
    (
        lambda s: s.humidity < 40,
        "irrigation",
        "Increase irrigation frequency due to low humidity",
    ),
    (
        lambda s: s.rain_days > 7,
        "planting",
        "Delay planting until drier conditions",
    ),
    (
        lambda s: s.rain_days > 7,
        "harvesting",
        "Postpone harvesting until weather improves",
    ),
    (
        lambda s: s.rain_days < 2,
        "planting",
        "Excellent planting conditions - soil preparation recommended",
    ),
    (
        lambda s: s.rain_days < 2,
        "harvesting",
        "Ideal harvesting weather - prioritize sensitive crops",
    ),
    (
        lambda s: s.mean_wind_speed > HIGH_WIND_KMH,
        "pest_management",
        "High winds may help disperse pests but could damage crops",
    ),
    (
        lambda s: s.mean_wind_speed > HIGH_WIND_KMH,
        "harvesting",
        "Use caution with tall crops due to wind conditions",
    ),
)


def derive_farming_insights(
    current: CurrentConditions, forecast: Sequence[DayForecast]
) -> FarmingInsights:
    inputs = InsightInputs(
        humidity=current.humidity,
        rain_days=sum(
            1 for day in forecast if day.precipitation > RAIN_DAY_PCT
        ),
        mean_wind_speed=_mean([day.wind_speed for day in forecast]),
    )
    draft = dict(DEFAULT_INSIGHTS)
    for predicate, field, value in INSIGHT_RULES:
        if predicate(inputs):
            draft[field] = value
    return FarmingInsights(**draft)


@dataclass(frozen=True)
class SummaryTemplate:
    summary: str
    recommendations: tuple[str, str, str]


HOT_DRY_SUMMARY = SummaryTemplate(
    summary="Hot and dry conditions expected. High evaporation rates likely.",
    recommendations=(
        "Increase irrigation frequency by 20-30%",
        "Consider early morning watering to reduce evaporation",
        "Monitor soil moisture levels closely",
    ),
)
WET_SUMMARY = SummaryTemplate(
    summary="Wet period ahead. Risk of waterlogging and fungal diseases.",
    recommendations=(
        "Reduce or pause irrigation systems",
        "Ensure proper drainage in low-lying areas",
        "Apply preventive fungicide treatments",
    ),
)
COOL_SUMMARY = SummaryTemplate(
    summary="Cooler temperatures predicted. Slower plant growth expected.",
    recommendations=(
        "Consider frost protection measures",
        "Delay planting of warm-season crops",
        "Harvest cold-sensitive crops early",
    ),
)
BALANCED_SUMMARY = SummaryTemplate(
    summary=(
        "Balanced weather conditions. Optimal for most farming activities."
    ),
    recommendations=(
        "Ideal time for general maintenance",
        "Good conditions for planting and harvesting",
        "Standard irrigation schedule recommended",
    ),
)


def select_summary(
    avg_high: float, avg_precipitation: float
) -> SummaryTemplate:
    if avg_high > 25 and avg_precipitation < 20:
        return HOT_DRY_SUMMARY
    if avg_precipitation > 60:
        return WET_SUMMARY
    if avg_high < 15:
        return COOL_SUMMARY
    return BALANCED_SUMMARY


def derive_ai_summary(
    forecast: Sequence[DayForecast], source: RandomSource
) -> AIPrediction:
    """Pick a templated summary from forecast averages.

    The confidence score is a separate draw in [85, 95) and says nothing
    about which template was chosen.
    """

    template = select_summary(
        _mean([day.high for day in forecast]),
        _mean([day.precipitation for day in forecast]),
    )
    return AIPrediction(
        summary=template.summary,
        confidence=85 + uniform_int(source, 0, 10),
        recommendations=template.recommendations,
    )
