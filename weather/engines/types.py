from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Literal

Condition = Literal[
    "Sunny",
    "Partly Cloudy",
    "Cloudy",
    "Rainy",
    "Thunderstorms",
    "Drizzle",
]
AlertType = Literal["warning", "info"]
AlertPriority = Literal["high", "medium", "low"]


@dataclass(frozen=True)
class CurrentConditions:
    temperature: int
    condition: Condition
    humidity: int
    wind_speed: int
    pressure: int
    visibility: int
    uv_index: int


@dataclass(frozen=True)
class DayForecast:
    day: date
    high: int
    low: int
    condition: Condition
    precipitation: int
    wind_speed: int


@dataclass(frozen=True)
class Alert:
    type: AlertType
    title: str
    message: str
    priority: AlertPriority


@dataclass(frozen=True)
class FarmingInsights:
    irrigation: str
    planting: str
    harvesting: str
    pest_management: str


@dataclass(frozen=True)
class AIPrediction:
    summary: str
    confidence: int
    recommendations: Sequence[str]


@dataclass(frozen=True)
class WeatherReport:
    location: str
    current: CurrentConditions
    forecast: Sequence[DayForecast]
    alerts: Sequence[Alert]
    farming_insights: FarmingInsights
    ai_predictions: AIPrediction
