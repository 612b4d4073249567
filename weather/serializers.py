from __future__ import annotations

from typing import ClassVar

from rest_framework import serializers

from config.api.responses import JSONValue

from .services import LOCATION_REQUIRED

CONDITION_CHOICES = (
    "Sunny",
    "Partly Cloudy",
    "Cloudy",
    "Rainy",
    "Thunderstorms",
    "Drizzle",
)


class ReportRequestSerializer(serializers.Serializer):
    # Echoed back verbatim, so surrounding whitespace is preserved.
    location: ClassVar[serializers.CharField] = serializers.CharField(
        trim_whitespace=False,
        error_messages={
            "required": LOCATION_REQUIRED,
            "blank": LOCATION_REQUIRED,
            "null": LOCATION_REQUIRED,
            "invalid": "Location must be a string",
        },
    )

    def first_error(self) -> str:
        """Return the first validation message as a plain string."""

        for messages in self.errors.values():
            if isinstance(messages, list) and messages:
                return str(messages[0])
            return str(messages)
        return "Invalid request"


class CurrentConditionsSerializer(serializers.Serializer):
    temperature: ClassVar[serializers.IntegerField] = (
        serializers.IntegerField()
    )
    condition: ClassVar[serializers.ChoiceField] = serializers.ChoiceField(
        choices=CONDITION_CHOICES
    )
    humidity: ClassVar[serializers.IntegerField] = serializers.IntegerField()
    windSpeed: ClassVar[serializers.IntegerField] = serializers.IntegerField(
        source="wind_speed"
    )
    pressure: ClassVar[serializers.IntegerField] = serializers.IntegerField()
    visibility: ClassVar[serializers.IntegerField] = (
        serializers.IntegerField()
    )
    uvIndex: ClassVar[serializers.IntegerField] = serializers.IntegerField(
        source="uv_index"
    )


class DayForecastSerializer(serializers.Serializer):
    date: ClassVar[serializers.DateField] = serializers.DateField(source="day")
    high: ClassVar[serializers.IntegerField] = serializers.IntegerField()
    low: ClassVar[serializers.IntegerField] = serializers.IntegerField()
    condition: ClassVar[serializers.ChoiceField] = serializers.ChoiceField(
        choices=CONDITION_CHOICES
    )
    precipitation: ClassVar[serializers.IntegerField] = (
        serializers.IntegerField()
    )
    windSpeed: ClassVar[serializers.IntegerField] = serializers.IntegerField(
        source="wind_speed"
    )


class AlertSerializer(serializers.Serializer):
    type: ClassVar[serializers.ChoiceField] = serializers.ChoiceField(
        choices=("warning", "info")
    )
    title: ClassVar[serializers.CharField] = serializers.CharField()
    message: ClassVar[serializers.CharField] = serializers.CharField()
    priority: ClassVar[serializers.ChoiceField] = serializers.ChoiceField(
        choices=("high", "medium", "low")
    )


class FarmingInsightsSerializer(serializers.Serializer):
    irrigation: ClassVar[serializers.CharField] = serializers.CharField()
    planting: ClassVar[serializers.CharField] = serializers.CharField()
    harvesting: ClassVar[serializers.CharField] = serializers.CharField()
    pestManagement: ClassVar[serializers.CharField] = serializers.CharField(
        source="pest_management"
    )


class AIPredictionSerializer(serializers.Serializer):
    summary: ClassVar[serializers.CharField] = serializers.CharField()
    confidence: ClassVar[serializers.IntegerField] = (
        serializers.IntegerField(min_value=85, max_value=94)
    )
    recommendations: ClassVar[serializers.ListField] = serializers.ListField(
        child=serializers.CharField(), min_length=3, max_length=3
    )


class WeatherReportSerializer(serializers.Serializer):
    location: ClassVar[serializers.CharField] = serializers.CharField()
    current: ClassVar[CurrentConditionsSerializer] = (
        CurrentConditionsSerializer()
    )
    forecast: ClassVar[DayForecastSerializer] = DayForecastSerializer(
        many=True
    )
    alerts: ClassVar[AlertSerializer] = AlertSerializer(many=True)
    farmingInsights: ClassVar[FarmingInsightsSerializer] = (
        FarmingInsightsSerializer(source="farming_insights")
    )
    aiPredictions: ClassVar[AIPredictionSerializer] = AIPredictionSerializer(
        source="ai_predictions"
    )


def serialize_report(report: object) -> dict[str, JSONValue]:
    serializer = WeatherReportSerializer(report)
    return dict(serializer.data)
