from __future__ import annotations

from django.urls import path

from .views import WeatherReportView

urlpatterns = [
    path(
        "weather/report/",
        WeatherReportView.as_view(),
        name="weather-report",
    ),
]
