from __future__ import annotations

from prometheus_client import Counter, Histogram

weather_reports_total = Counter(
    "weather_reports_total",
    "Total synthesized weather reports",
    labelnames=["engine"],
)

weather_report_errors_total = Counter(
    "weather_report_errors_total",
    "Total weather report generation errors",
    labelnames=["engine", "error_type"],
)

weather_report_latency_seconds = Histogram(
    "weather_report_latency_seconds",
    "Latency of weather report generation",
    labelnames=["engine"],
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1),
)

weather_alerts_total = Counter(
    "weather_alerts_total",
    "Alerts emitted in synthesized weather reports",
    labelnames=["title", "priority"],
)
