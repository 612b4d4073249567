from __future__ import annotations

import logging
import random
import time
from datetime import date

from django.conf import settings
from django.utils import timezone

from .advisory import (
    derive_ai_summary,
    derive_alerts,
    derive_farming_insights,
)
from .engines.sampling import RandomSource
from .engines.synthetic import FORECAST_DAYS, SyntheticWeatherEngine
from .engines.types import WeatherReport
from .metrics import (
    weather_alerts_total,
    weather_report_errors_total,
    weather_report_latency_seconds,
    weather_reports_total,
)
from .timeutils import get_zone, local_today

logger = logging.getLogger(__name__)

REPORT_TZ = getattr(settings, "WEATHER_REPORT_TZ", "UTC")
LOCATION_REQUIRED = "Location is required"


def report_today() -> date:
    """Return today's date in the configured report timezone."""

    return local_today(timezone.now(), get_zone(REPORT_TZ))


def generate_report(
    location: str | None,
    *,
    source: RandomSource | None = None,
    today: date | None = None,
) -> WeatherReport:
    """Synthesize a full weather report for `location`.

    A fresh `random.Random` is used per call unless `source` is given, so
    concurrent requests never share generator state and two calls for the
    same location are independent samples. Raises `ValueError` when the
    location is missing or empty.
    """

    if not location:
        raise ValueError(LOCATION_REQUIRED)

    engine = SyntheticWeatherEngine(source or random.Random())
    start_day = today or report_today()
    logger.info("weather.report.generating location=%s", location)

    start_time = time.perf_counter()
    weather_reports_total.labels(engine=engine.name).inc()
    try:
        base = engine.base_temperature()
        current = engine.current(base)
        forecast = engine.forecast(base, start_day, FORECAST_DAYS)
        insights = derive_farming_insights(current, forecast)
        alerts = derive_alerts(forecast)
        predictions = derive_ai_summary(forecast, engine.source)
    except Exception as exc:
        weather_report_errors_total.labels(
            engine=engine.name,
            error_type=exc.__class__.__name__,
        ).inc()
        logger.exception(
            "weather.report.failed location=%s err=%s", location, exc
        )
        raise
    finally:
        duration = time.perf_counter() - start_time
        weather_report_latency_seconds.labels(engine=engine.name).observe(
            duration
        )

    for alert in alerts:
        weather_alerts_total.labels(
            title=alert.title, priority=alert.priority
        ).inc()

    report = WeatherReport(
        location=location,
        current=current,
        forecast=forecast,
        alerts=tuple(alerts),
        farming_insights=insights,
        ai_predictions=predictions,
    )
    logger.info(
        "weather.report.generated location=%s start=%s alerts=%d",
        location,
        start_day.isoformat(),
        len(report.alerts),
    )
    return report
