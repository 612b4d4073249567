"""Weather report endpoint.

Authentication: none; the endpoint is public and CORS-enabled.
Responses: the bare report JSON on success, `{"error": "<message>"}` with
HTTP 500 on any failure (see `config.api.exceptions`).
"""

from __future__ import annotations

import logging
from typing import Any

from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    ParseError,
    UnsupportedMediaType,
)
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from config.api.openapi import error_serializer
from config.api.responses import json_response

from .serializers import (
    ReportRequestSerializer,
    WeatherReportSerializer,
    serialize_report,
)
from .services import generate_report

logger = logging.getLogger(__name__)

weather_error_schema = error_serializer("WeatherReportError")


class ReportGenerationError(APIException):
    """Any failure while producing a report; the whole request aborts."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Unknown error"
    default_code = "report_failed"


class WeatherReportView(APIView):
    """Synthesize a weather report with farming advice for one location.

    Auth: none.
    Response: `location`, `current`, 14-day `forecast`, `alerts`,
    `farmingInsights` and `aiPredictions`.
    """

    authentication_classes: list[type] = []
    permission_classes = [AllowAny]

    @extend_schema(
        request=ReportRequestSerializer,
        responses={
            200: WeatherReportSerializer,
            500: weather_error_schema,
        },
        examples=[
            OpenApiExample(
                "Report request",
                value={"location": "Main Farm Location"},
                request_only=True,
            )
        ],
    )
    def post(self, request: Request) -> Response:
        """Return a freshly synthesized report.

        Inputs: JSON body with a non-empty `location` string.
        Outputs: report JSON; every call draws new values.
        """

        try:
            payload = request.data
        except (ParseError, UnsupportedMediaType) as exc:
            raise ReportGenerationError(str(exc.detail)) from exc

        serializer = ReportRequestSerializer(data=payload)
        if not serializer.is_valid():
            logger.info(
                "weather.report.rejected err=%s", serializer.first_error()
            )
            raise ReportGenerationError(serializer.first_error())

        location = serializer.validated_data["location"]
        try:
            report = generate_report(location)
        except Exception as exc:
            raise ReportGenerationError(str(exc) or None) from exc
        return json_response(serialize_report(report))

    def options(
        self, request: Request, *args: Any, **kwargs: Any
    ) -> Response:
        """Answer CORS pre-flight with an empty body."""

        return Response(status=status.HTTP_200_OK)
