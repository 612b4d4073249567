from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from rest_framework.response import Response


JSONValue: TypeAlias = (
    None
    | bool
    | int
    | float
    | str
    | list["JSONValue"]
    | dict[str, "JSONValue"]
)


def _to_json_value(value: object) -> JSONValue:
    if value is None or isinstance(value, str | int | float | bool):
        return value
    if isinstance(value, Mapping):
        return {str(k): _to_json_value(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_to_json_value(v) for v in value]
    return str(value)


def _first_message(detail: JSONValue) -> str | None:
    """Dig the first human-readable string out of a DRF error payload."""

    if isinstance(detail, str):
        return detail
    if isinstance(detail, dict):
        maybe = detail.get("detail")
        if isinstance(maybe, str):
            return maybe
        for value in detail.values():
            found = _first_message(value)
            if found:
                return found
    if isinstance(detail, list):
        for value in detail:
            found = _first_message(value)
            if found:
                return found
    return None


def custom_exception_handler(
    exc: Exception,
    context: dict[str, Any],
) -> Response:
    # Lazy imports: safe even if settings aren't configured at import time.
    from rest_framework import status
    from rest_framework.response import Response
    from rest_framework.views import exception_handler as drf_exception_handler

    response = drf_exception_handler(exc, context)

    if response is None:
        return Response(
            {"error": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    detail = _to_json_value(response.data)
    response.data = {"error": _first_message(detail) or "Request failed"}
    return response
