"""drf-spectacular helpers for documenting the project's error payload.

The global DRF exception handler renders every failure as a flat
`{"error": "<message>"}` object. This helper builds the matching serializer
for OpenAPI documentation without changing runtime behavior.
"""

from __future__ import annotations

from drf_spectacular.utils import inline_serializer
from rest_framework import serializers
from rest_framework.serializers import Serializer


def error_serializer(name: str) -> Serializer:
    """Build an OpenAPI schema matching `custom_exception_handler`."""

    return inline_serializer(
        name=name,
        fields={"error": serializers.CharField()},
    )
