"""Uniform response envelope shared by every endpoint.

Each body has the same keys whatever the outcome, so clients branch on the
status code only.
"""

from typing import Any
from zoneinfo import ZoneInfo

from django.conf import settings
from django.utils import timezone
from rest_framework import status as http_status
from rest_framework.response import Response


def request_timestamp() -> str:
    """Format the current time in the configured response time zone."""
    now = timezone.now().astimezone(ZoneInfo(settings.RESPONSE_TIME_ZONE))
    return now.strftime(settings.RESPONSE_DATE_FORMAT)


def build_envelope(timestamp: str, message: str, data: Any = None, error: Any = None) -> dict[str, Any]:
    return {
        "timestamp": timestamp,
        "message": message,
        "data": data,
        "error": error,
    }


def envelope_response(
    message: str,
    data: Any = None,
    error: Any = None,
    status: int = http_status.HTTP_200_OK,
) -> Response:
    return Response(build_envelope(request_timestamp(), message, data, error), status=status)
