"""Central exception handler: logs every failure and wraps it in the envelope.

Registered as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Views never build error
responses themselves.
"""

import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from events.domain.errors import DomainError, ErrorCode
from events.handlers.responses import envelope_response

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Value in body missing the validation requirement"
NOT_FOUND_MESSAGE = "Event not found!"
INTERNAL_ERROR_MESSAGE = "Internal server error"

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MEDIA_UPLOAD_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.MEDIA_DELETE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.PERSISTENCE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _view_name(context: dict) -> str:
    view = context.get("view")
    return type(view).__name__ if view is not None else "unknown"


def _domain_error_response(exc: DomainError, view_name: str) -> Response:
    code = ERROR_STATUS.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s failed: %s", view_name, exc, exc_info=exc)
        message = INTERNAL_ERROR_MESSAGE
    else:
        logger.warning("%s rejected request: %s", view_name, exc)
        message = NOT_FOUND_MESSAGE if code == status.HTTP_404_NOT_FOUND else exc.message

    return envelope_response(
        message,
        error={"code": exc.code.value, "message": exc.message},
        status=code,
    )


def envelope_exception_handler(exc: Exception, context: dict) -> Response:
    view_name = _view_name(context)

    if isinstance(exc, DomainError):
        set_rollback()
        return _domain_error_response(exc, view_name)

    if isinstance(exc, ValidationError):
        logger.warning("%s rejected invalid input: %s", view_name, exc.detail)
        return envelope_response(
            VALIDATION_MESSAGE,
            error=exc.detail,
            status=status.HTTP_400_BAD_REQUEST,
        )

    # Django 404/403 are converted the way DRF does so the code reflects the API error.
    if isinstance(exc, Http404):
        exc = exceptions.NotFound(*exc.args)
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied(*exc.args)

    # DRF protocol errors (404 routing, 405, 415, parse errors) keep their status and headers.
    response = exception_handler(exc, context)
    if response is not None:
        logger.warning("%s returned %s: %s", view_name, response.status_code, response.data)
        detail = response.data.get("detail") if isinstance(response.data, dict) else response.data
        wrapped = envelope_response(
            str(detail),
            error={"code": getattr(exc, "default_code", "error").upper(), "message": str(detail)},
            status=response.status_code,
        )
        for header, value in response.items():
            wrapped[header] = value
        return wrapped

    set_rollback()
    logger.exception("%s crashed", view_name, exc_info=exc)
    return envelope_response(
        INTERNAL_ERROR_MESSAGE,
        error={"code": "INTERNAL_ERROR", "message": INTERNAL_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
