"""Project-wide DRF exception handler.

Renders domain errors, DRF errors and unexpected failures in the response
envelope. Wired through ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.
"""

from __future__ import annotations

from typing import Any

import structlog
from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.exceptions import DomainError

from .responses import error_response

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
PASSTHROUGH_HEADERS = ("WWW-Authenticate", "Allow", "Retry-After")


def _first_message(detail: Any) -> str:
    """Pick a readable message out of DRF's nested error detail."""
    if isinstance(detail, dict):
        if "detail" in detail:
            return _first_message(detail["detail"])
        for field, value in detail.items():
            message = _first_message(value)
            if field == "non_field_errors":
                return message
            return f"{field}: {message}"
        return "Invalid request."
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Invalid request."
    return str(detail)


def envelope_exception_handler(exc, context):  # type: ignore
    if isinstance(exc, DomainError):
        return error_response(exc.message, status=exc.status_code)

    if isinstance(exc, DjangoValidationError):
        exc = exceptions.ValidationError(
            exc.message_dict if hasattr(exc, "error_dict") else exc.messages
        )

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.error(
            "api.unhandled_exception",
            view=view.__class__.__name__ if view is not None else None,
            exc_info=exc,
        )
        return error_response(INTERNAL_ERROR_MESSAGE, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    errors = response.data if isinstance(exc, exceptions.ValidationError) else None
    wrapped = error_response(_first_message(response.data), status=response.status_code, errors=errors)
    for header in PASSTHROUGH_HEADERS:
        if header in response:
            wrapped[header] = response[header]
    return wrapped
