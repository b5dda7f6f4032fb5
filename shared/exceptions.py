"""
Domain Errors

Base classes for errors raised by service functions. Each class carries the
HTTP status it maps to, so views never translate domain failures by hand;
``shared.api.exceptions.envelope_exception_handler`` renders them.

- ValidationFailed: malformed input, bad time range, past date (400)
- Forbidden: role or ownership check failed (403)
- NotFound: resource, booking or user absent (404)
- Conflict: overlapping slot, duplicate email (409)
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for expected business-rule failures."""

    status_code = 400
    default_message = "Request could not be processed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(DomainError):
    status_code = 400
    default_message = "Invalid request."


class Forbidden(DomainError):
    status_code = 403
    default_message = "You do not have permission to perform this action."


class NotFound(DomainError):
    status_code = 404
    default_message = "Not found."


class Conflict(DomainError):
    status_code = 409
    default_message = "Conflict with the current state."
