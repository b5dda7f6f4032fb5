"""Response envelope helpers.

Every API response has the shape
``{"success": bool, "data"?: ..., "message"?: str, "pagination"?: {...}}``.
"""

from __future__ import annotations

from typing import Any

from rest_framework import status as http_status  # type: ignore
from rest_framework.response import Response  # type: ignore


def envelope(
    data: Any = None,
    *,
    message: str | None = None,
    success: bool = True,
    pagination: dict | None = None,
) -> dict[str, Any]:
    body: dict[str, Any] = {"success": success}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if pagination is not None:
        body["pagination"] = pagination
    return body


def success_response(
    data: Any = None,
    *,
    message: str | None = None,
    status: int = http_status.HTTP_200_OK,
    headers: dict | None = None,
) -> Response:
    return Response(envelope(data, message=message), status=status, headers=headers)


def error_response(message: str, *, status: int, errors: Any = None) -> Response:
    body = envelope(message=message, success=False)
    if errors is not None:
        body["errors"] = errors
    return Response(body, status=status)
