"""Plain Django views outside the DRF routers: health check and JSON 404."""

from __future__ import annotations

import structlog
from django.db import DatabaseError, connection  # type: ignore
from django.http import JsonResponse  # type: ignore
from django.utils import timezone  # type: ignore
from django.views.decorators.http import require_http_methods  # type: ignore

logger = structlog.get_logger(__name__)


def database_is_reachable() -> bool:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as exc:
        logger.error("healthz.fail", error=str(exc))
        return False
    return True


@require_http_methods(["GET"])
def health(request):
    """Health check endpoint for load balancers and containers."""
    if not database_is_reachable():
        return JsonResponse(
            {"success": False, "message": "Database unavailable", "timestamp": timezone.now().isoformat()},
            status=503,
        )
    return JsonResponse(
        {"success": True, "message": "Server is running", "timestamp": timezone.now().isoformat()},
        status=200,
    )


def not_found(request, exception=None):
    return JsonResponse(
        {"success": False, "message": "Endpoint not found", "path": request.path},
        status=404,
    )


def server_error(request):
    return JsonResponse({"success": False, "message": "Internal server error"}, status=500)
