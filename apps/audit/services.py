"""Audit recorder.

``record`` is best-effort: it writes inside its own savepoint so that a
failed insert neither aborts the caller's transaction nor propagates. The
failure is logged instead.
"""

from __future__ import annotations

from datetime import date
from typing import Any

import structlog
from django.db import DatabaseError, transaction  # type: ignore

from .models import AuditLog

logger = structlog.get_logger(__name__)


def get_client_ip(request) -> str | None:
    forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR")


def record(
    action: str,
    actor,
    *,
    resource_id: int | None = None,
    booking_id: int | None = None,
    details: dict[str, Any] | None = None,
    request=None,
) -> AuditLog | None:
    entry = AuditLog(
        action=action,
        user=actor if getattr(actor, "is_authenticated", False) else None,
        resource_id=resource_id,
        booking_id=booking_id,
        details=details,
        ip_address=get_client_ip(request) if request is not None else None,
    )
    try:
        with transaction.atomic():
            entry.save()
    except (DatabaseError, TypeError, ValueError):
        logger.exception(
            "audit.record_failed",
            action=action,
            actor_id=getattr(actor, "id", None),
            resource_id=resource_id,
            booking_id=booking_id,
        )
        return None
    return entry


def query(
    *,
    action: str | None = None,
    user_id: int | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
):
    """Audit entries newest first, filtered by action, actor and calendar date."""
    queryset = AuditLog.objects.select_related("user")
    if action:
        queryset = queryset.filter(action=action)
    if user_id is not None:
        queryset = queryset.filter(user_id=user_id)
    if start_date is not None:
        queryset = queryset.filter(timestamp__date__gte=start_date)
    if end_date is not None:
        queryset = queryset.filter(timestamp__date__lte=end_date)
    return queryset.order_by("-timestamp", "-id")
