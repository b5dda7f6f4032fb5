"""Audit trail model."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.serializers.json import DjangoJSONEncoder  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ImmutableAuditLogError(Exception):
    """Raised on any attempt to change or remove a stored audit entry."""


class AuditLog(models.Model):
    """Immutable record of a state-changing action."""

    class Action(models.TextChoices):
        USER_REGISTRATION = "USER_REGISTRATION", _("User registered")
        USER_LOGIN = "USER_LOGIN", _("User logged in")
        RESOURCE_CREATED = "RESOURCE_CREATED", _("Resource created")
        RESOURCE_UPDATED = "RESOURCE_UPDATED", _("Resource updated")
        RESOURCE_DELETED = "RESOURCE_DELETED", _("Resource deleted")
        BOOKING_CREATED = "BOOKING_CREATED", _("Booking created")
        BOOKING_APPROVED = "BOOKING_APPROVED", _("Booking approved")
        BOOKING_REJECTED = "BOOKING_REJECTED", _("Booking rejected")
        BOOKING_CANCELLED = "BOOKING_CANCELLED", _("Booking cancelled")

    action = models.CharField(max_length=50, choices=Action.choices)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="audit_logs",
    )
    # Plain ids: bookings are hard-deleted on cancellation, the trail must outlive them.
    resource_id = models.PositiveBigIntegerField(null=True, blank=True)
    booking_id = models.PositiveBigIntegerField(null=True, blank=True)
    details = models.JSONField(null=True, blank=True, encoder=DjangoJSONEncoder)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    timestamp = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Audit log entry")
        verbose_name_plural = _("Audit log")
        ordering = ["-timestamp", "-id"]
        indexes = [
            models.Index(fields=["user", "timestamp"], name="audit_user_ts_idx"),
            models.Index(fields=["action", "timestamp"], name="audit_action_ts_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} - {self.action} - {self.timestamp}"

    def save(self, *args, **kwargs):  # type: ignore
        if not self._state.adding:
            raise ImmutableAuditLogError("Audit log entries cannot be modified.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):  # type: ignore
        raise ImmutableAuditLogError("Audit log entries cannot be deleted.")
