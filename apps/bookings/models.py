"""Booking domain models for Campus Sync."""

from __future__ import annotations

from datetime import time

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """Request to reserve a resource for a time range on one calendar date."""

    class Status(models.TextChoices):
        PENDING = "PENDING", _("Pending approval")
        APPROVED = "APPROVED", _("Approved")
        REJECTED = "REJECTED", _("Rejected")

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    resource = models.ForeignKey(
        "resources.Resource",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    booking_date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.PENDING,
    )
    rejection_reason = models.CharField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_time__gt=models.F("start_time")),
                name="booking_valid_time_range",
            ),
            models.CheckConstraint(
                condition=models.Q(status="REJECTED") | models.Q(rejection_reason=""),
                name="booking_reason_only_when_rejected",
            ),
        ]
        indexes = [
            models.Index(fields=["resource", "booking_date", "status"], name="booking_slot_lookup_idx"),
            models.Index(fields=["user", "booking_date"], name="booking_user_date_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} of resource {self.resource_id} on {self.booking_date}"

    @property
    def is_pending(self) -> bool:
        return self.status == self.Status.PENDING

    def overlaps(self, start_time: time, end_time: time) -> bool:
        """Half-open interval test: [start, end) ranges touching at an edge do not overlap."""
        return self.start_time < end_time and self.end_time > start_time
