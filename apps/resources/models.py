"""Resource registry models for Campus Sync."""

from __future__ import annotations

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Resource(models.Model):
    """Shared physical asset that can be booked by the hour."""

    class ResourceType(models.TextChoices):
        LAB = "lab", _("Lab")
        SEMINAR_HALL = "seminar_hall", _("Seminar hall")
        PROJECTOR = "projector", _("Projector")

    name = models.CharField(max_length=255)
    type = models.CharField(max_length=20, choices=ResourceType.choices)
    location = models.CharField(max_length=255)
    capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Resource")
        verbose_name_plural = _("Resources")
        ordering = ["name", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(capacity__gte=1),
                name="resource_capacity_positive",
            ),
        ]
        indexes = [
            models.Index(fields=["type", "is_active"], name="resource_type_active_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.get_type_display()})"
