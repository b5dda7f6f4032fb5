"""Admin registration for bookings.

The admin is a read-only window on the ledger. Decisions go through
``services.approve_booking``/``reject_booking`` so the overlap check, the
resource lock and the audit entry always apply.
"""

from __future__ import annotations

from django.contrib import admin

from .models import Booking

LEDGER_FIELDS = (
    "user",
    "resource",
    "booking_date",
    "start_time",
    "end_time",
    "status",
    "rejection_reason",
    "created_at",
    "updated_at",
)


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "resource",
        "user",
        "booking_date",
        "start_time",
        "end_time",
        "status",
        "created_at",
    )
    list_filter = ("status", "booking_date", "resource__type")
    search_fields = ("resource__name", "user__email", "user__name")
    fields = LEDGER_FIELDS
    readonly_fields = LEDGER_FIELDS
    list_select_related = ("resource", "user")

    def has_add_permission(self, request) -> bool:  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None) -> bool:  # type: ignore
        return False
