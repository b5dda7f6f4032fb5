"""Read-only admin for the audit trail."""

from __future__ import annotations

from django.contrib import admin

from .models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ("timestamp", "action", "user", "resource_id", "booking_id", "ip_address")
    list_filter = ("action", "timestamp")
    search_fields = ("user__email", "user__name")
    readonly_fields = ("action", "user", "resource_id", "booking_id", "details", "ip_address", "timestamp")

    def has_add_permission(self, request):  # type: ignore
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False
