"""Admin registration for resources."""

from __future__ import annotations

from django.contrib import admin

from .models import Resource


@admin.register(Resource)
class ResourceAdmin(admin.ModelAdmin):
    list_display = ("name", "type", "location", "capacity", "is_active", "created_at")
    list_filter = ("type", "is_active")
    search_fields = ("name", "location")
    readonly_fields = ("created_at", "updated_at")
