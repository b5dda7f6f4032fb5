"""Serializers for the resource registry."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Resource

INVALID_TYPE_MESSAGE = "Invalid type. Must be one of: " + ", ".join(Resource.ResourceType.values)


class ResourceSerializer(serializers.ModelSerializer):
    type = serializers.ChoiceField(
        choices=Resource.ResourceType.choices,
        error_messages={"invalid_choice": INVALID_TYPE_MESSAGE},
    )
    capacity = serializers.IntegerField(
        min_value=1,
        error_messages={"min_value": "Capacity must be at least 1"},
    )

    class Meta:
        model = Resource
        fields = [
            "id",
            "name",
            "type",
            "location",
            "capacity",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
