"""Serializers for the audit trail."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import AuditLog


class AuditLogSerializer(serializers.ModelSerializer):
    user_id = serializers.ReadOnlyField()
    user_name = serializers.ReadOnlyField(source="user.name", default=None)
    user_email = serializers.ReadOnlyField(source="user.email", default=None)

    class Meta:
        model = AuditLog
        fields = [
            "id",
            "action",
            "user_id",
            "user_name",
            "user_email",
            "resource_id",
            "booking_id",
            "details",
            "ip_address",
            "timestamp",
        ]
        read_only_fields = fields


class AuditLogQuerySerializer(serializers.Serializer):
    """Query-string filters accepted by the audit log listing."""

    action = serializers.ChoiceField(choices=AuditLog.Action.choices, required=False)
    user_id = serializers.IntegerField(min_value=1, required=False)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):  # type: ignore
        start, end = attrs.get("start_date"), attrs.get("end_date")
        if start and end and start > end:
            raise serializers.ValidationError("start_date must not be after end_date")
        return attrs
