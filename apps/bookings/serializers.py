"""Serializers for the booking ledger."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Booking

TIME_INPUT_FORMATS = ["%H:%M", "%H:%M:%S"]


class BookingCreateSerializer(serializers.Serializer):
    """Booking request from a student; field names follow the client payload."""

    resourceId = serializers.IntegerField(min_value=1)
    bookingDate = serializers.DateField()
    startTime = serializers.TimeField(input_formats=TIME_INPUT_FORMATS)
    endTime = serializers.TimeField(input_formats=TIME_INPUT_FORMATS)


class BookingSerializer(serializers.ModelSerializer):
    """Booking joined with the display fields of its owner and resource."""

    user_id = serializers.ReadOnlyField(source="user.id")
    user_name = serializers.ReadOnlyField(source="user.name")
    user_email = serializers.ReadOnlyField(source="user.email")
    resource_id = serializers.ReadOnlyField(source="resource.id")
    resource_name = serializers.ReadOnlyField(source="resource.name")
    resource_type = serializers.ReadOnlyField(source="resource.type")
    resource_location = serializers.ReadOnlyField(source="resource.location")

    class Meta:
        model = Booking
        fields = [
            "id",
            "user_id",
            "user_name",
            "user_email",
            "resource_id",
            "resource_name",
            "resource_type",
            "resource_location",
            "booking_date",
            "start_time",
            "end_time",
            "status",
            "rejection_reason",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class RejectBookingSerializer(serializers.Serializer):
    """Only bounds the length; presence is checked after the booking state."""

    reason = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)


class BookingQuerySerializer(serializers.Serializer):
    """Filters accepted by the administrator's booking listing."""

    status = serializers.ChoiceField(choices=Booking.Status.choices, required=False)
    resource_id = serializers.IntegerField(min_value=1, required=False)
    user_id = serializers.IntegerField(min_value=1, required=False)


class AvailabilityQuerySerializer(serializers.Serializer):
    resourceId = serializers.IntegerField(
        min_value=1,
        error_messages={"required": "Resource ID and date are required"},
    )
    date = serializers.DateField(error_messages={"required": "Resource ID and date are required"})


class BookedSlotSerializer(serializers.Serializer):
    start_time = serializers.TimeField()
    end_time = serializers.TimeField()
