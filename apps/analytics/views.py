"""API views for the administrator dashboard.

All endpoints require the ADMIN role. Counts are computed from the ledger
and registry tables at request time.
"""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from rest_framework import generics  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.bookings.models import Booking
from apps.bookings.serializers import BookingSerializer
from apps.bookings.services import list_bookings
from apps.resources.models import Resource
from apps.users.permissions import IsAdmin
from apps.users.serializers import UserSerializer
from shared.api.responses import success_response
from shared.api.views import database_is_reachable

User = get_user_model()


class StatsView(APIView):
    """Totals over users, resources and bookings by status."""

    permission_classes = [IsAdmin]

    def get(self, request, format=None):  # type: ignore
        booking_counts = Booking.objects.aggregate(
            total=models.Count("id"),
            pending=models.Count("id", filter=models.Q(status=Booking.Status.PENDING)),
            approved=models.Count("id", filter=models.Q(status=Booking.Status.APPROVED)),
            rejected=models.Count("id", filter=models.Q(status=Booking.Status.REJECTED)),
        )
        resource_counts = Resource.objects.aggregate(
            total=models.Count("id"),
            active=models.Count("id", filter=models.Q(is_active=True)),
        )
        by_type = {
            row["type"]: row["count"]
            for row in Resource.objects.values("type").annotate(count=models.Count("id")).order_by("type")
        }
        return success_response(
            {
                "totalUsers": User.objects.count(),
                "totalResources": resource_counts["total"],
                "activeResources": resource_counts["active"],
                "resourcesByType": by_type,
                "totalBookings": booking_counts["total"],
                "pendingBookings": booking_counts["pending"],
                "approvedBookings": booking_counts["approved"],
                "rejectedBookings": booking_counts["rejected"],
            }
        )


class UserListView(generics.ListAPIView):
    serializer_class = UserSerializer
    permission_classes = [IsAdmin]
    filter_backends: list = []

    def get_queryset(self):  # type: ignore
        return User.objects.order_by("-created_at", "-id")


class PendingBookingListView(generics.ListAPIView):
    """Bookings awaiting a decision, most recently created first."""

    serializer_class = BookingSerializer
    permission_classes = [IsAdmin]
    filter_backends: list = []

    def get_queryset(self):  # type: ignore
        return list_bookings(status=Booking.Status.PENDING)


class SystemOverviewView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request, format=None):  # type: ignore
        return success_response(
            {
                "timestamp": timezone.now().isoformat(),
                "system": {
                    "status": "operational",
                    "database": "connected" if database_is_reachable() else "unavailable",
                },
            }
        )
