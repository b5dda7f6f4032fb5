"""API views for the booking ledger."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from apps.resources.serializers import ResourceSerializer
from apps.users.permissions import IsAdmin, is_admin
from shared.api.responses import success_response
from shared.exceptions import Forbidden

from . import services
from .serializers import (
    AvailabilityQuerySerializer,
    BookedSlotSerializer,
    BookingCreateSerializer,
    BookingQuerySerializer,
    BookingSerializer,
    RejectBookingSerializer,
)


class BookingViewSet(viewsets.GenericViewSet):
    """Students request and cancel bookings; administrators decide on them."""

    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends: list = []
    lookup_value_regex = r"\d+"

    admin_actions = {"approve", "reject", "admin_all"}

    def get_permissions(self):  # type: ignore
        if self.action == "availability":
            return [permissions.AllowAny()]
        if self.action in self.admin_actions:
            return [IsAdmin()]
        return super().get_permissions()

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        if self.action == "reject":
            return RejectBookingSerializer
        return BookingSerializer

    def _ensure_owner_or_admin(self, user_id) -> None:
        user = self.request.user
        if user.id != int(user_id) and not is_admin(user):
            raise Forbidden("Access denied")

    def _paginated(self, queryset):
        page = self.paginate_queryset(queryset)
        if page is not None:
            return self.get_paginated_response(BookingSerializer(page, many=True).data)
        return success_response(BookingSerializer(queryset, many=True).data)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        booking = services.create_booking(
            request.user,
            data["resourceId"],
            data["bookingDate"],
            data["startTime"],
            data["endTime"],
            request=request,
        )
        return success_response(
            BookingSerializer(booking).data,
            message="Booking created successfully",
            status=status.HTTP_201_CREATED,
        )

    def retrieve(self, request, pk=None):  # type: ignore
        booking = services.get_booking(pk)
        self._ensure_owner_or_admin(booking.user_id)
        return success_response(BookingSerializer(booking).data)

    @action(detail=False, methods=["get"], url_path="my-bookings")
    def my_bookings(self, request):  # type: ignore
        return self._paginated(services.list_user_bookings(request.user.id))

    @action(detail=False, methods=["get"], url_path=r"user/(?P<user_id>\d+)")
    def for_user(self, request, user_id=None):  # type: ignore
        self._ensure_owner_or_admin(user_id)
        return self._paginated(services.list_user_bookings(int(user_id)))

    @action(detail=False, methods=["get"], url_path="admin/all")
    def admin_all(self, request):  # type: ignore
        filters = BookingQuerySerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)
        return self._paginated(services.list_bookings(**filters.validated_data))

    @action(detail=False, methods=["get"])
    def availability(self, request):  # type: ignore
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        resource, slots = services.get_availability(
            query.validated_data["resourceId"],
            query.validated_data["date"],
        )
        return success_response(
            {
                "resource": ResourceSerializer(resource).data,
                "date": query.validated_data["date"].isoformat(),
                "bookedSlots": BookedSlotSerializer(slots, many=True).data,
            }
        )

    @action(detail=True, methods=["put"])
    def approve(self, request, pk=None):  # type: ignore
        booking = services.approve_booking(pk, request.user, request=request)
        return success_response(BookingSerializer(booking).data, message="Booking approved successfully")

    @action(detail=True, methods=["put"])
    def reject(self, request, pk=None):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = services.reject_booking(
            pk,
            request.user,
            serializer.validated_data.get("reason"),
            request=request,
        )
        return success_response(BookingSerializer(booking).data, message="Booking rejected successfully")

    @action(detail=True, methods=["delete"])
    def cancel(self, request, pk=None):  # type: ignore
        services.cancel_booking(pk, request.user, request=request)
        return success_response(message="Booking cancelled successfully")
