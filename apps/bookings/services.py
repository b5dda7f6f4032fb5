"""Domain services for booking workflows.

A booking is created PENDING by its owner and leaves that state exactly
once: an administrator approves or rejects it, or the owner (or an
administrator) cancels it, which deletes the row. For every resource and
date the APPROVED bookings never overlap in ``[start_time, end_time)``.

Every check-then-write runs in ``transaction.atomic()`` with the resource
row locked first, so two requests for the same resource are serialised and
cannot both pass the overlap check.
"""

from __future__ import annotations

from datetime import date, time

import structlog
from django.db import transaction  # type: ignore
from django.db.models import Q  # type: ignore
from django.utils import timezone  # type: ignore

from apps.audit.models import AuditLog
from apps.audit.services import record
from apps.resources.models import Resource
from apps.resources.services import get_bookable_resource, get_resource
from apps.users.permissions import is_admin
from shared.db import lock_queryset_if_possible
from shared.exceptions import Conflict, Forbidden, NotFound, ValidationFailed

from .models import Booking

logger = structlog.get_logger(__name__)


class SlotConflict(Conflict):
    """Raised when the requested range overlaps an approved booking."""

    default_message = "Resource is already booked for this time slot"


class InvalidTimeRange(ValidationFailed):
    default_message = "Start time must be before end time"


class PastDateBooking(ValidationFailed):
    default_message = "Cannot book for past dates"


class BookingNotFound(NotFound):
    default_message = "Booking not found"


class NotAuthorized(Forbidden):
    default_message = "Not authorized to cancel this booking"


class InvalidStateTransition(ValidationFailed):
    """Raised when a transition is requested from a terminal status."""

    def __init__(self, verb: str, current_status: str):
        self.current_status = current_status
        super().__init__(f"Cannot {verb} a booking with status: {current_status}")


def ensure_slot_is_free(
    resource: Resource,
    booking_date: date,
    start_time: time,
    end_time: time,
    *,
    exclude_booking_id=None,
) -> None:
    """Ensure no approved booking on the resource and date overlaps the range."""

    overlapping_filter = Q(start_time__lt=end_time) & Q(end_time__gt=start_time)

    bookings_qs = Booking.objects.filter(
        resource=resource,
        booking_date=booking_date,
        status=Booking.Status.APPROVED,
    ).filter(overlapping_filter)

    if exclude_booking_id is not None:
        bookings_qs = bookings_qs.exclude(pk=exclude_booking_id)

    if bookings_qs.exists():
        raise SlotConflict()


def get_booking(booking_id) -> Booking:
    """Booking with its user and resource joined for display."""
    booking = Booking.objects.select_related("user", "resource").filter(pk=booking_id).first()
    if booking is None:
        raise BookingNotFound()
    return booking


def _get_locked_booking(booking_id) -> Booking:
    booking = lock_queryset_if_possible(Booking.objects.filter(pk=booking_id)).first()
    if booking is None:
        raise BookingNotFound()
    return booking


def _lock_resource(resource_id) -> None:
    lock_queryset_if_possible(Resource.objects.filter(pk=resource_id)).first()


def _require_pending(booking: Booking, verb: str) -> None:
    if not booking.is_pending:
        raise InvalidStateTransition(verb, booking.status)


def create_booking(
    user,
    resource_id,
    booking_date: date,
    start_time: time,
    end_time: time,
    *,
    request=None,
) -> Booking:
    with transaction.atomic():
        resource = get_bookable_resource(resource_id, lock=True)

        if start_time >= end_time:
            raise InvalidTimeRange()

        if booking_date < timezone.localdate():
            raise PastDateBooking()

        ensure_slot_is_free(resource, booking_date, start_time, end_time)

        booking = Booking.objects.create(
            user=user,
            resource=resource,
            booking_date=booking_date,
            start_time=start_time,
            end_time=end_time,
            status=Booking.Status.PENDING,
        )
        record(
            AuditLog.Action.BOOKING_CREATED,
            user,
            resource_id=resource.id,
            booking_id=booking.id,
            details={
                "resource_name": resource.name,
                "date": booking_date,
                "start_time": start_time,
                "end_time": end_time,
            },
            request=request,
        )

    logger.info(
        "booking.created",
        booking_id=booking.id,
        resource_id=resource.id,
        user_id=user.id,
        booking_date=booking_date.isoformat(),
    )
    return get_booking(booking.id)


def approve_booking(booking_id, admin, *, request=None) -> Booking:
    """PENDING -> APPROVED, re-checking overlap against other approved bookings."""
    booking = get_booking(booking_id)

    with transaction.atomic():
        _lock_resource(booking.resource_id)
        booking = _get_locked_booking(booking_id)
        _require_pending(booking, "approve")

        ensure_slot_is_free(
            booking.resource,
            booking.booking_date,
            booking.start_time,
            booking.end_time,
            exclude_booking_id=booking.pk,
        )

        booking.status = Booking.Status.APPROVED
        booking.save(update_fields=["status", "updated_at"])
        record(
            AuditLog.Action.BOOKING_APPROVED,
            admin,
            resource_id=booking.resource_id,
            booking_id=booking.id,
            details={"user": booking.user.name, "resource": booking.resource.name},
            request=request,
        )

    logger.info("booking.approved", booking_id=booking.id, admin_id=admin.id)
    return get_booking(booking.id)


def reject_booking(booking_id, admin, reason: str | None, *, request=None) -> Booking:
    """PENDING -> REJECTED; a non-blank reason is mandatory and stored."""
    with transaction.atomic():
        booking = _get_locked_booking(booking_id)
        _require_pending(booking, "reject")

        reason = (reason or "").strip()
        if not reason:
            raise ValidationFailed("Rejection reason is required")

        booking.status = Booking.Status.REJECTED
        booking.rejection_reason = reason
        booking.save(update_fields=["status", "rejection_reason", "updated_at"])
        record(
            AuditLog.Action.BOOKING_REJECTED,
            admin,
            resource_id=booking.resource_id,
            booking_id=booking.id,
            details={"user": booking.user.name, "resource": booking.resource.name, "reason": reason},
            request=request,
        )

    logger.info("booking.rejected", booking_id=booking.id, admin_id=admin.id)
    return get_booking(booking.id)


def cancel_booking(booking_id, actor, *, request=None) -> None:
    """Delete a PENDING booking on behalf of its owner or an administrator."""
    with transaction.atomic():
        booking = _get_locked_booking(booking_id)

        if booking.user_id != actor.id and not is_admin(actor):
            raise NotAuthorized()

        if not booking.is_pending:
            raise InvalidStateTransition("cancel", booking.status)

        resource_id = booking.resource_id
        details = {"resource": booking.resource.name, "owner_id": booking.user_id}
        booking.delete()
        record(
            AuditLog.Action.BOOKING_CANCELLED,
            actor,
            resource_id=resource_id,
            booking_id=booking_id,
            details=details,
            request=request,
        )

    logger.info("booking.cancelled", booking_id=booking_id, actor_id=actor.id)


def list_user_bookings(user_id):
    """A user's bookings, latest slot first."""
    return (
        Booking.objects.select_related("user", "resource")
        .filter(user_id=user_id)
        .order_by("-booking_date", "-start_time", "-id")
    )


def list_bookings(*, status: str | None = None, resource_id=None, user_id=None):
    """All bookings, most recently created first."""
    queryset = Booking.objects.select_related("user", "resource")
    if status:
        queryset = queryset.filter(status=status)
    if resource_id is not None:
        queryset = queryset.filter(resource_id=resource_id)
    if user_id is not None:
        queryset = queryset.filter(user_id=user_id)
    return queryset.order_by("-created_at", "-id")


def get_availability(resource_id, booking_date: date) -> tuple[Resource, list[dict[str, time]]]:
    """Approved ``[start, end)`` intervals of the resource on the date, by start time."""
    resource = get_resource(resource_id)
    booked_slots = list(
        Booking.objects.filter(
            resource=resource,
            booking_date=booking_date,
            status=Booking.Status.APPROVED,
        )
        .order_by("start_time")
        .values("start_time", "end_time")
    )
    return resource, booked_slots
