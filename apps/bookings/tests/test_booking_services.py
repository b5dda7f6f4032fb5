"""Service-level tests for the booking ledger."""

from datetime import time, timedelta
from unittest import mock

import pytest
from django.db import DatabaseError
from django.utils import timezone

from apps.audit.models import AuditLog
from apps.bookings import services
from apps.bookings.models import Booking
from apps.resources.models import Resource
from apps.resources.services import ResourceInactive
from apps.users.models import User


@pytest.fixture
def student():
    return User.objects.create_user(email="student@campus.edu", password="secret123", name="Student")


@pytest.fixture
def admin():
    return User.objects.create_user(
        email="admin@campus.edu", password="secret123", name="Admin", role=User.Role.ADMIN
    )


@pytest.fixture
def hall():
    return Resource.objects.create(
        name="Seminar Hall 1", type=Resource.ResourceType.SEMINAR_HALL, location="Block B", capacity=120
    )


@pytest.fixture
def tomorrow():
    return timezone.localdate() + timedelta(days=1)


def test_overlaps_is_half_open():
    booking = Booking(start_time=time(10, 0), end_time=time(12, 0))
    assert booking.overlaps(time(11, 0), time(13, 0))
    assert booking.overlaps(time(9, 0), time(10, 30))
    assert booking.overlaps(time(10, 30), time(11, 0))
    assert not booking.overlaps(time(12, 0), time(13, 0))
    assert not booking.overlaps(time(8, 0), time(10, 0))


@pytest.mark.django_db
def test_ensure_slot_is_free_ignores_other_dates_and_statuses(student, hall, tomorrow):
    Booking.objects.create(
        user=student, resource=hall, booking_date=tomorrow,
        start_time=time(10, 0), end_time=time(12, 0), status=Booking.Status.APPROVED,
    )
    Booking.objects.create(
        user=student, resource=hall, booking_date=tomorrow,
        start_time=time(13, 0), end_time=time(14, 0), status=Booking.Status.PENDING,
    )

    services.ensure_slot_is_free(hall, tomorrow + timedelta(days=1), time(10, 0), time(12, 0))
    services.ensure_slot_is_free(hall, tomorrow, time(13, 0), time(14, 0))
    with pytest.raises(services.SlotConflict):
        services.ensure_slot_is_free(hall, tomorrow, time(11, 59), time(12, 30))


@pytest.mark.django_db
def test_create_booking_validation_order(student, hall, tomorrow):
    with pytest.raises(services.InvalidTimeRange):
        services.create_booking(student, hall.id, tomorrow, time(12, 0), time(11, 0))

    with pytest.raises(services.PastDateBooking):
        services.create_booking(
            student, hall.id, timezone.localdate() - timedelta(days=3), time(9, 0), time(10, 0)
        )

    hall.is_active = False
    hall.save()
    with pytest.raises(ResourceInactive):
        services.create_booking(student, hall.id, tomorrow, time(12, 0), time(11, 0))
    assert not Booking.objects.exists()


@pytest.mark.django_db
def test_create_booking_stores_pending_and_audits(student, hall, tomorrow):
    booking = services.create_booking(student, hall.id, tomorrow, time(9, 0), time(10, 30))

    assert booking.status == Booking.Status.PENDING
    assert booking.rejection_reason == ""
    entry = AuditLog.objects.get(action=AuditLog.Action.BOOKING_CREATED)
    assert entry.booking_id == booking.id
    assert entry.resource_id == hall.id
    assert entry.details == {
        "resource_name": "Seminar Hall 1",
        "date": tomorrow.isoformat(),
        "start_time": "09:00:00",
        "end_time": "10:30:00",
    }


@pytest.mark.django_db
def test_audit_failure_does_not_undo_booking(student, hall, tomorrow):
    with mock.patch.object(AuditLog, "save", side_effect=DatabaseError("audit table unavailable")):
        booking = services.create_booking(student, hall.id, tomorrow, time(9, 0), time(10, 0))

    assert Booking.objects.filter(pk=booking.id).exists()
    assert not AuditLog.objects.exists()


@pytest.mark.django_db
def test_approval_keeps_approved_bookings_disjoint(student, admin, hall, tomorrow):
    first = services.create_booking(student, hall.id, tomorrow, time(10, 0), time(12, 0))
    second = services.create_booking(student, hall.id, tomorrow, time(11, 0), time(13, 0))
    adjacent = services.create_booking(student, hall.id, tomorrow, time(12, 0), time(13, 0))

    services.approve_booking(first.id, admin)
    with pytest.raises(services.SlotConflict):
        services.approve_booking(second.id, admin)
    services.approve_booking(adjacent.id, admin)

    approved = list(
        Booking.objects.filter(status=Booking.Status.APPROVED).order_by("start_time")
    )
    assert [b.id for b in approved] == [first.id, adjacent.id]
    for earlier, later in zip(approved, approved[1:]):
        assert not earlier.overlaps(later.start_time, later.end_time)


@pytest.mark.django_db
def test_transitions_leave_pending_exactly_once(student, admin, hall, tomorrow):
    booking = services.create_booking(student, hall.id, tomorrow, time(10, 0), time(11, 0))
    services.reject_booking(booking.id, admin, "  Double booked  ")

    booking.refresh_from_db()
    assert booking.status == Booking.Status.REJECTED
    assert booking.rejection_reason == "Double booked"

    with pytest.raises(services.InvalidStateTransition) as excinfo:
        services.approve_booking(booking.id, admin)
    assert excinfo.value.current_status == Booking.Status.REJECTED

    with pytest.raises(services.InvalidStateTransition):
        services.cancel_booking(booking.id, student)


@pytest.mark.django_db
def test_reject_with_blank_reason_changes_nothing(student, admin, hall, tomorrow):
    booking = services.create_booking(student, hall.id, tomorrow, time(10, 0), time(11, 0))
    with pytest.raises(services.ValidationFailed):
        services.reject_booking(booking.id, admin, "   ")
    booking.refresh_from_db()
    assert booking.status == Booking.Status.PENDING


@pytest.mark.django_db
def test_cancel_checks_ownership_before_status(student, admin, hall, tomorrow):
    intruder = User.objects.create_user(email="intruder@campus.edu", password="secret123", name="Intruder")
    booking = services.create_booking(student, hall.id, tomorrow, time(10, 0), time(11, 0))
    services.approve_booking(booking.id, admin)

    with pytest.raises(services.NotAuthorized):
        services.cancel_booking(booking.id, intruder)


@pytest.mark.django_db
def test_cancel_deletes_and_keeps_audit_trail(student, hall, tomorrow):
    booking = services.create_booking(student, hall.id, tomorrow, time(10, 0), time(11, 0))
    services.cancel_booking(booking.id, student)

    assert not Booking.objects.filter(pk=booking.id).exists()
    actions = list(
        AuditLog.objects.filter(booking_id=booking.id).order_by("id").values_list("action", flat=True)
    )
    assert actions == [AuditLog.Action.BOOKING_CREATED, AuditLog.Action.BOOKING_CANCELLED]

    with pytest.raises(services.BookingNotFound):
        services.cancel_booking(booking.id, student)


@pytest.mark.django_db
def test_get_availability_returns_sorted_approved_slots(student, admin, hall, tomorrow):
    late = services.create_booking(student, hall.id, tomorrow, time(15, 0), time(16, 0))
    early = services.create_booking(student, hall.id, tomorrow, time(8, 0), time(9, 0))
    services.create_booking(student, hall.id, tomorrow, time(10, 0), time(11, 0))
    services.approve_booking(late.id, admin)
    services.approve_booking(early.id, admin)

    resource, slots = services.get_availability(hall.id, tomorrow)

    assert resource == hall
    assert slots == [
        {"start_time": time(8, 0), "end_time": time(9, 0)},
        {"start_time": time(15, 0), "end_time": time(16, 0)},
    ]
