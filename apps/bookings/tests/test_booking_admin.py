"""Django admin must not change booking state behind the ledger's back."""

from __future__ import annotations

from datetime import time, timedelta

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from apps.audit.models import AuditLog
from apps.bookings.models import Booking
from apps.resources.models import Resource
from apps.users.models import User


class BookingAdminTests(TestCase):
    def setUp(self) -> None:
        self.superuser = User.objects.create_superuser(
            email="root@campus.edu", password="secret123", name="Root"
        )
        student = User.objects.create_user(email="student@campus.edu", password="secret123", name="Student")
        lab = Resource.objects.create(
            name="Physics Lab", type=Resource.ResourceType.LAB, location="Block A", capacity=30
        )
        day = timezone.localdate() + timedelta(days=1)
        self.approved = Booking.objects.create(
            user=student, resource=lab, booking_date=day,
            start_time=time(9, 0), end_time=time(10, 0), status=Booking.Status.APPROVED,
        )
        self.pending = Booking.objects.create(
            user=student, resource=lab, booking_date=day,
            start_time=time(9, 30), end_time=time(10, 30),
        )
        self.client.force_login(self.superuser)

    def test_change_form_cannot_approve_overlapping_booking(self) -> None:
        self.client.post(
            reverse("admin:bookings_booking_change", args=[self.pending.id]),
            {"status": Booking.Status.APPROVED, "start_time": "11:00", "end_time": "12:00"},
        )

        self.pending.refresh_from_db()
        self.assertEqual(self.pending.status, Booking.Status.PENDING)
        self.assertEqual(self.pending.start_time, time(9, 30))
        self.assertEqual(
            list(Booking.objects.filter(status=Booking.Status.APPROVED).values_list("id", flat=True)),
            [self.approved.id],
        )
        self.assertFalse(AuditLog.objects.filter(action=AuditLog.Action.BOOKING_APPROVED).exists())

    def test_change_form_cannot_reopen_terminal_booking(self) -> None:
        self.client.post(
            reverse("admin:bookings_booking_change", args=[self.approved.id]),
            {"status": Booking.Status.PENDING},
        )
        self.approved.refresh_from_db()
        self.assertEqual(self.approved.status, Booking.Status.APPROVED)

    def test_add_and_delete_are_disabled(self) -> None:
        response = self.client.get(reverse("admin:bookings_booking_add"))
        self.assertEqual(response.status_code, 403)

        response = self.client.post(
            reverse("admin:bookings_booking_delete", args=[self.pending.id]), {"post": "yes"}
        )
        self.assertEqual(response.status_code, 403)
        self.assertTrue(Booking.objects.filter(pk=self.pending.id).exists())
