"""API tests for the resource registry."""

from __future__ import annotations

from datetime import time, timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.audit.models import AuditLog
from apps.bookings.models import Booking
from apps.resources.models import Resource
from apps.users.models import User


class ResourceAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(
            email="admin@campus.edu", password="secret123", name="Admin", role=User.Role.ADMIN
        )
        self.student = User.objects.create_user(
            email="student@campus.edu", password="secret123", name="Student"
        )
        self.lab = Resource.objects.create(
            name="Physics Lab", type=Resource.ResourceType.LAB, location="Block A", capacity=30
        )
        self.hall = Resource.objects.create(
            name="Main Hall", type=Resource.ResourceType.SEMINAR_HALL, location="Block B", capacity=200
        )
        self.old_projector = Resource.objects.create(
            name="Old Projector",
            type=Resource.ResourceType.PROJECTOR,
            location="Store",
            capacity=1,
            is_active=False,
        )

    def test_list_is_public_and_paginated(self) -> None:
        response = self.client.get(reverse("resource-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["pagination"]["total"], 3)
        self.assertEqual(response.data["pagination"]["page"], 1)
        self.assertEqual([item["name"] for item in response.data["data"]], ["Main Hall", "Old Projector", "Physics Lab"])

    def test_list_limit_controls_page_size(self) -> None:
        response = self.client.get(reverse("resource-list"), {"limit": 2, "page": 2})
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(response.data["data"]), 1)
        self.assertEqual(response.data["pagination"]["total"], 3)
        self.assertEqual(response.data["pagination"]["pages"], 2)

    def test_filter_by_type_and_active_flag(self) -> None:
        response = self.client.get(reverse("resource-list"), {"type": "projector", "is_active": "false"})
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([item["id"] for item in response.data["data"]], [self.old_projector.id])

    def test_by_type_returns_only_active_resources(self) -> None:
        Resource.objects.create(
            name="Chemistry Lab", type=Resource.ResourceType.LAB, location="Block C", capacity=25
        )
        self.lab.is_active = False
        self.lab.save()

        response = self.client.get(reverse("resource-by-type", args=["lab"]))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([item["name"] for item in response.data["data"]], ["Chemistry Lab"])

    def test_by_type_rejects_unknown_type(self) -> None:
        response = self.client.get(reverse("resource-by-type", args=["kitchen"]))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(response.data["message"].startswith("Invalid type. Must be one of:"))

    def test_retrieve_missing_resource(self) -> None:
        response = self.client.get(reverse("resource-detail", args=[9999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Resource not found")

    def test_admin_creates_resource(self) -> None:
        self.client.force_authenticate(self.admin)
        payload = {"name": "Robotics Lab", "type": "lab", "location": "Block D", "capacity": 15}

        response = self.client.post(reverse("resource-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "Resource created successfully")
        self.assertTrue(response.data["data"]["is_active"])

        entry = AuditLog.objects.get(action=AuditLog.Action.RESOURCE_CREATED)
        self.assertEqual(entry.user, self.admin)
        self.assertEqual(entry.resource_id, response.data["data"]["id"])
        self.assertEqual(entry.details["name"], "Robotics Lab")

    def test_student_cannot_create_resource(self) -> None:
        self.client.force_authenticate(self.student)
        payload = {"name": "Robotics Lab", "type": "lab", "location": "Block D", "capacity": 15}
        response = self.client.post(reverse("resource-list"), payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(Resource.objects.filter(name="Robotics Lab").exists())

    def test_anonymous_cannot_create_resource(self) -> None:
        payload = {"name": "Robotics Lab", "type": "lab", "location": "Block D", "capacity": 15}
        response = self.client.post(reverse("resource-list"), payload, format="json")
        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))
        self.assertFalse(response.data["success"])

    def test_create_validates_capacity_and_type(self) -> None:
        self.client.force_authenticate(self.admin)

        response = self.client.post(
            reverse("resource-list"),
            {"name": "Tiny", "type": "lab", "location": "X", "capacity": 0},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("Capacity must be at least 1", response.data["message"])

        response = self.client.post(
            reverse("resource-list"),
            {"name": "Kitchen", "type": "kitchen", "location": "X", "capacity": 4},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("Invalid type", response.data["message"])

    def test_partial_update_records_changes(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.patch(
            reverse("resource-detail", args=[self.lab.id]), {"capacity": 40}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["data"]["capacity"], 40)

        entry = AuditLog.objects.get(action=AuditLog.Action.RESOURCE_UPDATED)
        self.assertEqual(entry.details, {"changes": {"capacity": 40}})

    def test_update_without_changes_is_rejected(self) -> None:
        self.client.force_authenticate(self.admin)
        response = self.client.patch(reverse("resource-detail", args=[self.lab.id]), {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "No changes made to resource")

    def test_delete_removes_resource_and_its_bookings(self) -> None:
        Booking.objects.create(
            user=self.student,
            resource=self.lab,
            booking_date=timezone.localdate() + timedelta(days=1),
            start_time=time(9, 0),
            end_time=time(10, 0),
        )
        self.client.force_authenticate(self.admin)

        response = self.client.delete(reverse("resource-detail", args=[self.lab.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertFalse(Resource.objects.filter(pk=self.lab.id).exists())
        self.assertFalse(Booking.objects.filter(resource_id=self.lab.id).exists())
        self.assertTrue(
            AuditLog.objects.filter(action=AuditLog.Action.RESOURCE_DELETED, resource_id=self.lab.id).exists()
        )
