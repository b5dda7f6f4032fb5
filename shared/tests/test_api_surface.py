"""Health check, JSON 404 and envelope rendering of unexpected errors."""

from unittest import mock

import pytest
from django.db import DatabaseError
from django.urls import reverse
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIRequestFactory

from shared.api.exceptions import envelope_exception_handler
from shared.exceptions import Conflict


@pytest.mark.django_db
def test_health_reports_database(client):
    response = client.get(reverse("health"))
    assert response.status_code == 200
    assert response.json()["success"] is True


@pytest.mark.django_db
def test_health_returns_503_when_database_is_down(client):
    with mock.patch("shared.api.views.connection") as connection:
        connection.cursor.side_effect = DatabaseError("down")
        response = client.get(reverse("health"))
    assert response.status_code == 503
    assert response.json()["success"] is False


def test_domain_errors_render_in_envelope():
    response = envelope_exception_handler(Conflict("Slot taken"), {})
    assert response.status_code == 409
    assert response.data == {"success": False, "message": "Slot taken"}


def test_validation_errors_carry_field_details():
    request = APIRequestFactory().post("/")
    response = envelope_exception_handler(
        ValidationError({"capacity": ["Capacity must be at least 1"]}), {"request": request}
    )
    assert response.status_code == 400
    assert response.data["message"] == "capacity: Capacity must be at least 1"
    assert response.data["errors"] == {"capacity": ["Capacity must be at least 1"]}


def test_unexpected_errors_become_500():
    response = envelope_exception_handler(RuntimeError("boom"), {"view": None})
    assert response.status_code == 500
    assert response.data == {"success": False, "message": "Internal server error"}
