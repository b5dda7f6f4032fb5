"""URL routing for the resource registry."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import ResourceViewSet

router = SimpleRouter()
router.register(r"", ResourceViewSet, basename="resource")

urlpatterns = [
    path("", include(router.urls)),
]
