"""Admin-only audit log listing."""

from __future__ import annotations

from rest_framework import generics  # type: ignore

from apps.users.permissions import IsAdmin
from shared.api.pagination import AuditLogPagination

from . import services
from .serializers import AuditLogQuerySerializer, AuditLogSerializer


class AuditLogListView(generics.ListAPIView):
    """Newest-first audit entries, filterable by action, user and date range."""

    serializer_class = AuditLogSerializer
    permission_classes = [IsAdmin]
    pagination_class = AuditLogPagination
    filter_backends: list = []

    def get_queryset(self):  # type: ignore
        filters = AuditLogQuerySerializer(data=self.request.query_params)
        filters.is_valid(raise_exception=True)
        return services.query(**filters.validated_data)
