"""Resource API views."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from apps.users.permissions import IsAdminOrReadOnly
from shared.api.responses import success_response

from . import services
from .filters import ResourceFilterSet
from .models import Resource
from .serializers import ResourceSerializer


class ResourceViewSet(viewsets.ModelViewSet):
    """Anyone may browse resources; only administrators change them."""

    queryset = Resource.objects.all()
    serializer_class = ResourceSerializer
    permission_classes = [IsAdminOrReadOnly]
    filter_backends = [DjangoFilterBackend]
    filterset_class = ResourceFilterSet
    lookup_value_regex = r"\d+"

    def get_permissions(self):  # type: ignore
        if self.action in {"list", "retrieve", "by_type"}:
            return [permissions.AllowAny()]
        return super().get_permissions()

    def get_object(self):  # type: ignore
        resource = services.get_resource(self.kwargs[self.lookup_field])
        self.check_object_permissions(self.request, resource)
        return resource

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        return success_response(self.get_serializer(self.get_object()).data)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        resource = services.create_resource(request.user, request=request, **serializer.validated_data)
        return success_response(
            self.get_serializer(resource).data,
            message="Resource created successfully",
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):  # type: ignore
        partial = kwargs.pop("partial", False)
        resource = self.get_object()
        serializer = self.get_serializer(resource, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        resource = services.update_resource(resource, request.user, serializer.validated_data, request=request)
        return success_response(self.get_serializer(resource).data, message="Resource updated successfully")

    def destroy(self, request, *args, **kwargs):  # type: ignore
        services.delete_resource(self.get_object(), request.user, request=request)
        return success_response(message="Resource deleted successfully")

    @action(detail=False, methods=["get"], url_path=r"type/(?P<resource_type>[^/.]+)")
    def by_type(self, request, resource_type=None):  # type: ignore
        """Active resources of one type, unpaginated."""
        resources = services.list_resources(resource_type, active_only=True)
        return success_response(self.get_serializer(resources, many=True).data)
