"""FilterSet definitions for resource listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Resource


class ResourceFilterSet(django_filters.FilterSet):
    type = django_filters.ChoiceFilter(choices=Resource.ResourceType.choices)
    is_active = django_filters.BooleanFilter()

    class Meta:
        model = Resource
        fields = ["type", "is_active"]
