"""Page-number pagination rendered inside the response envelope."""

from __future__ import annotations

from rest_framework.pagination import PageNumberPagination  # type: ignore
from rest_framework.response import Response  # type: ignore

from .responses import envelope


class EnvelopePagination(PageNumberPagination):
    """1-based ``page`` with an optional ``limit`` override.

    ``total`` is the full row count of the filtered queryset, not the size
    of the returned page.
    """

    page_size = 20
    page_query_param = "page"
    page_size_query_param = "limit"
    max_page_size = 100

    def get_paginated_response(self, data):  # type: ignore
        return Response(envelope(data, pagination=self.get_pagination_meta()))

    def get_pagination_meta(self) -> dict[str, int]:
        return {
            "page": self.page.number,
            "limit": self.page.paginator.per_page,
            "total": self.page.paginator.count,
            "pages": self.page.paginator.num_pages,
        }

    def get_paginated_response_schema(self, schema):  # type: ignore
        return {
            "type": "object",
            "properties": {
                "success": {"type": "boolean"},
                "data": schema,
                "pagination": {
                    "type": "object",
                    "properties": {
                        "page": {"type": "integer"},
                        "limit": {"type": "integer"},
                        "total": {"type": "integer"},
                        "pages": {"type": "integer"},
                    },
                },
            },
        }


class AuditLogPagination(EnvelopePagination):
    page_size = 50
