"""Resource registry services.

Existence and active-flag checks used by the booking ledger, plus the
admin-only create/update/delete operations, each of which is audited.
"""

from __future__ import annotations

from typing import Any

import structlog
from django.db import transaction  # type: ignore

from apps.audit.models import AuditLog
from apps.audit.services import record
from shared.db import lock_queryset_if_possible
from shared.exceptions import NotFound, ValidationFailed

from .models import Resource

logger = structlog.get_logger(__name__)

UPDATABLE_FIELDS = ("name", "type", "location", "capacity", "is_active")


class ResourceNotFound(NotFound):
    default_message = "Resource not found"


class ResourceInactive(ValidationFailed):
    default_message = "Resource is not available"


def get_resource(resource_id) -> Resource:
    try:
        return Resource.objects.get(pk=resource_id)
    except Resource.DoesNotExist:
        raise ResourceNotFound()


def get_bookable_resource(resource_id, *, lock: bool = False) -> Resource:
    """Return an active resource, optionally locking its row for the transaction."""
    queryset = Resource.objects.filter(pk=resource_id)
    if lock:
        queryset = lock_queryset_if_possible(queryset)
    resource = queryset.first()
    if resource is None:
        raise ResourceNotFound()
    if not resource.is_active:
        raise ResourceInactive()
    return resource


def list_resources(resource_type: str | None = None, active_only: bool = False):
    queryset = Resource.objects.all()
    if resource_type:
        if resource_type not in Resource.ResourceType.values:
            raise ValidationFailed(
                f"Invalid type. Must be one of: {', '.join(Resource.ResourceType.values)}"
            )
        queryset = queryset.filter(type=resource_type)
    if active_only:
        queryset = queryset.filter(is_active=True)
    return queryset


@transaction.atomic
def create_resource(actor, *, request=None, **fields: Any) -> Resource:
    resource = Resource.objects.create(**fields)
    record(
        AuditLog.Action.RESOURCE_CREATED,
        actor,
        resource_id=resource.id,
        details={
            "name": resource.name,
            "type": resource.type,
            "location": resource.location,
            "capacity": resource.capacity,
        },
        request=request,
    )
    logger.info("resource.created", resource_id=resource.id, actor_id=actor.id)
    return resource


@transaction.atomic
def update_resource(resource: Resource, actor, changes: dict[str, Any], *, request=None) -> Resource:
    changes = {field: value for field, value in changes.items() if field in UPDATABLE_FIELDS}
    if not changes:
        raise ValidationFailed("No changes made to resource")
    for field, value in changes.items():
        setattr(resource, field, value)
    resource.save(update_fields=[*changes, "updated_at"])
    record(
        AuditLog.Action.RESOURCE_UPDATED,
        actor,
        resource_id=resource.id,
        details={"changes": changes},
        request=request,
    )
    logger.info("resource.updated", resource_id=resource.id, fields=sorted(changes))
    return resource


@transaction.atomic
def delete_resource(resource: Resource, actor, *, request=None) -> None:
    resource_id = resource.id
    details = {"name": resource.name, "type": resource.type}
    resource.delete()
    record(
        AuditLog.Action.RESOURCE_DELETED,
        actor,
        resource_id=resource_id,
        details=details,
        request=request,
    )
    logger.info("resource.deleted", resource_id=resource_id, actor_id=actor.id)
