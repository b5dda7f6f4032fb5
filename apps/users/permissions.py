"""Access policy: role checks over the authenticated identity.

Authentication itself is SimpleJWT's ``JWTAuthentication``; by the time these
checks run ``request.user`` is the user named by the bearer token.
"""

from __future__ import annotations

from typing import Iterable

from rest_framework import permissions  # type: ignore

from .models import CustomUser

Role = CustomUser.Role


def has_role(user, required_roles: Iterable[str]) -> bool:
    """True when ``user`` is authenticated and its role is one of ``required_roles``."""
    if user is None or not getattr(user, "is_authenticated", False):
        return False
    return getattr(user, "role", None) in frozenset(required_roles)


def is_admin(user) -> bool:
    return has_role(user, {Role.ADMIN})


class HasRole(permissions.BasePermission):
    """Allow access to authenticated users holding one of ``required_roles``."""

    required_roles: frozenset[str] = frozenset()
    message = "Access denied for your role."

    def has_permission(self, request, view) -> bool:  # type: ignore
        return has_role(request.user, self.required_roles)


class IsAdmin(HasRole):
    required_roles = frozenset({Role.ADMIN})
    message = "Access denied. Required role: ADMIN."


class IsAdminOrReadOnly(permissions.BasePermission):
    """Anyone may read; writes require the ADMIN role."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        return is_admin(request.user)
