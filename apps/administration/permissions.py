"""Permission classes for privileged endpoints."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore

from .authentication import Administrator


class IsAdministrator(permissions.BasePermission):
    """Allow only requests authenticated with the administrator token."""

    message = "A valid administrator token is required."

    def has_permission(self, request, view) -> bool:  # type: ignore
        return isinstance(request.user, Administrator)
