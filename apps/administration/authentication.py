"""REST framework authentication for the administrator token."""

from __future__ import annotations

import logging

from rest_framework import authentication  # type: ignore

from .gate import get_admin_gate

logger = logging.getLogger(__name__)

ADMIN_TOKEN_HEADER = "X-Admin-Token"


class Administrator:
    """Principal attached to requests that presented the admin token."""

    is_authenticated = True
    is_anonymous = False
    is_staff = True
    username = "admin"

    def __str__(self) -> str:
        return self.username


class AdminTokenAuthentication(authentication.BaseAuthentication):
    """Authenticate requests carrying a valid ``X-Admin-Token`` header.

    A missing or wrong token leaves the request anonymous; privileged
    views then answer 401 through ``IsAdministrator``. Public views are
    unaffected by a stale token.
    """

    def authenticate(self, request):  # type: ignore
        token = request.META.get("HTTP_X_ADMIN_TOKEN", "")
        if not token:
            return None
        if not get_admin_gate().authorize(token):
            logger.warning(f"Rejected admin token on {request.method} {request.path}")
            return None
        return (Administrator(), token)

    def authenticate_header(self, request):  # type: ignore
        return ADMIN_TOKEN_HEADER
