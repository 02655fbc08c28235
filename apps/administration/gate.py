"""Administrator credential check."""

from __future__ import annotations

import hmac
import logging
from functools import lru_cache

from django.conf import settings  # type: ignore

logger = logging.getLogger(__name__)


class AdminGate:
    """Authorizes privileged operations against one configured secret.

    The comparison is constant-time. An empty secret disables every
    privileged operation.
    """

    def __init__(self, secret: str | None):
        self._secret = (secret or "").encode("utf-8")

    @property
    def enabled(self) -> bool:
        return bool(self._secret)

    def authorize(self, presented: str | None) -> bool:
        if not self._secret or not presented:
            return False
        return hmac.compare_digest(presented.encode("utf-8"), self._secret)


@lru_cache(maxsize=1)
def get_admin_gate() -> AdminGate:
    """Process-wide gate built from settings on first use."""
    gate = AdminGate(getattr(settings, "ADMIN_SECRET", ""))
    if not gate.enabled:
        logger.warning("ADMIN_SECRET is not configured; privileged endpoints are disabled")
    return gate
