"""
Notification sinks

The interface the domain calls to send notifications, and its
implementations:
- EmailNotificationSink: queues an email through Celery
- NullNotificationSink: drops everything
- RecordingNotificationSink: keeps notifications in memory

``dispatch()`` is the only entry point the rest of the service uses.
It never raises: a sink failure is logged as a notification failure.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import List

from django.conf import settings  # type: ignore
from django.utils.module_loading import import_string  # type: ignore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """One message for one recipient."""

    kind: str
    recipient: str
    subject: str
    html_body: str


class NotificationSink(ABC):
    """Accepts notifications for fire-and-forget delivery."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        pass


class EmailNotificationSink(NotificationSink):
    """Queue the notification as an email delivery task."""

    def notify(self, notification: Notification) -> None:
        from .tasks import deliver_email_notification

        deliver_email_notification.delay(
            notification.recipient,
            notification.subject,
            notification.html_body,
        )


class NullNotificationSink(NotificationSink):
    def notify(self, notification: Notification) -> None:
        logger.debug(f"Dropping {notification.kind} notification")


class RecordingNotificationSink(NotificationSink):
    """Keeps every notification; used where delivery must be inspected."""

    def __init__(self):
        self.sent: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.sent.append(notification)

    def kinds(self) -> List[str]:
        return [notification.kind for notification in self.sent]

    def clear(self) -> None:
        self.sent.clear()


@lru_cache(maxsize=1)
def get_notification_sink() -> NotificationSink:
    sink_class = import_string(settings.NOTIFICATION_SINK)
    return sink_class()


def dispatch(notification: Notification, sink: NotificationSink | None = None) -> bool:
    """
    Hand a notification to the sink without letting failures escape.

    Returns:
        bool: False when the sink raised (the failure is logged)
    """
    if not notification.recipient:
        logger.warning(f"Skipping {notification.kind} notification without recipient")
        return False

    sink = sink or get_notification_sink()
    try:
        sink.notify(notification)
    except Exception as e:
        logger.error(
            f"Notification failure ({notification.kind} to {notification.recipient}): {e}",
            exc_info=True,
        )
        return False
    return True
