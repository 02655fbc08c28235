"""Celery tasks for notification delivery."""

from __future__ import annotations

from celery import shared_task  # type: ignore

from .services import send_email_notification


@shared_task(name="notifications.deliver_email")
def deliver_email_notification(recipient_email: str, subject: str, html_message: str) -> bool:
    """Deliver one queued email; failures are logged by the service."""
    return send_email_notification(recipient_email, subject, html_message)
