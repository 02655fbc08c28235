"""Email delivery through Django's mail framework."""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore
from django.utils.html import strip_tags  # type: ignore

logger = logging.getLogger(__name__)


def deliver_email(recipient_email: str, subject: str, html_message: str) -> None:
    """Send one HTML email with a plain-text alternative; raises on failure."""
    if not recipient_email:
        raise ValueError("recipient_email is required")

    send_mail(
        subject=subject,
        message=strip_tags(html_message),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[recipient_email],
        html_message=html_message,
        fail_silently=False,
    )


def send_email_notification(recipient_email: str, subject: str, html_message: str) -> bool:
    """
    Send an email notification.

    Args:
        recipient_email: Recipient address
        subject: Subject line
        html_message: HTML body; the text part is derived from it

    Returns:
        bool: True if the message was handed to the mail backend
    """
    try:
        deliver_email(recipient_email, subject, html_message)
    except Exception as e:
        logger.error(f"Failed to send email to {recipient_email}: {e}", exc_info=True)
        return False

    logger.info(f"Email sent successfully to {recipient_email}: {subject}")
    return True
