"""Email messages sent by the service.

Every body ends with the same signature footer. User-supplied values
are escaped with ``format_html``.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.utils.html import format_html  # type: ignore
from django.utils.safestring import mark_safe  # type: ignore

from .sinks import Notification

EMAIL_FOOTER = format_html(
    """
<div style="margin-top:32px;background:#0b3c78;color:#ffffff;padding:24px;border-radius:6px;font-family:Arial, Helvetica, sans-serif;font-size:14px;">
  <p style="margin:0 0 8px 0;font-weight:bold;font-size:16px;">{}</p>
  <p style="margin:0;line-height:1.6;">Website: <a href="{}" style="color:#ffffff;text-decoration:underline;">{}</a><br>Email: {}</p>
</div>
""",
    "I AM TMB",
    "https://tmb.it.com",
    "https://tmb.it.com",
    "mosesbakare48@gmail.com",
)


def _admin_email() -> str:
    return settings.ADMIN_NOTIFICATION_EMAIL


def _body(html) -> str:
    return f"<html><body>{html}{EMAIL_FOOTER}</body></html>"


# ============================================================================
# BOOKINGS
# ============================================================================

def reservation_admin_alert(event) -> Notification:
    slot = event.slot
    return Notification(
        kind="reservation_admin_alert",
        recipient=_admin_email(),
        subject=f"New Booking from {event.name}",
        html_body=_body(format_html(
            "<p>New booking received.</p>"
            "<ul><li><strong>Name:</strong> {}</li>"
            "<li><strong>Contact:</strong> {}</li>"
            "<li><strong>Date:</strong> {}</li>"
            "<li><strong>Time:</strong> {}</li></ul>",
            event.name,
            event.contact,
            slot.day.strftime("%A, %d %B %Y"),
            slot.label,
        )),
    )


def reservation_confirmation(event) -> Notification:
    slot = event.slot
    return Notification(
        kind="reservation_confirmation",
        recipient=event.email,
        subject="Session confirmed",
        html_body=_body(format_html(
            "<p>Hi {},</p><p>Your session on {} at {} is confirmed. "
            "More details will follow shortly.</p>",
            event.name,
            slot.day.strftime("%A, %d %B %Y"),
            slot.label,
        )),
    )


# ============================================================================
# REVIEWS
# ============================================================================

def review_admin_alert(event) -> Notification:
    return Notification(
        kind="review_admin_alert",
        recipient=_admin_email(),
        subject="New Review Submitted",
        html_body=_body(format_html(
            "<p>New review pending approval.</p>"
            "<ul><li><strong>From:</strong> {}</li>"
            "<li><strong>Project:</strong> {}</li>"
            "<li><strong>Rating:</strong> {}/5</li></ul>"
            "<blockquote>{}</blockquote>",
            event.name,
            event.project_type,
            event.rating,
            event.body,
        )),
    )


def review_thanks(event) -> Notification:
    return Notification(
        kind="review_thanks",
        recipient=event.email,
        subject="Thank you for your review",
        html_body=_body(mark_safe(
            "<p>Your review was received and will appear once it has been approved.</p>"
        )),
    )


# ============================================================================
# NEWSLETTER & CONTACT
# ============================================================================

def newsletter_welcome(event) -> Notification:
    return Notification(
        kind="newsletter_welcome",
        recipient=event.email,
        subject="Newsletter Subscription Confirmed",
        html_body=_body(mark_safe("<p>Welcome to the TMB newsletter.</p>")),
    )


def contact_admin_alert(event) -> Notification:
    return Notification(
        kind="contact_admin_alert",
        recipient=_admin_email(),
        subject=f"New Contact from {event.name}",
        html_body=_body(format_html(
            "<p>New contact submission.</p>"
            "<ul><li><strong>Name:</strong> {}</li>"
            "<li><strong>Email:</strong> {}</li>"
            "<li><strong>WhatsApp:</strong> {}</li>"
            "<li><strong>Services:</strong> {}</li></ul>",
            event.name,
            event.email,
            event.whatsapp,
            event.services,
        )),
    )


def contact_acknowledgement(event) -> Notification:
    return Notification(
        kind="contact_acknowledgement",
        recipient=event.email,
        subject="Message received",
        html_body=_body(format_html("<p>Hi {}, I received your message.</p>", event.name)),
    )


def smtp_test_message() -> Notification:
    return Notification(
        kind="smtp_test",
        recipient=_admin_email(),
        subject="TMB SMTP Test Email",
        html_body=_body(mark_safe("<p>Email delivery is working.</p>")),
    )
