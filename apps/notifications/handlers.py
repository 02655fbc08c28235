"""Domain event handlers that turn commits into notifications."""

from __future__ import annotations

import logging

from apps.bookings.domain.events import ReservationCommitted
from apps.contacts.events import ContactReceived
from apps.newsletter.events import SubscriberAdded
from apps.reviews.domain.events import ReviewSubmitted

from . import messages
from .sinks import dispatch

logger = logging.getLogger(__name__)


def on_reservation_committed(event: ReservationCommitted) -> None:
    dispatch(messages.reservation_admin_alert(event))
    if event.email:
        dispatch(messages.reservation_confirmation(event))


def on_review_submitted(event: ReviewSubmitted) -> None:
    dispatch(messages.review_admin_alert(event))
    if event.email:
        dispatch(messages.review_thanks(event))


def on_subscriber_added(event: SubscriberAdded) -> None:
    dispatch(messages.newsletter_welcome(event))


def on_contact_received(event: ContactReceived) -> None:
    dispatch(messages.contact_admin_alert(event))
    dispatch(messages.contact_acknowledgement(event))


def register_handlers(bus) -> None:
    bus.register_event_handler(ReservationCommitted, on_reservation_committed)
    bus.register_event_handler(ReviewSubmitted, on_review_submitted)
    bus.register_event_handler(SubscriberAdded, on_subscriber_added)
    bus.register_event_handler(ContactReceived, on_contact_received)
    logger.debug("Notification handlers registered")
