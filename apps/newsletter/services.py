"""Newsletter subscription service."""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError  # type: ignore
from django.core.validators import validate_email  # type: ignore

from shared.application.uow import DjangoUnitOfWork
from shared.domain.errors import InvalidInputError

from .events import SubscriberAdded
from .models import Subscriber

logger = logging.getLogger(__name__)


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def subscribe(email: str | None) -> tuple[Subscriber, bool]:
    """Add ``email`` to the list.

    Subscribing an address twice is not an error: the existing record
    is returned with ``created`` False and no welcome email is sent.
    """
    email = normalize_email(email)
    if not email:
        raise InvalidInputError("Email required.", field="email")
    try:
        validate_email(email)
    except ValidationError as exc:
        raise InvalidInputError("Enter a valid email address.", field="email") from exc

    with DjangoUnitOfWork() as uow:
        subscriber, created = Subscriber.objects.get_or_create(email=email)
        if created:
            uow.add_event(SubscriberAdded(aggregate_id=subscriber.id, email=subscriber.email))

    if created:
        logger.info(f"Newsletter subscriber added: {subscriber.id}")
    else:
        logger.info(f"Newsletter subscriber already present: {subscriber.id}")
    return subscriber, created


def list_subscribers():
    return Subscriber.objects.order_by("-subscribed_at")
