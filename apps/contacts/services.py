"""Contact form service."""

from __future__ import annotations

import logging

from shared.application.uow import DjangoUnitOfWork

from .events import ContactReceived
from .models import ContactSubmission

logger = logging.getLogger(__name__)


def submit_contact(**fields) -> ContactSubmission:
    """Store a validated submission and notify after commit."""
    with DjangoUnitOfWork() as uow:
        submission = ContactSubmission.objects.create(**fields)
        uow.add_event(ContactReceived(
            aggregate_id=submission.id,
            name=submission.name,
            email=submission.email,
            whatsapp=submission.whatsapp,
            services=submission.services,
        ))

    logger.info(f"Contact submission {submission.id} stored")
    return submission


def list_submissions():
    return ContactSubmission.objects.order_by("-submitted_at")
