"""Review store and moderation workflow."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from django.db import transaction  # type: ignore

from shared.application.uow import DjangoUnitOfWork
from shared.domain.errors import InvalidInputError, NotFoundError

from .domain.events import ReviewSubmitted
from .domain.moderation import INITIAL_STATUS, ReviewStatus, transition
from .models import ANONYMOUS_NAME, MAX_RATING, MIN_RATING, Review

logger = logging.getLogger(__name__)


@dataclass
class ReviewSubmission:
    """A review as submitted by a visitor."""

    project_type: str
    rating: int
    body: str
    name: str = ""
    is_anonymous: bool = False
    company: str | None = None
    role: str | None = None
    email: str = ""


def _parse_id(review_id) -> uuid.UUID:
    try:
        return review_id if isinstance(review_id, uuid.UUID) else uuid.UUID(str(review_id))
    except ValueError as exc:
        raise NotFoundError(f"Review {review_id} not found.") from exc


class ReviewStore:
    """Persists submissions and serves public and administrator reads."""

    def validate(self, submission: ReviewSubmission) -> str:
        """Check a submission and return the display name to store."""
        if submission.is_anonymous:
            display_name = ANONYMOUS_NAME
        else:
            display_name = (submission.name or "").strip()
            if not display_name:
                raise InvalidInputError("Name is required unless posting anonymously.", field="name")

        if submission.project_type not in Review.ProjectType.values:
            raise InvalidInputError("Select a valid project type.", field="project_type")

        rating = submission.rating
        if isinstance(rating, bool) or not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidInputError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}.", field="rating"
            )

        if not (submission.body or "").strip():
            raise InvalidInputError("Review text is required.", field="review")

        return display_name

    def submit(self, submission: ReviewSubmission) -> Review:
        """Store a new review in pending status."""
        display_name = self.validate(submission)

        with DjangoUnitOfWork() as uow:
            review = Review.objects.create(
                name=display_name,
                project_type=submission.project_type,
                rating=submission.rating,
                body=submission.body.strip(),
                is_anonymous=submission.is_anonymous,
                company=(submission.company or "").strip(),
                role=(submission.role or "").strip(),
                status=INITIAL_STATUS.value,
            )
            uow.add_event(ReviewSubmitted(
                aggregate_id=review.id,
                name=review.name,
                project_type=review.project_type,
                rating=review.rating,
                body=review.body,
                email=(submission.email or "").strip(),
            ))

        logger.info(f"Review {review.id} submitted ({review.rating}/5), awaiting approval")
        return review

    def list_approved(self, limit: int | None = None):
        """Approved reviews, newest first."""
        queryset = Review.objects.filter(status=ReviewStatus.APPROVED.value).order_by("-created_at")
        return queryset[:limit] if limit else queryset

    def list_all(self, limit: int | None = None):
        """Every review with its status, newest first."""
        queryset = Review.objects.order_by("-created_at")
        return queryset[:limit] if limit else queryset

    def get(self, review_id) -> Review:
        try:
            return Review.objects.get(pk=_parse_id(review_id))
        except Review.DoesNotExist as exc:
            raise NotFoundError(f"Review {review_id} not found.") from exc

    def delete(self, review_id) -> None:
        """Remove a review permanently; ``NotFoundError`` if absent."""
        deleted, _ = Review.objects.filter(pk=_parse_id(review_id)).delete()
        if not deleted:
            raise NotFoundError(f"Review {review_id} not found.")
        logger.info(f"Review {review_id} deleted")


class ModerationWorkflow:
    """The only writer of ``Review.status``."""

    def set_approval(self, review_id, approved: bool) -> Review:
        with transaction.atomic():
            try:
                review = Review.objects.select_for_update().get(pk=_parse_id(review_id))
            except Review.DoesNotExist as exc:
                raise NotFoundError(f"Review {review_id} not found.") from exc

            new_status = transition(ReviewStatus(review.status), approved)
            if review.status != new_status.value:
                review.status = new_status.value
                review.save(update_fields=["status", "updated_at"])
                logger.info(f"Review {review.id} moved to {new_status.value}")
            else:
                logger.info(f"Review {review.id} already {new_status.value}")

        return review
