"""Models for the review domain.

Defines the ``Review`` entity: a visitor's rating and free-text
feedback about a project, plus its moderation status. Reviews are
shown publicly only once approved by the administrator.
"""

from __future__ import annotations

import uuid

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .domain.moderation import INITIAL_STATUS, ReviewStatus

ANONYMOUS_NAME = "Anonymous"
MIN_RATING = 1
MAX_RATING = 5


class Review(models.Model):
    """A submitted review with its moderation status."""

    class ProjectType(models.TextChoices):
        WEB_DEVELOPMENT = "Web Development", _("Web Development")
        BRANDING_DESIGN = "Branding & Design", _("Branding & Design")
        VIDEO_PHOTOGRAPHY = "Video & Photography", _("Video & Photography")
        CREATIVE_CONSULTING = "Creative Consulting", _("Creative Consulting")
        MULTIPLE_SERVICES = "Multiple Services", _("Multiple Services")
        OTHER = "Other", _("Other")

    class Status(models.TextChoices):
        PENDING = ReviewStatus.PENDING.value, _("Pending approval")
        APPROVED = ReviewStatus.APPROVED.value, _("Approved")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, help_text=_("Display name or \"Anonymous\"."))
    project_type = models.CharField(max_length=64, choices=ProjectType.choices)
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_RATING), MaxValueValidator(MAX_RATING)],
        help_text=_("Rating from 1 to 5"),
    )
    body = models.TextField()
    is_anonymous = models.BooleanField(default=False)
    company = models.CharField(max_length=255, blank=True)
    role = models.CharField(max_length=255, blank=True)
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=INITIAL_STATUS.value,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(rating__gte=MIN_RATING) & models.Q(rating__lte=MAX_RATING),
                name="review_rating_range",
            ),
        ]
        indexes = [
            models.Index(fields=["status", "-created_at"], name="review_status_created_idx"),
        ]

    def __str__(self) -> str:
        return f"Review by {self.name} ({self.rating}/5, {self.status})"

    @property
    def is_approved(self) -> bool:
        return ReviewStatus(self.status).is_public
