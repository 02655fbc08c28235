"""Serializers for reviews.

The public API keeps the field names used by the reviews page
(``review`` for the text, ``is_anonymous``). Rating bounds are checked
here and again by the review store.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import MAX_RATING, MIN_RATING, Review
from .services import ReviewSubmission


class ReviewCreateSerializer(serializers.Serializer):
    """Serializer for submitting a new review."""

    name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    project_type = serializers.ChoiceField(choices=Review.ProjectType.choices)
    rating = serializers.IntegerField(min_value=MIN_RATING, max_value=MAX_RATING)
    review = serializers.CharField()
    is_anonymous = serializers.BooleanField(required=False, default=False)
    company = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    role = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    email = serializers.EmailField(required=False, allow_blank=True)

    def validate(self, attrs):  # type: ignore
        if not attrs.get("is_anonymous") and not attrs.get("name", "").strip():
            raise serializers.ValidationError({"name": ["Name is required unless posting anonymously."]})
        return attrs

    def to_submission(self) -> ReviewSubmission:
        data = self.validated_data
        return ReviewSubmission(
            name=data.get("name", ""),
            project_type=data["project_type"],
            rating=data["rating"],
            body=data["review"],
            is_anonymous=data.get("is_anonymous", False),
            company=data.get("company"),
            role=data.get("role"),
            email=data.get("email", ""),
        )


class ReviewSerializer(serializers.ModelSerializer):
    """Public read serializer: approved reviews only ever pass through it."""

    review = serializers.CharField(source="body", read_only=True)

    class Meta:
        model = Review
        fields = [
            "id",
            "name",
            "project_type",
            "rating",
            "review",
            "is_anonymous",
            "company",
            "role",
            "created_at",
        ]
        read_only_fields = fields


class AdminReviewSerializer(ReviewSerializer):
    """Administrator read serializer including moderation status."""

    approved = serializers.BooleanField(source="is_approved", read_only=True)

    class Meta(ReviewSerializer.Meta):
        fields = ReviewSerializer.Meta.fields + ["status", "approved", "updated_at"]
        read_only_fields = fields


class ApprovalSerializer(serializers.Serializer):
    approved = serializers.BooleanField()


class LimitQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(min_value=1, max_value=500, required=False)
