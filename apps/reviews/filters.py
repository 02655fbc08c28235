"""Filters for the administrator review list."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Review


class ReviewStatusFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Review.Status.choices)

    class Meta:
        model = Review
        fields = ["status"]
