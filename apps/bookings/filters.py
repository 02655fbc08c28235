"""Query filters for the public availability list."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Reservation


class ReservationSlotFilter(django_filters.FilterSet):
    """Restrict occupied slots to a date range (both ends inclusive)."""

    start = django_filters.DateFilter(field_name="booking_date", lookup_expr="gte")
    end = django_filters.DateFilter(field_name="booking_date", lookup_expr="lte")

    class Meta:
        model = Reservation
        fields = ["start", "end"]
