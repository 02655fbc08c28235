"""Booking ledger: the single source of truth for granted slots."""

from __future__ import annotations

import logging
from datetime import date
from typing import List

from django.db import IntegrityError, transaction  # type: ignore

from shared.domain.errors import InvalidInputError, SlotConflictError
from shared.domain.value_objects import Slot

from .models import Reservation

logger = logging.getLogger(__name__)


class BookingLedger:
    """Grants each slot to at most one requester.

    The ledger enforces uniqueness only. Whether a slot may be offered
    at all (business day, booking window, grid) is checked by the
    booking use case before the ledger is reached.
    """

    def occupied(self):
        """Queryset of reservations in slot order."""
        return Reservation.objects.order_by("booking_date", "booking_time")

    def list_reservations(self, start: date | None = None, end: date | None = None) -> List[Slot]:
        """Occupied slots in slot order; no requester details."""
        queryset = self.occupied()
        if start is not None:
            queryset = queryset.filter(booking_date__gte=start)
        if end is not None:
            queryset = queryset.filter(booking_date__lte=end)
        rows = queryset.values_list("booking_date", "booking_time")
        return [Slot(day, start_time) for day, start_time in rows]

    def list_records(self):
        """Full reservation records for administrators, newest first."""
        return Reservation.objects.order_by("-created_at")

    def is_reserved(self, slot: Slot) -> bool:
        return Reservation.objects.filter(booking_date=slot.day, booking_time=slot.start).exists()

    def commit_reservation(self, name: str, contact: str, slot: Slot) -> Reservation:
        """Grant ``slot`` to the requester or raise ``SlotConflictError``.

        The existence check gives a clean error on the common path; the
        unique constraint decides when two requests race past it.
        """
        name = (name or "").strip()
        contact = (contact or "").strip()
        if not name:
            raise InvalidInputError("Name is required.", field="name")
        if not contact:
            raise InvalidInputError("Contact is required.", field="contact")

        if self.is_reserved(slot):
            logger.warning(f"Slot {slot} is already reserved")
            raise SlotConflictError(f"Slot {slot} is already booked.")

        try:
            with transaction.atomic():
                reservation = Reservation.objects.create(
                    name=name,
                    contact=contact,
                    booking_date=slot.day,
                    booking_time=slot.start,
                )
        except IntegrityError as exc:
            logger.warning(f"Slot {slot} was taken by a concurrent request: {exc}")
            raise SlotConflictError(f"Slot {slot} is already booked.") from exc

        logger.info(f"Reservation {reservation.id} committed for slot {slot}")
        return reservation
