"""Reservation model for consultation bookings."""

from __future__ import annotations

import uuid

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import Slot


class Reservation(models.Model):
    """A granted claim on one consultation slot.

    Reservations are created only by the booking ledger and are never
    updated afterwards. The unique constraint on the slot is what keeps
    two concurrent requests from both being granted.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    contact = models.CharField(
        max_length=255,
        help_text=_("Email address or phone/WhatsApp number."),
    )
    booking_date = models.DateField()
    booking_time = models.TimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Reservation")
        verbose_name_plural = _("Reservations")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["booking_date", "booking_time"],
                name="reservation_unique_slot",
            ),
            models.CheckConstraint(
                condition=~models.Q(name="") & ~models.Q(contact=""),
                name="reservation_requester_present",
            ),
        ]
        indexes = [
            models.Index(fields=["booking_date"], name="reservation_date_idx"),
        ]

    def __str__(self) -> str:
        return f"Reservation {self.slot} for {self.name}"

    @property
    def slot(self) -> Slot:
        return Slot(self.booking_date, self.booking_time)
