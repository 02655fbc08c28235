"""
Booking Command Handlers

Use cases for the booking domain. They validate the request against
the slot calendar, commit through the ledger inside a unit of work and
raise the event that triggers notifications after commit.

The handler is the authoritative place for the offerability rules;
the ledger only guarantees uniqueness.
"""

from dataclasses import dataclass
from datetime import date, time
from typing import Callable
import logging

from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.utils import timezone

from shared.application.uow import DjangoUnitOfWork
from shared.domain.errors import InvalidInputError
from shared.domain.value_objects import Slot
from apps.bookings.domain.calendar import SlotCalendar
from apps.bookings.domain.events import ReservationCommitted
from apps.bookings.models import Reservation
from apps.bookings.services import BookingLedger

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class CreateReservationCommand:
    """Command to reserve a consultation slot"""
    name: str
    contact: str
    booking_date: date
    booking_time: time
    email: str = ''


# ===== Command Handlers =====

def _confirmation_address(command: CreateReservationCommand) -> str:
    """Explicit email, else the contact when it is an email address."""
    for candidate in (command.email, command.contact):
        candidate = (candidate or '').strip()
        if not candidate:
            continue
        try:
            validate_email(candidate)
        except ValidationError:
            continue
        return candidate
    return ''


class CreateReservationHandler:
    """
    Handler for CreateReservation command

    1. Reject slots the calendar does not offer
    2. Commit through the ledger (unique per slot)
    3. Publish ReservationCommitted after the transaction commits
    """

    def __init__(
        self,
        ledger: BookingLedger | None = None,
        calendar: SlotCalendar | None = None,
        today: Callable[[], date] = timezone.localdate,
    ):
        self.ledger = ledger or BookingLedger()
        self.calendar = calendar or SlotCalendar.from_settings()
        self.today = today

    def ensure_offerable(self, slot: Slot) -> None:
        today = self.today()
        if not self.calendar.is_business_day(slot.day):
            raise InvalidInputError("Weekends are not available for booking.", field='booking_date')
        if not self.calendar.is_within_booking_window(slot.day, today):
            raise InvalidInputError(
                f"Bookings are accepted from {today.isoformat()} "
                f"to {self.calendar.last_bookable_day(today).isoformat()}.",
                field='booking_date',
            )
        if not self.calendar.is_on_grid(slot.start):
            raise InvalidInputError(f"{slot.label} is not a bookable time.", field='booking_time')

    def handle(self, command: CreateReservationCommand) -> Reservation:
        """
        Handle reservation creation

        Raises:
            InvalidInputError: Missing requester data or slot not offerable
            SlotConflictError: The slot is already reserved
        """
        try:
            slot = Slot(command.booking_date, command.booking_time)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"{command.booking_time} is not a bookable time.", field='booking_time') from exc
        self.ensure_offerable(slot)

        with DjangoUnitOfWork() as uow:
            reservation = self.ledger.commit_reservation(command.name, command.contact, slot)
            uow.add_event(ReservationCommitted(
                aggregate_id=reservation.id,
                name=reservation.name,
                contact=reservation.contact,
                slot=slot,
                email=_confirmation_address(command),
            ))

        logger.info(f"Reservation created: {reservation.id} for {slot}")
        return reservation
