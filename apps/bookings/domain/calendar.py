"""
Slot Calendar

Pure rules deciding which (date, time) pairs may be offered for
booking, independent of whether they are already taken.

- Slots run on a fixed grid, 09:00 to 20:30 inclusive, every 30 minutes
- Only Monday to Friday are business days
- Dates are bookable from today up to 60 days ahead
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import List

from shared.domain.value_objects import Slot

SATURDAY = 5


@dataclass(frozen=True)
class SlotCalendar:
    """
    Calendar of offerable consultation slots

    ``day_end`` is exclusive: the last slot starts ``slot_minutes``
    before it. No I/O; every answer is a function of the arguments.
    """

    day_start: time = time(9, 0)
    day_end: time = time(21, 0)
    slot_minutes: int = 30
    window_days: int = 60

    def __post_init__(self):
        if self.slot_minutes <= 0:
            raise ValueError("Slot length must be positive")
        if self.day_start >= self.day_end:
            raise ValueError("Day start must be before day end")
        if self.window_days < 0:
            raise ValueError("Booking window cannot be negative")

    @classmethod
    def from_settings(cls) -> 'SlotCalendar':
        from django.conf import settings

        return cls(
            day_start=settings.BOOKING_DAY_START,
            day_end=settings.BOOKING_DAY_END,
            slot_minutes=settings.BOOKING_SLOT_MINUTES,
            window_days=settings.BOOKING_WINDOW_DAYS,
        )

    def enumerate_slots(self, day: date | None = None) -> List[time]:
        """
        Ordered start times of the daily grid

        The grid is the same for every date; ``day`` is accepted so
        callers can ask per date.
        """
        anchor = date.min
        current = datetime.combine(anchor, self.day_start)
        end = datetime.combine(anchor, self.day_end)
        step = timedelta(minutes=self.slot_minutes)

        times = []
        while current + step <= end:
            times.append(current.time())
            current += step
        return times

    def is_business_day(self, day: date) -> bool:
        return day.weekday() < SATURDAY

    def is_within_booking_window(self, day: date, today: date) -> bool:
        return today <= day <= today + timedelta(days=self.window_days)

    def is_offerable(self, day: date, today: date) -> bool:
        return self.is_business_day(day) and self.is_within_booking_window(day, today)

    def is_on_grid(self, start: time) -> bool:
        return start in self.enumerate_slots()

    def is_offerable_slot(self, slot: Slot, today: date) -> bool:
        return self.is_offerable(slot.day, today) and self.is_on_grid(slot.start)

    def offered_slots(self, day: date, today: date) -> List[Slot]:
        """All slots of ``day``, or none when the day is not offerable."""
        if not self.is_offerable(day, today):
            return []
        return [Slot(day, start) for start in self.enumerate_slots(day)]

    def last_bookable_day(self, today: date) -> date:
        return today + timedelta(days=self.window_days)
