"""
Common Value Objects

Value objects used across multiple apps:
- Slot: A (calendar date, time of day) pair that can hold one reservation
"""

from dataclasses import dataclass
from datetime import date, datetime, time

SLOT_TIME_FORMAT = '%H:%M'


@dataclass(frozen=True, order=True)
class Slot:
    """
    Slot value object

    Immutable, compared and ordered by (day, start).
    """
    day: date
    start: time

    def __post_init__(self):
        if not isinstance(self.day, date) or isinstance(self.day, datetime):
            raise TypeError("Slot day must be a date")
        if not isinstance(self.start, time):
            raise TypeError("Slot start must be a time")
        if self.start.second or self.start.microsecond:
            raise ValueError("Slot start must be a whole minute")

    @property
    def label(self) -> str:
        return self.start.strftime(SLOT_TIME_FORMAT)

    def __str__(self):
        return f"{self.day.isoformat()} {self.label}"

    def __repr__(self):
        return f"Slot({self.day}, {self.label})"
