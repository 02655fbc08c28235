"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass, field

from shared.domain.base import DomainEvent
from shared.domain.value_objects import Slot


@dataclass
class ReservationCommitted(DomainEvent):
    """
    Event: A slot was granted to a requester

    Triggers:
    - Alert the administrator
    - Send a confirmation to the requester (when an email is known)
    """
    name: str = ''
    contact: str = ''
    slot: Slot | None = None
    email: str = field(default='')
