"""
Base Domain Classes

Domain events represent something that happened in the domain. They
are raised by use cases and published after the transaction commits.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from django.utils import timezone


@dataclass
class DomainEvent:
    """
    Base class for domain events

    Subclasses add the payload their handlers need; handlers must not
    have to reload the committed record.
    """
    aggregate_id: UUID | None = None
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=timezone.now)

    def to_dict(self) -> dict:
        """Convert event to dictionary for serialization"""
        return {
            'event_id': str(self.event_id),
            'event_type': self.__class__.__name__,
            'occurred_at': self.occurred_at.isoformat(),
            'aggregate_id': str(self.aggregate_id) if self.aggregate_id else None,
        }
