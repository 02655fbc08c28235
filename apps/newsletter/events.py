"""Newsletter domain events."""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass
class SubscriberAdded(DomainEvent):
    """Event: a new address joined the list (triggers the welcome email)."""
    email: str = ''
