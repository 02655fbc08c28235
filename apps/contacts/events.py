"""Contact form domain events."""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass
class ContactReceived(DomainEvent):
    """
    Event: a contact form submission was stored

    Triggers:
    - Alert the administrator
    - Acknowledge receipt to the sender
    """
    name: str = ''
    email: str = ''
    whatsapp: str = ''
    services: str = ''
