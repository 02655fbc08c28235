"""
Review Domain Events

Published after the review transaction commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass
class ReviewSubmitted(DomainEvent):
    """
    Event: A visitor submitted a review (status pending)

    Triggers:
    - Alert the administrator that a review awaits approval
    - Thank the reviewer when an email was supplied
    """
    name: str = ''
    project_type: str = ''
    rating: int = 0
    body: str = ''
    email: str = ''
