"""
Review Moderation

Moderation is binary: a review is either visible (approved) or not
(pending). There is no terminal state; deleting a review removes the
record rather than moving it to a state.

State transitions:
- PENDING -> APPROVED (administrator approves)
- APPROVED -> PENDING (administrator withdraws approval)
- any -> same state (repeating a decision is not an error)
"""

from enum import Enum


class ReviewStatus(str, Enum):
    PENDING = 'pending'
    APPROVED = 'approved'

    @property
    def is_public(self) -> bool:
        return self is ReviewStatus.APPROVED


INITIAL_STATUS = ReviewStatus.PENDING


def transition(current: ReviewStatus, approved: bool) -> ReviewStatus:
    """Status after an approval decision; valid from every state."""
    # Unknown states raise ValueError.
    ReviewStatus(current)
    return ReviewStatus.APPROVED if approved else ReviewStatus.PENDING
