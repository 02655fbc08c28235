"""
Domain Errors

The error taxonomy shared by the booking and moderation workflows.
Views translate these into HTTP responses; administrator credential
failures are handled by the REST framework authentication layer.
"""


class DomainError(Exception):
    """Base class for errors raised by domain services."""

    code = 'error'


class InvalidInputError(DomainError):
    """A required field is missing or malformed."""

    code = 'invalid_input'

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field

    def as_dict(self) -> dict:
        if self.field:
            return {self.field: [str(self)]}
        return {'non_field_errors': [str(self)]}


class SlotConflictError(DomainError):
    """Raised when the requested slot is already reserved."""

    code = 'slot_conflict'


class NotFoundError(DomainError):
    """A privileged operation referenced a record that does not exist."""

    code = 'not_found'
