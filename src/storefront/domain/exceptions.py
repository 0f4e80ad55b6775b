"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InsufficientStockError(ValidationError):
    """A product does not have enough stock for the requested quantity."""


class InvalidStateTransitionError(ValidationError):
    """An order was asked to move to a status it cannot reach."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthenticationError(DomainException):
    """Credentials or a session token could not be verified."""


class AuthorizationError(DomainException):
    """The current user is not allowed to perform the action."""
