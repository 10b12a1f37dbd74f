"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the request layer and the CLI can catch them uniformly and display
user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller input is malformed or missing.

    ``field`` names the offending input when there is one, so the caller
    can point the customer at it.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidFormat(ValidationError):
    """A value is present but does not have the expected shape."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PostalCodeNotFoundError(EntityNotFoundError):
    """The address directory has no entry for the postal code."""


class OrderNotFoundError(EntityNotFoundError):
    pass


class TransportError(DomainException):
    """The address directory could not be reached or answered garbage.

    Unlike a not-found result this is retryable.
    """


class AddressLookupTimeout(TransportError):
    pass


class CommitError(DomainException):
    """The order could not be persisted; nothing was written."""


class ProductNotFoundError(EntityNotFoundError, CommitError):
    pass


class InsufficientStockError(CommitError):
    pass


class PriceChangedError(CommitError):
    """The cart price no longer matches the catalog price."""


class StatusError(DomainException):
    """Unknown order status or a transition the state machine forbids."""


class AuthorizationError(DomainException):
    """The caller is not allowed to perform an admin operation."""
