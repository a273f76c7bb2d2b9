"""Domain-level exceptions.

Every failure the order core can report is a subclass of DomainException,
so the CLI and HTTP layers can catch them uniformly and map each kind to a
user-facing message or status code.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or a business rule was violated."""


class InvalidStatusError(ValidationError):
    """A requested order status is not one of the known states."""


class NotFoundError(DomainException):
    """A requested entity does not exist (or is not visible to the caller)."""


class OrderNotFoundError(NotFoundError):
    pass


class ProductNotFoundError(NotFoundError):
    pass


class InsufficientStockError(DomainException):
    """Requested quantity exceeds the stock currently available."""

    def __init__(
        self,
        product_id: int,
        product_title: str,
        requested: int,
        available: int,
    ) -> None:
        self.product_id = product_id
        self.product_title = product_title
        self.requested = requested
        self.available = available
        super().__init__(
            f'Insufficient stock for "{product_title}". '
            f"Available: {available}, Requested: {requested}."
        )


class ConflictError(DomainException):
    """The operation conflicts with the current state of the entity."""


class AuthError(DomainException):
    """A credential could not be resolved to an identity."""


class ForbiddenError(DomainException):
    """The identity lacks the role required for the operation."""


class PersistenceError(DomainException):
    """A storage fault aborted a unit of work; nothing was applied."""
