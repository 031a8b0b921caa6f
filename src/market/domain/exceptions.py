"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidArgument(ValidationError):
    """Malformed or missing input (blank title, non-positive price, ...)."""


class InvalidQuantity(ValidationError):
    """An amount does not fit the product's unit semantics."""


class InsufficientStock(ValidationError):
    """The requested amount exceeds the live available stock."""


class DuplicateProduct(ValidationError):
    """The very same product object is already in the catalog."""


class EmptyCart(ValidationError):
    """Checkout was attempted on a cart with no entries."""


class EmptyOrder(ValidationError):
    """An order cannot be built from an empty product mapping."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFound(EntityNotFoundError):
    """The product is not a member of the catalog."""
