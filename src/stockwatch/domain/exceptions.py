"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so callers (the application handler, the CLI) can catch them uniformly and
report them without aborting.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """No product is registered under the given ID."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found with ID: {product_id}")
        self.product_id = product_id


class InsufficientStockError(DomainException):
    """A fulfillment asked for more units than are on hand."""

    def __init__(self, product_id: str, name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {name} "
            f"(need {requested}, have {available} on hand)"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available
