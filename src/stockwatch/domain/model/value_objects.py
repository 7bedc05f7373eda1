"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockwatch.domain.exceptions import ValidationError


def _require_int(value: object, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{label} must be an integer, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class Quantity:
    """A positive number of units moved by a shipment or an order.

    Zero and negative amounts are rejected: receiving or fulfilling
    nothing is always a caller mistake.
    """

    value: int

    def __post_init__(self) -> None:
        _require_int(self.value, "Quantity")
        if self.value <= 0:
            raise ValidationError(f"Quantity must be positive, got {self.value}")


@dataclass(frozen=True)
class StockLevel:
    """A non-negative on-hand count (or threshold)."""

    value: int

    def __post_init__(self) -> None:
        _require_int(self.value, "Stock level")
        if self.value < 0:
            raise ValidationError(f"Stock level cannot be negative, got {self.value}")
