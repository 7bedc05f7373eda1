"""Product aggregate.

A Product is an inventory record: identity, display name, on-hand
quantity and reorder threshold. Only the quantity ever changes, and
only the Warehouse that holds the product changes it.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockwatch.domain.model.value_objects import StockLevel


@dataclass(frozen=True)
class ProductSnapshot:
    """Read-only view of a Product at one moment.

    This is what observers and reports receive, so nothing outside the
    Warehouse can mutate live inventory.
    """

    id: str
    name: str
    quantity: int
    reorder_threshold: int

    @property
    def is_low_stock(self) -> bool:
        return self.quantity < self.reorder_threshold


class Product:
    """An inventory record held by exactly one Warehouse.

    Invariants:
    - ``quantity`` is never negative
    - ``id``, ``name`` and ``reorder_threshold`` are read-only
    """

    def __init__(self, id: str, name: str, quantity: int, reorder_threshold: int) -> None:
        # Both values go through StockLevel so a bad seed fails loudly.
        StockLevel(quantity)
        StockLevel(reorder_threshold)
        self._id = id
        self._name = name
        self._quantity = quantity
        self._reorder_threshold = reorder_threshold

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def reorder_threshold(self) -> int:
        return self._reorder_threshold

    @property
    def is_low_stock(self) -> bool:
        """True when the on-hand count is strictly below the threshold."""
        return self._quantity < self._reorder_threshold

    def set_quantity(self, new_quantity: int) -> None:
        """Overwrite the on-hand count.

        No validation here: the Warehouse checks availability before it
        calls this, and no other component is supposed to.
        """
        self._quantity = new_quantity

    def snapshot(self) -> ProductSnapshot:
        return ProductSnapshot(
            id=self._id,
            name=self._name,
            quantity=self._quantity,
            reorder_threshold=self._reorder_threshold,
        )

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!r}, name={self._name!r}, "
            f"quantity={self._quantity}, reorder_threshold={self._reorder_threshold})"
        )
