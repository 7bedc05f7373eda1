"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

RECEIVE = "receive"
FULFILL = "fulfill"
OPERATION_KINDS = (RECEIVE, FULFILL)


@dataclass(frozen=True)
class StockOperationSpec:
    """Input: one stock movement to apply (e.g. fulfill 6 of P001)."""

    kind: str
    product_id: str
    quantity: int


@dataclass(frozen=True)
class StockOperationOutcome:
    """Output: what happened when a single operation was applied."""

    kind: str
    product_id: str
    quantity: int
    ok: bool
    product_name: str | None = None
    new_quantity: int | None = None
    low_stock_notified: bool = False
    error: str | None = None


@dataclass(frozen=True)
class StockLineDTO:
    """Output: a single product row of the stock report."""

    product_id: str
    name: str
    quantity: int
    reorder_threshold: int
    low_stock: bool
