"""Warehouse aggregate — the single source of truth for stock levels.

The Warehouse owns every Product registered with it and is the only
component that changes a product's quantity. After each successful
fulfillment it checks the product against its reorder threshold and,
when the product is below it, notifies every registered observer in
registration order before returning.

Observers are held by weak reference where the object allows one: the
Warehouse never keeps such an observer alive on its own, and one that
has been garbage collected is skipped and forgotten. Objects that cannot
be weakly referenced (e.g. slotted classes without ``__weakref__``) are
held strongly instead.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass

import structlog

from stockwatch.domain.exceptions import InsufficientStockError, ProductNotFoundError
from stockwatch.domain.model.product import Product, ProductSnapshot
from stockwatch.domain.model.value_objects import Quantity
from stockwatch.domain.observer import StockObserver

logger = structlog.get_logger(__name__)


class _StrongRef:
    """Same call shape as ``weakref.ref`` for observers that refuse weak refs."""

    def __init__(self, observer: StockObserver) -> None:
        self._observer = observer

    def __call__(self) -> StockObserver:
        return self._observer


@dataclass(frozen=True)
class ShipmentReceipt:
    """Outcome of a successful ``receive_shipment``."""

    product_id: str
    received: int
    new_quantity: int


@dataclass(frozen=True)
class FulfillmentResult:
    """Outcome of a successful ``fulfill_order``.

    ``low_stock_notified`` is True when the remaining quantity is below the
    reorder threshold and a notification round ran, even if no live
    observer was registered to receive it.
    """

    product_id: str
    fulfilled: int
    new_quantity: int
    low_stock_notified: bool


class Warehouse:

    def __init__(self) -> None:
        self._inventory: dict[str, Product] = {}
        self._observers: list[weakref.ref[StockObserver] | _StrongRef] = []

    # --- Registration ---------------------------------------------------------

    def add_observer(self, observer: StockObserver) -> None:
        """Register *observer* for low-stock notifications.

        No duplicate detection: registering the same observer twice
        means it is called twice per notification round. Never raises:
        an observer that cannot be weakly referenced is kept alive by the
        Warehouse instead.
        """
        try:
            ref = weakref.ref(observer)
        except TypeError:
            ref = _StrongRef(observer)
        self._observers.append(ref)

    def add_product(self, product: Product) -> None:
        """Register *product* under its ID.

        An existing product with the same ID is replaced (last write wins).
        """
        previous = self._inventory.get(product.id)
        if previous is not None:
            logger.warning(
                "Replacing existing product",
                product_id=product.id,
                previous_quantity=previous.quantity,
                new_quantity=product.quantity,
            )
        self._inventory[product.id] = product

    # --- Stock movements ------------------------------------------------------

    def receive_shipment(self, product_id: str, quantity: int) -> ShipmentReceipt:
        """Add *quantity* units of an inbound shipment to a product.

        Receiving never checks the reorder threshold.

        Raises:
            ValidationError: *quantity* is not a positive integer.
            ProductNotFoundError: no product is registered as *product_id*.
        """
        amount = Quantity(quantity).value
        product = self._require(product_id, operation="receive")

        product.set_quantity(product.quantity + amount)
        logger.info(
            "Received shipment",
            product_id=product.id,
            product_name=product.name,
            received=amount,
            quantity=product.quantity,
        )
        return ShipmentReceipt(
            product_id=product.id,
            received=amount,
            new_quantity=product.quantity,
        )

    def fulfill_order(self, product_id: str, quantity: int) -> FulfillmentResult:
        """Deduct *quantity* units from a product for an outbound order.

        All-or-nothing: when stock is short nothing is deducted and no
        observer is called. When the remaining quantity is below the
        reorder threshold every observer is notified, on every such
        fulfillment, not only the first one to cross it.

        Raises:
            ValidationError: *quantity* is not a positive integer.
            ProductNotFoundError: no product is registered as *product_id*.
            InsufficientStockError: fewer than *quantity* units on hand.
        """
        amount = Quantity(quantity).value
        product = self._require(product_id, operation="fulfill")

        if amount > product.quantity:
            logger.info(
                "Rejected fulfillment: insufficient stock",
                product_id=product.id,
                requested=amount,
                available=product.quantity,
            )
            raise InsufficientStockError(
                product_id=product.id,
                name=product.name,
                requested=amount,
                available=product.quantity,
            )

        product.set_quantity(product.quantity - amount)
        logger.info(
            "Fulfilled order",
            product_id=product.id,
            product_name=product.name,
            fulfilled=amount,
            quantity=product.quantity,
        )

        notified = self._check_low_stock(product)
        return FulfillmentResult(
            product_id=product.id,
            fulfilled=amount,
            new_quantity=product.quantity,
            low_stock_notified=notified,
        )

    # --- Queries --------------------------------------------------------------

    def get_product(self, product_id: str) -> ProductSnapshot:
        """Return a read-only view of one product."""
        product = self._inventory.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product.snapshot()

    def products(self) -> list[ProductSnapshot]:
        """Return a snapshot of every product, ordered by ID."""
        return [
            self._inventory[pid].snapshot() for pid in sorted(self._inventory)
        ]

    def low_stock_products(self) -> list[ProductSnapshot]:
        return [snap for snap in self.products() if snap.is_low_stock]

    # --- Internal helpers -----------------------------------------------------

    def _require(self, product_id: str, operation: str) -> Product:
        product = self._inventory.get(product_id)
        if product is None:
            logger.info(
                "Rejected operation: unknown product",
                operation=operation,
                product_id=product_id,
            )
            raise ProductNotFoundError(product_id)
        return product

    def _check_low_stock(self, product: Product) -> bool:
        if not product.is_low_stock:
            return False
        self._notify_observers(product.snapshot())
        return True

    def _notify_observers(self, snapshot: ProductSnapshot) -> None:
        logger.warning(
            "Product below reorder threshold",
            product_id=snapshot.id,
            quantity=snapshot.quantity,
            reorder_threshold=snapshot.reorder_threshold,
        )
        for ref in list(self._observers):
            observer = ref()
            if observer is not None:
                observer.on_low_stock(snapshot)
        # Forget observers that have been garbage collected.
        self._observers = [ref for ref in self._observers if ref() is not None]
