"""Notification contract for low-stock alerts.

Any object with an ``on_low_stock`` method can be registered with a
Warehouse; no base class is required.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from stockwatch.domain.model.product import ProductSnapshot


@runtime_checkable
class StockObserver(Protocol):

    def on_low_stock(self, product: ProductSnapshot) -> None:
        """Called synchronously after a fulfillment leaves *product* below
        its reorder threshold.

        May be called many times for the same product. Must return
        promptly: the fulfilling call waits for every observer.
        """
