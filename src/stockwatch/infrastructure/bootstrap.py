"""Composition root — wires concrete observers to a fresh Warehouse.

Everything is built on each call; nothing here is shared between
callers.
"""

from __future__ import annotations

from stockwatch.application.dto import FULFILL, RECEIVE, StockOperationSpec
from stockwatch.domain.model.product import Product
from stockwatch.domain.model.warehouse import Warehouse
from stockwatch.domain.observer import StockObserver

DEMO_OPERATIONS = (
    StockOperationSpec(kind=RECEIVE, product_id="P001", quantity=10),  # total = 10
    StockOperationSpec(kind=FULFILL, product_id="P001", quantity=6),  # 4 left, alert
)


def build_warehouse(*observers: StockObserver) -> Warehouse:
    warehouse = Warehouse()
    for observer in observers:
        warehouse.add_observer(observer)
    return warehouse


def demo_product() -> Product:
    return Product(id="P001", name="Laptop", quantity=0, reorder_threshold=5)
