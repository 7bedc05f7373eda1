"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from stockwatch.application.dto import StockLineDTO
from stockwatch.domain.model.warehouse import Warehouse


class ShowStockHandler:

    def __init__(self, warehouse: Warehouse) -> None:
        self._warehouse = warehouse

    def handle(self) -> list[StockLineDTO]:
        return [
            StockLineDTO(
                product_id=snap.id,
                name=snap.name,
                quantity=snap.quantity,
                reorder_threshold=snap.reorder_threshold,
                low_stock=snap.is_low_stock,
            )
            for snap in self._warehouse.products()
        ]
