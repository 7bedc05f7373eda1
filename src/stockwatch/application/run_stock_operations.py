"""Application service: Run Stock Operations use case.

Applies a batch of receive / fulfill operations to a Warehouse in
order. A rejected operation does not stop the batch: its error is
recorded in that operation's outcome and the next one runs against
the unchanged state.
"""

from __future__ import annotations

from stockwatch.application.dto import (
    FULFILL,
    RECEIVE,
    StockOperationOutcome,
    StockOperationSpec,
)
from stockwatch.domain.exceptions import DomainException, ValidationError
from stockwatch.domain.model.warehouse import Warehouse


class RunStockOperationsHandler:

    def __init__(self, warehouse: Warehouse) -> None:
        self._warehouse = warehouse

    def handle(self, specs: list[StockOperationSpec]) -> list[StockOperationOutcome]:
        return [self._apply(spec) for spec in specs]

    def _apply(self, spec: StockOperationSpec) -> StockOperationOutcome:
        try:
            if spec.kind == RECEIVE:
                receipt = self._warehouse.receive_shipment(spec.product_id, spec.quantity)
                return StockOperationOutcome(
                    kind=spec.kind,
                    product_id=spec.product_id,
                    quantity=spec.quantity,
                    ok=True,
                    product_name=self._product_name(spec.product_id),
                    new_quantity=receipt.new_quantity,
                )
            if spec.kind == FULFILL:
                result = self._warehouse.fulfill_order(spec.product_id, spec.quantity)
                return StockOperationOutcome(
                    kind=spec.kind,
                    product_id=spec.product_id,
                    quantity=spec.quantity,
                    ok=True,
                    product_name=self._product_name(spec.product_id),
                    new_quantity=result.new_quantity,
                    low_stock_notified=result.low_stock_notified,
                )
            raise ValidationError(f"Unknown operation '{spec.kind}'")
        except DomainException as exc:
            return StockOperationOutcome(
                kind=spec.kind,
                product_id=spec.product_id,
                quantity=spec.quantity,
                ok=False,
                error=str(exc),
            )

    def _product_name(self, product_id: str) -> str:
        return self._warehouse.get_product(product_id).name
