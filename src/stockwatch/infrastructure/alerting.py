"""Console alerting — the StockObserver wired in by the CLI."""

from __future__ import annotations

from typing import Callable

import click
import structlog

from stockwatch.domain.model.product import ProductSnapshot

logger = structlog.get_logger(__name__)


def format_alert(product: ProductSnapshot) -> str:
    return f"Low stock for {product.name} – only {product.quantity} left!"


class AlertService:
    """Reports every low-stock notification it receives.

    Each alert is logged, handed to *emit* as a one-line message and
    kept in ``alerts`` so callers can inspect what fired.
    """

    def __init__(self, emit: Callable[[str], None] = click.echo) -> None:
        self._emit = emit
        self.alerts: list[ProductSnapshot] = []

    def on_low_stock(self, product: ProductSnapshot) -> None:
        logger.warning(
            "Low stock alert",
            product_id=product.id,
            product_name=product.name,
            quantity=product.quantity,
            reorder_threshold=product.reorder_threshold,
        )
        self.alerts.append(product)
        self._emit(format_alert(product))
