"""CLI commands for driving a Warehouse within a single process."""

from __future__ import annotations

import click

from stockwatch.application.dto import (
    OPERATION_KINDS,
    RECEIVE,
    StockOperationOutcome,
    StockOperationSpec,
)
from stockwatch.application.run_stock_operations import RunStockOperationsHandler
from stockwatch.application.show_stock import ShowStockHandler
from stockwatch.domain.exceptions import DomainException
from stockwatch.domain.model.product import Product
from stockwatch.domain.model.warehouse import Warehouse
from stockwatch.infrastructure.alerting import AlertService
from stockwatch.infrastructure.bootstrap import (
    DEMO_OPERATIONS,
    build_warehouse,
    demo_product,
)


def _parse_int(raw: str, label: str, source: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid {label} '{raw}' in '{source}'.")


def _parse_product(raw: str) -> Product:
    """Parse 'P001:Laptop:0:5' into a Product."""
    if raw.count(":") < 3:
        raise click.BadParameter(
            f"Invalid product '{raw}'. Expected 'ID:Name:Quantity:Threshold'."
        )
    product_id, rest = raw.split(":", 1)
    name, qty_str, threshold_str = rest.rsplit(":", 2)
    try:
        return Product(
            id=product_id.strip(),
            name=name.strip(),
            quantity=_parse_int(qty_str, "quantity", raw),
            reorder_threshold=_parse_int(threshold_str, "threshold", raw),
        )
    except DomainException as exc:
        raise click.BadParameter(str(exc))


def _parse_operation(raw: str) -> StockOperationSpec:
    """Parse 'fulfill:P001:6' into a StockOperationSpec."""
    parts = raw.split(":")
    if len(parts) != 3:
        raise click.BadParameter(
            f"Invalid operation '{raw}'. Expected 'Kind:ProductID:Quantity'."
        )
    kind, product_id, qty_str = (part.strip() for part in parts)
    if kind.lower() not in OPERATION_KINDS:
        raise click.BadParameter(
            f"Unknown operation kind '{kind}'. Expected one of: "
            f"{', '.join(OPERATION_KINDS)}."
        )
    return StockOperationSpec(
        kind=kind.lower(),
        product_id=product_id,
        quantity=_parse_int(qty_str, "quantity", raw),
    )


def _describe(outcome: StockOperationOutcome) -> str:
    if not outcome.ok:
        return f"Rejected {outcome.kind} of {outcome.quantity} for {outcome.product_id}: {outcome.error}"
    if outcome.kind == RECEIVE:
        return (
            f"Received shipment of {outcome.quantity} units for {outcome.product_name} "
            f"(now {outcome.new_quantity})"
        )
    return (
        f"Fulfilled order of {outcome.quantity} units for {outcome.product_name} "
        f"(now {outcome.new_quantity})"
    )


def _run(warehouse: Warehouse, specs: list[StockOperationSpec]) -> bool:
    """Apply *specs*, echo one line per outcome, return True if all succeeded."""
    outcomes = RunStockOperationsHandler(warehouse).handle(specs)
    for outcome in outcomes:
        click.echo(_describe(outcome))
    return all(outcome.ok for outcome in outcomes)


def _display_stock(warehouse: Warehouse) -> None:
    lines = ShowStockHandler(warehouse).handle()

    if not lines:
        click.echo("No products registered.")
        return

    click.echo()
    click.echo(f"{'ID':<8} {'Product':<20} {'Qty':>6} {'Reorder':>8}  Status")
    click.echo("-" * 52)
    for line in lines:
        status = "LOW" if line.low_stock else "ok"
        click.echo(
            f"{line.product_id:<8} {line.name:<20} {line.quantity:>6} "
            f"{line.reorder_threshold:>8}  {status}"
        )


@click.command("demo")
def stock_demo() -> None:
    """Run the reference scenario: receive 10 laptops, ship 6."""
    alert_service = AlertService()
    warehouse = build_warehouse(alert_service)
    warehouse.add_product(demo_product())

    _run(warehouse, list(DEMO_OPERATIONS))


@click.command("run")
@click.option(
    "--product", "products", multiple=True, required=True,
    help="Product to seed as 'ID:Name:Quantity:Threshold'. Repeatable.",
)
@click.option(
    "--op", "operations", multiple=True,
    help="Operation as 'receive:ID:Qty' or 'fulfill:ID:Qty'. Repeatable, applied in order.",
)
@click.option("--show/--no-show", default=True, help="Print the stock table at the end.")
@click.pass_context
def stock_run(
    ctx: click.Context,
    products: tuple[str, ...],
    operations: tuple[str, ...],
    show: bool,
) -> None:
    """Seed products, apply stock operations and report low-stock alerts.

    Exits with status 1 if any operation was rejected.
    """
    seeded = [_parse_product(raw) for raw in products]
    specs = [_parse_operation(raw) for raw in operations]

    alert_service = AlertService()
    warehouse = build_warehouse(alert_service)
    for product in seeded:
        warehouse.add_product(product)

    all_ok = _run(warehouse, specs)

    if show:
        _display_stock(warehouse)

    if not all_ok:
        ctx.exit(1)
