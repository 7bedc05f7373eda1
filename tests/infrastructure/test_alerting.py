"""Tests for the console alerting observer."""

from structlog.testing import capture_logs

from stockwatch.domain.model.product import Product
from stockwatch.domain.observer import StockObserver
from stockwatch.infrastructure.alerting import AlertService, format_alert
from stockwatch.infrastructure.bootstrap import build_warehouse, demo_product


def test_alert_service_satisfies_observer_protocol():
    assert isinstance(AlertService(emit=lambda _: None), StockObserver)


def test_format_alert():
    snap = Product(id="P001", name="Laptop", quantity=4, reorder_threshold=5).snapshot()
    assert format_alert(snap) == "Low stock for Laptop – only 4 left!"


def test_alert_emitted_and_logged():
    messages = []
    alerts = AlertService(emit=messages.append)
    warehouse = build_warehouse(alerts)
    warehouse.add_product(demo_product())
    warehouse.receive_shipment("P001", 10)

    with capture_logs() as logs:
        warehouse.fulfill_order("P001", 6)

    assert messages == ["Low stock for Laptop – only 4 left!"]
    assert [snap.quantity for snap in alerts.alerts] == [4]
    alert_events = [e for e in logs if e["event"] == "Low stock alert"]
    assert alert_events[0]["product_id"] == "P001"
    assert alert_events[0]["log_level"] == "warning"


def test_build_warehouse_returns_fresh_objects():
    first = build_warehouse()
    second = build_warehouse()
    first.add_product(demo_product())
    assert second.products() == []
    assert demo_product() is not demo_product()
