from datetime import date

from scm_dashboard.models.inventory import InventoryStatus
from scm_dashboard.services import alerts
from scm_dashboard.services.display import (
    Badge, activity_badge, format_currency, format_date, format_short_date,
    inventory_status_badge, order_status_badge, performance_badge, status_option_label,
)


class TestAlerts:

    def test_low_stock_threshold_is_exclusive(self, inventory_items):
        ids = [i.id for i in alerts.low_stock_items(inventory_items)]
        assert "inv4" not in ids  # exactly 100
        assert ids == ["inv2", "inv3", "inv5"]

    def test_expiring_includes_already_expired(self, inventory_items):
        ids = [i.id for i in alerts.expiring_items(inventory_items, today=date(2024, 5, 1))]
        assert ids == ["inv4"]

    def test_delayed_orders(self, orders):
        assert alerts.delayed_orders(orders, today=date(2024, 3, 25)) == []
        assert [o.id for o in alerts.delayed_orders(orders, today=date(2024, 3, 26))] == ["ord3"]

    def test_inventory_value(self, inventory_items):
        expected = sum(i.quantity * i.product.price for i in inventory_items)
        assert alerts.inventory_value(inventory_items) == expected

    def test_category_distribution(self, inventory_items):
        assert alerts.category_distribution(inventory_items) == [
            {"name": "Electronics", "value": 375},
            {"name": "Hardware", "value": 25},
        ]

    def test_order_totals_by_month(self, orders):
        assert alerts.order_totals_by_month(orders) == [
            {"month": "2024-03", "total": sum(o.total_amount for o in orders)},
        ]

    def test_map_points(self, orders):
        points = alerts.order_map_points(orders)
        assert len(points) == 5
        assert points[0]["lat"] == 37.7897
        assert points[0]["order_number"] == "ORD-2024-001"


class TestDisplay:

    def test_badges(self):
        assert inventory_status_badge(InventoryStatus.DAMAGED) == Badge("destructive", "Damaged")
        assert inventory_status_badge("IN_TRANSIT").label == "In Transit"
        assert order_status_badge("DELIVERED").variant == "success"
        assert activity_badge(False) == Badge("secondary", "Inactive")
        assert performance_badge(4.8) == Badge("success", "4.8")
        assert performance_badge(3.2).variant == "destructive"

    def test_formatting(self):
        assert status_option_label("IN_TRANSIT") == "IN TRANSIT"
        assert format_currency(22500) == "$22,500.00"
        assert format_date(date(2024, 3, 5)) == "March 5, 2024"
        assert format_short_date(date(2024, 3, 5)) == "Mar 5, 2024"
        assert format_date(None) == "N/A"
