"""List filtering for inventory, orders and suppliers."""
from scm_dashboard.schemas import InventoryFilters, OrderFilters, SupplierFilters
from scm_dashboard.services.filtering import (
    filter_inventory, filter_orders, filter_suppliers, matches_search,
)


def ids(records):
    return [record.id for record in records]


class TestMatchesSearch:

    def test_empty_query_matches_everything(self):
        assert matches_search("", [None])

    def test_case_insensitive_substring(self):
        assert matches_search("SENSOR", ["Industrial Sensor XL-5"])

    def test_absent_field_never_matches(self):
        assert not matches_search("lot", [None])


class TestInventoryFiltering:

    def test_default_criteria_is_identity(self, inventory_items):
        assert filter_inventory(inventory_items, InventoryFilters()) == inventory_items

    def test_status_filter(self, inventory_items):
        item = next(i for i in inventory_items if i.quantity == 150)
        assert item in filter_inventory(inventory_items, InventoryFilters())
        assert item not in filter_inventory(inventory_items, InventoryFilters(status_filter="RESERVED"))
        assert ids(filter_inventory(inventory_items, InventoryFilters(status_filter="RESERVED"))) == ["inv2"]

    def test_search_by_sku_name_and_lot(self, inventory_items):
        assert ids(filter_inventory(inventory_items, InventoryFilters(search_query="sku-003"))) == ["inv3"]
        assert ids(filter_inventory(inventory_items, InventoryFilters(search_query="circuit"))) == ["inv2"]
        assert ids(filter_inventory(inventory_items, InventoryFilters(search_query="LOT-2023"))) == ["inv4"]

    def test_missing_lot_number_is_skipped(self, inventory_items):
        items = [inventory_items[0].model_copy(update={"lot_number": None})]
        assert filter_inventory(items, InventoryFilters(search_query="LOT-2024-001")) == []

    def test_warehouse_filter_keeps_order(self, inventory_items):
        assert ids(filter_inventory(inventory_items, InventoryFilters(warehouse_filter="wh1"))) == ["inv1", "inv3", "inv5"]

    def test_result_is_subset(self, inventory_items):
        criteria = InventoryFilters(search_query="e", warehouse_filter="wh2")
        result = filter_inventory(inventory_items, criteria)
        assert all(item in inventory_items for item in result)
        assert len(result) <= len(inventory_items)

    def test_unknown_status_matches_nothing(self, inventory_items):
        assert filter_inventory(inventory_items, InventoryFilters(status_filter="LOST")) == []


class TestOrderFiltering:

    def test_search_by_supplier_name(self, orders):
        assert ids(filter_orders(orders, OrderFilters(search_query="global"))) == ["ord2", "ord5"]

    def test_search_by_order_number(self, orders):
        assert ids(filter_orders(orders, OrderFilters(search_query="ord-2024-004"))) == ["ord4"]

    def test_status_and_supplier(self, orders):
        criteria = OrderFilters(status_filter="DELIVERED", supplier_filter="sup1")
        assert ids(filter_orders(orders, criteria)) == ["ord4"]


class TestSupplierFiltering:

    def test_performance_buckets(self, suppliers):
        low = filter_suppliers(suppliers, SupplierFilters(performance_filter="low"))
        high = filter_suppliers(suppliers, SupplierFilters(performance_filter="high"))
        medium = filter_suppliers(suppliers, SupplierFilters(performance_filter="medium"))
        assert "sup3" in ids(low)
        assert "sup3" not in ids(high)
        assert ids(high) == ["sup1"]
        assert ids(medium) == ["sup2"]

    def test_activity_filter(self, suppliers):
        assert ids(filter_suppliers(suppliers, SupplierFilters(status_filter="inactive"))) == ["sup3"]
        assert ids(filter_suppliers(suppliers, SupplierFilters(status_filter="active"))) == ["sup1", "sup2"]

    def test_location_filter(self, suppliers):
        assert ids(filter_suppliers(suppliers, SupplierFilters(location_filter="NY"))) == ["sup2"]

    def test_search_by_contact_and_email(self, suppliers):
        assert ids(filter_suppliers(suppliers, SupplierFilters(search_query="michael"))) == ["sup3"]
        assert ids(filter_suppliers(suppliers, SupplierFilters(search_query="@techcomponents"))) == ["sup1"]
