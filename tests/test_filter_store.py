import pytest

from scm_dashboard.schemas import ALL, InventoryFilters, SupplierFilters
from scm_dashboard.services.filter_store import FilterStore


class TestFilterStore:

    def test_defaults(self):
        store = FilterStore(InventoryFilters)
        assert store.filters == InventoryFilters(search_query="", status_filter=ALL, warehouse_filter=ALL)

    def test_partial_update_merges(self):
        store = FilterStore(InventoryFilters)
        store.set_filters(search_query="sensor")
        store.set_filters(status_filter="RESERVED")
        assert store.search_query == "sensor"
        assert store.status_filter == "RESERVED"
        assert store.warehouse_filter == ALL

    def test_unknown_field_rejected(self):
        store = FilterStore(SupplierFilters)
        with pytest.raises(ValueError):
            store.set_filters(warehouse_filter="wh1")
        assert store.filters == SupplierFilters()

    def test_values_are_not_validated(self):
        store = FilterStore(InventoryFilters)
        store.set_filters(status_filter="NOT_A_STATUS")
        assert store.status_filter == "NOT_A_STATUS"

    def test_reset(self):
        store = FilterStore(SupplierFilters)
        store.set_filters(search_query="tech", performance_filter="high")
        store.reset()
        assert store.filters == SupplierFilters()

    def test_stores_are_independent(self):
        first = FilterStore(InventoryFilters)
        second = FilterStore(InventoryFilters)
        first.set_filters(search_query="x")
        assert second.search_query == ""

    def test_unknown_attribute(self):
        store = FilterStore(InventoryFilters)
        with pytest.raises(AttributeError):
            store.supplier_filter
