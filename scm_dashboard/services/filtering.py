"""
Pure filter predicates for the inventory, order and supplier lists.

Each function returns the records matching every active criterion, in their
original order. Free text is a case-insensitive substring match over a fixed
set of fields per entity; categorical filters are exact matches unless set
to "all".
"""
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from scm_dashboard.models.supplier import SupplierActivity, performance_bucket
from scm_dashboard.schemas import (
    ALL, InventoryFilters, InventoryItem, Order, OrderFilters, Supplier, SupplierFilters,
)

RecordType = TypeVar("RecordType")


def matches_search(query: str, values: Iterable[Optional[str]]) -> bool:
    if not query:
        return True
    needle = query.lower()
    # an absent field never matches
    return any(value is not None and needle in value.lower() for value in values)


def matches_choice(selected: str, value) -> bool:
    return selected == ALL or value == selected


def apply_filters(
    records: Sequence[RecordType],
    predicate: Callable[[RecordType], bool],
) -> List[RecordType]:
    return [record for record in records if predicate(record)]

# ==========================================
# PER-ENTITY PREDICATES
# ==========================================

def inventory_search_fields(item: InventoryItem):
    return (item.product.sku, item.product.name, item.lot_number)


def order_search_fields(order: Order):
    return (order.order_number, order.supplier.name)


def supplier_search_fields(supplier: Supplier):
    return (supplier.company_name, supplier.contact_name, supplier.email)


def inventory_matches(item: InventoryItem, criteria: InventoryFilters) -> bool:
    return (
        matches_search(criteria.search_query, inventory_search_fields(item))
        and matches_choice(criteria.status_filter, item.status.value)
        and matches_choice(criteria.warehouse_filter, item.warehouse.id)
    )


def order_matches(order: Order, criteria: OrderFilters) -> bool:
    return (
        matches_search(criteria.search_query, order_search_fields(order))
        and matches_choice(criteria.status_filter, order.status.value)
        and matches_choice(criteria.supplier_filter, order.supplier.id)
    )


def supplier_activity(supplier: Supplier) -> str:
    return (SupplierActivity.ACTIVE if supplier.is_active else SupplierActivity.INACTIVE).value


def supplier_matches(supplier: Supplier, criteria: SupplierFilters) -> bool:
    return (
        matches_search(criteria.search_query, supplier_search_fields(supplier))
        and matches_choice(criteria.status_filter, supplier_activity(supplier))
        and matches_choice(criteria.location_filter, supplier.state)
        and matches_choice(criteria.performance_filter, performance_bucket(supplier.performance_rating).value)
    )


def filter_inventory(items: Sequence[InventoryItem], criteria: InventoryFilters) -> List[InventoryItem]:
    return apply_filters(items, lambda item: inventory_matches(item, criteria))


def filter_orders(orders: Sequence[Order], criteria: OrderFilters) -> List[Order]:
    return apply_filters(orders, lambda order: order_matches(order, criteria))


def filter_suppliers(suppliers: Sequence[Supplier], criteria: SupplierFilters) -> List[Supplier]:
    return apply_filters(suppliers, lambda supplier: supplier_matches(supplier, criteria))
