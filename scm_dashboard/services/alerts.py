"""
Alert lists and dashboard figures derived from loaded collections.

The chart and map renderers only receive the plain series produced here.
"""
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from scm_dashboard.core.config import settings
from scm_dashboard.models.order import OrderStatus
from scm_dashboard.schemas import InventoryItem, Order


@dataclass
class InventoryAlerts:
    low_stock: List[InventoryItem]
    expiring: List[InventoryItem]


@dataclass
class OrderAlerts:
    pending: List[Order]
    delayed: List[Order]


def low_stock_items(items: Sequence[InventoryItem], threshold: Optional[int] = None) -> List[InventoryItem]:
    limit = settings.LOW_STOCK_THRESHOLD if threshold is None else threshold
    return [item for item in items if item.quantity < limit]


def expiring_items(
    items: Sequence[InventoryItem],
    within_days: Optional[int] = None,
    today: Optional[date] = None,
) -> List[InventoryItem]:
    """Items whose expiry date falls before today + `within_days` (already expired included)"""
    days = settings.EXPIRY_WARNING_DAYS if within_days is None else within_days
    cutoff = (today or date.today()) + timedelta(days=days)
    return [item for item in items if item.expiry_date is not None and item.expiry_date < cutoff]


def pending_orders(orders: Sequence[Order]) -> List[Order]:
    return [order for order in orders if order.status is OrderStatus.PENDING]


def delayed_orders(orders: Sequence[Order], today: Optional[date] = None) -> List[Order]:
    today = today or date.today()
    return [
        order for order in orders
        if order.status is OrderStatus.IN_TRANSIT and order.expected_delivery_date < today
    ]


def inventory_alerts(items: Sequence[InventoryItem], today: Optional[date] = None) -> InventoryAlerts:
    return InventoryAlerts(low_stock=low_stock_items(items), expiring=expiring_items(items, today=today))


def order_alerts(orders: Sequence[Order], today: Optional[date] = None) -> OrderAlerts:
    return OrderAlerts(pending=pending_orders(orders), delayed=delayed_orders(orders, today=today))

# ==========================================
# DASHBOARD FIGURES
# ==========================================

def inventory_value(items: Sequence[InventoryItem]) -> float:
    return sum(item.quantity * item.product.price for item in items)


def category_distribution(items: Sequence[InventoryItem]) -> List[Dict[str, object]]:
    """Pie chart series: units on hand per product category"""
    totals: "OrderedDict[str, int]" = OrderedDict()
    for item in items:
        totals[item.product.category] = totals.get(item.product.category, 0) + item.quantity
    return [{"name": name, "value": value} for name, value in totals.items()]


def order_totals_by_month(orders: Sequence[Order]) -> List[Dict[str, object]]:
    """Line chart series: order value per month, oldest first"""
    totals: Dict[str, float] = {}
    for order in orders:
        month = order.order_date.strftime("%Y-%m")
        totals[month] = totals.get(month, 0.0) + order.total_amount
    return [{"month": month, "total": totals[month]} for month in sorted(totals)]


def order_map_points(orders: Sequence[Order]) -> List[Dict[str, object]]:
    """Marker list for the order map; suppliers without coordinates are skipped"""
    points = []
    for order in orders:
        supplier = order.supplier
        if supplier.latitude is None or supplier.longitude is None:
            continue
        points.append({
            "order_id": order.id,
            "order_number": order.order_number,
            "status": order.status.value,
            "lat": supplier.latitude,
            "lng": supplier.longitude,
            "label": supplier.address or supplier.name,
        })
    return points


def active_shipments(orders: Sequence[Order]) -> List[Order]:
    return [order for order in orders if order.status is OrderStatus.IN_TRANSIT]


def recent_orders(orders: Sequence[Order], limit: int = 5) -> List[Order]:
    """Newest order dates first; ties keep their original order"""
    return sorted(orders, key=lambda order: order.order_date, reverse=True)[:limit]
