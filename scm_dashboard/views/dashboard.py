"""
Overview page: headline counts, chart series, alerts and the latest orders,
all derived from the three module collections.
"""
import asyncio
import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

from scm_dashboard.core.routing import DASHBOARD_PATH, INVENTORY, ORDERS, SUPPLIERS, detail_path
from scm_dashboard.schemas import InventoryItem, Order, Supplier
from scm_dashboard.services import alerts, display
from scm_dashboard.services.collection_query import CollectionQuery, QueryStatus
from scm_dashboard.views.base import DashboardContext

logger = logging.getLogger(__name__)


@dataclass
class DashboardStats:
    total_orders: int
    inventory_items: int
    active_shipments: int
    suppliers: int


class DashboardView:
    path = DASHBOARD_PATH
    modules = (ORDERS, INVENTORY, SUPPLIERS)

    def __init__(self, ctx: DashboardContext, recent_limit: int = 5):
        self.ctx = ctx
        self.recent_limit = recent_limit
        self.queries: Dict[str, CollectionQuery] = {}

    async def mount(self) -> DashboardStats:
        self.queries = {module: self.ctx.query_client.collection(module) for module in self.modules}
        await asyncio.gather(*(query.fetch() for query in self.queries.values()))
        return self.stats

    def unmount(self):
        for query in self.queries.values():
            query.dispose()

    def _records(self, module: str) -> list:
        query = self.queries.get(module)
        if query is None or query.data is None:
            return []
        return list(query.data)

    @property
    def orders(self) -> List[Order]:
        return self._records(ORDERS)

    @property
    def inventory(self) -> List[InventoryItem]:
        return self._records(INVENTORY)

    @property
    def suppliers(self) -> List[Supplier]:
        return self._records(SUPPLIERS)

    @property
    def status(self) -> QueryStatus:
        """Loading until every section has answered; error if any section failed"""
        if not self.queries or any(q.is_loading for q in self.queries.values()):
            return QueryStatus.LOADING
        if any(q.status is QueryStatus.ERROR for q in self.queries.values()):
            return QueryStatus.ERROR
        return QueryStatus.SUCCESS

    @property
    def stats(self) -> DashboardStats:
        return DashboardStats(
            total_orders=len(self.orders),
            inventory_items=len(self.inventory),
            active_shipments=len(alerts.active_shipments(self.orders)),
            suppliers=len(self.suppliers),
        )

    # charts
    @property
    def order_trends(self) -> List[Dict[str, object]]:
        return alerts.order_totals_by_month(self.orders)

    @property
    def inventory_distribution(self) -> List[Dict[str, object]]:
        return alerts.category_distribution(self.inventory)

    @property
    def inventory_value_label(self) -> str:
        return display.format_currency(alerts.inventory_value(self.inventory))

    @property
    def order_map_points(self) -> List[Dict[str, object]]:
        return alerts.order_map_points(self.orders)

    # alerts
    def inventory_alerts(self, today: Optional[date] = None) -> alerts.InventoryAlerts:
        return alerts.inventory_alerts(self.inventory, today=today)

    def order_alerts(self, today: Optional[date] = None) -> alerts.OrderAlerts:
        return alerts.order_alerts(self.orders, today=today)

    @property
    def recent_orders(self) -> List[Dict[str, object]]:
        """Rows of the recent orders table"""
        return [
            {
                "order_number": order.order_number,
                "supplier": order.supplier.name,
                "quantity": sum(item.quantity for item in order.items),
                "status": display.order_status_badge(order.status),
                "date": display.format_short_date(order.order_date),
                "total": display.format_currency(order.total_amount),
                "link": detail_path(ORDERS, order.id),
            }
            for order in alerts.recent_orders(self.orders, self.recent_limit)
        ]
