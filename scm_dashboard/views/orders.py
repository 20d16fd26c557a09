import random
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence

from scm_dashboard.core.config import settings
from scm_dashboard.models.order import OrderStatus
from scm_dashboard.schemas import Order, OrderCreate, OrderFilters, OrderUpdate, SupplierRef
from scm_dashboard.services import alerts, display
from scm_dashboard.services.filtering import filter_orders
from scm_dashboard.views.base import CreateView, DetailView, ListView


def generate_order_number(today: Optional[date] = None) -> str:
    """ORD-<year>-<nnn>"""
    year = (today or date.today()).year
    return f"ORD-{year}-{random.randint(0, 999):03d}"


def blank_line() -> Dict[str, Any]:
    return {"product_id": "", "quantity": 1, "unit_price": 0}


class OrderListView(ListView[Order, OrderFilters]):
    module = "orders"
    criteria_model = OrderFilters

    def apply_filters(self, records, criteria):
        return filter_orders(records, criteria)

    @property
    def supplier_options(self) -> List[SupplierRef]:
        seen: Dict[str, SupplierRef] = {}
        for order in self.records:
            seen.setdefault(order.supplier.id, order.supplier)
        return list(seen.values())

    def alerts(self, today: Optional[date] = None) -> alerts.OrderAlerts:
        return alerts.order_alerts(self.records, today=today)

    @property
    def map_points(self):
        return alerts.order_map_points(self.visible)

    def status_badge(self, order: Order) -> display.Badge:
        return display.order_status_badge(order.status)

    def total_label(self, order: Order) -> str:
        return display.format_currency(order.total_amount)

    def date_label(self, order: Order) -> str:
        return display.format_short_date(order.order_date)


class OrderDetailView(DetailView[Order]):
    module = "orders"
    update_schema = OrderUpdate
    success_message = "Order updated successfully"
    error_message = "Failed to update order. Please try again."

    def form_values(self, record: Order) -> Dict[str, Any]:
        return {
            "order_number": record.order_number,
            "supplier_id": record.supplier.id,
            "status": record.status.value,
            "order_date": record.order_date.isoformat(),
            "expected_delivery_date": record.expected_delivery_date.isoformat(),
            "notes": record.notes or "",
        }

    @property
    def status_badge(self) -> Optional[display.Badge]:
        return display.order_status_badge(self.record.status) if self.record else None

    @property
    def total_label(self) -> str:
        return display.format_currency(self.record.total_amount if self.record else 0)

    @property
    def delivery_label(self) -> str:
        return display.format_date(self.record.expected_delivery_date if self.record else None)


class NewOrderView(CreateView):
    module = "orders"
    create_schema = OrderCreate
    success_message = "Order created successfully"
    error_message = "Failed to create order. Please try again."
    option_modules: Sequence[str] = ("products", "suppliers")
    status_options = display.status_options(OrderStatus)

    def defaults(self) -> Dict[str, Any]:
        today = date.today()
        return {
            "order_number": generate_order_number(today),
            "supplier_id": "",
            "status": OrderStatus.PENDING.value,
            "order_date": today.isoformat(),
            "expected_delivery_date": (today + timedelta(days=settings.DEFAULT_DELIVERY_DAYS)).isoformat(),
            "notes": "",
            "items": [blank_line()],
        }

    @property
    def lines(self) -> List[Dict[str, Any]]:
        return self.form.values.get("items", [])

    def add_line(self):
        self.form.set_value("items", self.lines + [blank_line()])

    def remove_line(self, index: int):
        lines = list(self.lines)
        del lines[index]
        self.form.set_value("items", lines)

    def update_line(self, index: int, **values: Any):
        lines = [dict(line) for line in self.lines]
        lines[index].update(values)
        self.form.set_value("items", lines)

    def select_product(self, index: int, product_id: str):
        """Picking a product also copies its list price into the line"""
        product = next((p for p in self.options("products") if p.id == product_id), None)
        if product is None:
            self.update_line(index, product_id=product_id)
            return
        self.update_line(index, product_id=product_id, unit_price=product.price)

    def line_total(self, index: int) -> float:
        line = self.lines[index]
        return (line.get("quantity") or 0) * (line.get("unit_price") or 0)

    @property
    def total_amount(self) -> float:
        return sum(self.line_total(i) for i in range(len(self.lines)))

    @property
    def total_label(self) -> str:
        return display.format_currency(self.total_amount)
