from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from scm_dashboard.models.inventory import InventoryStatus
from scm_dashboard.schemas import (
    InventoryFilters, InventoryItem, InventoryItemCreate, InventoryItemUpdate, Warehouse,
)
from scm_dashboard.services import alerts, display
from scm_dashboard.services.filtering import filter_inventory
from scm_dashboard.views.base import CreateView, DetailView, ListView


class InventoryListView(ListView[InventoryItem, InventoryFilters]):
    module = "inventory"
    criteria_model = InventoryFilters

    def apply_filters(self, records, criteria):
        return filter_inventory(records, criteria)

    @property
    def warehouse_options(self) -> List[Warehouse]:
        """Distinct warehouses present in the loaded items, first-seen order"""
        seen: Dict[str, Warehouse] = {}
        for item in self.records:
            seen.setdefault(item.warehouse.id, item.warehouse)
        return list(seen.values())

    def alerts(self, today: Optional[date] = None) -> alerts.InventoryAlerts:
        return alerts.inventory_alerts(self.records, today=today)

    def status_badge(self, item: InventoryItem) -> display.Badge:
        return display.inventory_status_badge(item.status)


def inventory_form_values(item: InventoryItem) -> Dict[str, Any]:
    return {
        "quantity": item.quantity,
        "location": item.location,
        "status": item.status.value,
        "expiry_date": item.expiry_date.isoformat() if item.expiry_date else "",
        "lot_number": item.lot_number or "",
    }


class InventoryDetailView(DetailView[InventoryItem]):
    module = "inventory"
    update_schema = InventoryItemUpdate
    success_message = "Inventory item updated successfully"
    error_message = "Failed to update inventory item. Please try again."

    def form_values(self, record: InventoryItem) -> Dict[str, Any]:
        return inventory_form_values(record)

    @property
    def status_badge(self) -> Optional[display.Badge]:
        if self.record is None:
            return None
        return display.inventory_status_badge(self.record.status)

    @property
    def expiry_label(self) -> str:
        return display.format_date(self.record.expiry_date if self.record else None)


class NewInventoryView(CreateView):
    module = "inventory"
    create_schema = InventoryItemCreate
    success_message = "Inventory item created successfully"
    error_message = "Failed to create inventory item. Please try again."
    option_modules: Sequence[str] = ("products", "warehouses")
    status_options = display.status_options(InventoryStatus)

    def defaults(self) -> Dict[str, Any]:
        return {
            "product_id": "",
            "warehouse_id": "",
            "quantity": 0,
            "location": "",
            "status": InventoryStatus.AVAILABLE.value,
            "expiry_date": "",
            "lot_number": "",
        }
