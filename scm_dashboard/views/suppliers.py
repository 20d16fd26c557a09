from typing import Any, Dict, List

from scm_dashboard.schemas import Supplier, SupplierCreate, SupplierFilters, SupplierUpdate
from scm_dashboard.services import display
from scm_dashboard.services.filtering import filter_suppliers
from scm_dashboard.views.base import CreateView, DetailView, ListView

SUPPLIER_FIELDS = (
    "company_name", "contact_name", "email", "phone", "address", "city",
    "state", "country", "postal_code",
)


class SupplierListView(ListView[Supplier, SupplierFilters]):
    module = "suppliers"
    criteria_model = SupplierFilters

    def apply_filters(self, records, criteria):
        return filter_suppliers(records, criteria)

    @property
    def location_options(self) -> List[str]:
        states: List[str] = []
        for supplier in self.records:
            if supplier.state not in states:
                states.append(supplier.state)
        return states

    def status_badge(self, supplier: Supplier) -> display.Badge:
        return display.activity_badge(supplier.is_active)

    def performance_badge(self, supplier: Supplier) -> display.Badge:
        return display.performance_badge(supplier.performance_rating)


class SupplierDetailView(DetailView[Supplier]):
    module = "suppliers"
    update_schema = SupplierUpdate
    success_message = "Supplier updated successfully"
    error_message = "Failed to update supplier. Please try again."

    def form_values(self, record: Supplier) -> Dict[str, Any]:
        values = {name: getattr(record, name) for name in SUPPLIER_FIELDS}
        values.update(
            tax_id=record.tax_id or "",
            payment_terms=record.payment_terms or "",
            lead_time=record.lead_time,
            performance_rating=record.performance_rating,
            is_active=record.is_active,
            notes=record.notes or "",
        )
        return values

    @property
    def badges(self) -> List[display.Badge]:
        if self.record is None:
            return []
        return [
            display.activity_badge(self.record.is_active),
            display.performance_badge(self.record.performance_rating),
        ]


class NewSupplierView(CreateView):
    module = "suppliers"
    create_schema = SupplierCreate
    success_message = "Supplier created successfully"
    error_message = "Failed to create supplier. Please try again."

    def defaults(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {name: "" for name in SUPPLIER_FIELDS}
        values.update(tax_id="", payment_terms="", lead_time=0, notes="")
        return values
