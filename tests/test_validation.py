"""Form payload validation."""
import math
from datetime import date

from scm_dashboard.schemas import InventoryItemCreate, OrderCreate, OrderItemCreate, SupplierCreate, SupplierUpdate
from scm_dashboard.services.validation import field_path, validate


def inventory_values(**overrides):
    values = {
        "product_id": "prod1",
        "warehouse_id": "wh1",
        "quantity": 10,
        "location": "Aisle 1",
        "status": "AVAILABLE",
        "expiry_date": "",
        "lot_number": "",
    }
    values.update(overrides)
    return values


def supplier_values(**overrides):
    values = {
        "company_name": "Acme Corp",
        "contact_name": "Jane Doe",
        "email": "jane@acme.com",
        "phone": "+1 555 0100",
        "address": "1 Main St",
        "city": "Austin",
        "state": "TX",
        "country": "USA",
        "postal_code": "73301",
        "tax_id": "",
        "payment_terms": "",
        "lead_time": 3,
        "notes": "",
    }
    values.update(overrides)
    return values


def order_values(**overrides):
    values = {
        "order_number": "ORD-2024-100",
        "supplier_id": "sup1",
        "status": "PENDING",
        "order_date": "2024-03-01",
        "expected_delivery_date": "2024-03-15",
        "notes": "",
        "items": [{"product_id": "prod1", "quantity": 2, "unit_price": 10.5}],
    }
    values.update(overrides)
    return values


class TestInventoryValidation:

    def test_valid_payload(self):
        result = validate(InventoryItemCreate, inventory_values())
        assert result.is_valid
        assert result.data.expiry_date is None
        assert result.data.lot_number is None

    def test_negative_quantity_rejected(self):
        result = validate(InventoryItemCreate, inventory_values(quantity=-5))
        assert not result.is_valid
        assert result.data is None
        assert result.message_for("quantity") == "Quantity must be positive"

    def test_zero_quantity_allowed(self):
        assert validate(InventoryItemCreate, inventory_values(quantity=0)).is_valid

    def test_required_references(self):
        result = validate(InventoryItemCreate, inventory_values(product_id="", warehouse_id="", location=""))
        assert result.errors == {
            "product_id": "Product is required",
            "warehouse_id": "Warehouse is required",
            "location": "Location is required",
        }

    def test_missing_field(self):
        values = inventory_values()
        del values["location"]
        assert validate(InventoryItemCreate, values).errors == {"location": "This field is required"}

    def test_expiry_date_parsed(self):
        result = validate(InventoryItemCreate, inventory_values(expiry_date="2024-06-15"))
        assert result.data.expiry_date == date(2024, 6, 15)


class TestSupplierValidation:

    def test_valid_payload(self):
        result = validate(SupplierCreate, supplier_values())
        assert result.is_valid
        assert result.data.tax_id is None

    def test_invalid_email(self):
        result = validate(SupplierCreate, supplier_values(email="not-an-email"))
        assert result.message_for("email") == "Invalid email address"

    def test_required_text_fields(self):
        result = validate(SupplierCreate, supplier_values(company_name="", postal_code=""))
        assert result.message_for("company_name") == "Company name is required"
        assert result.message_for("postal_code") == "Postal code is required"

    def test_negative_lead_time(self):
        result = validate(SupplierCreate, supplier_values(lead_time=-1))
        assert result.message_for("lead_time") == "Lead time must be positive"

    def test_rating_out_of_range(self):
        result = validate(SupplierUpdate, supplier_values(performance_rating=5.5))
        assert result.message_for("performance_rating") == "Performance rating must be between 0 and 5"

    def test_rating_must_be_finite(self):
        for rating in (math.nan, math.inf):
            result = validate(SupplierUpdate, supplier_values(performance_rating=rating))
            assert not result.is_valid
            assert result.message_for("performance_rating") == "Input should be a finite number"


class TestOrderValidation:

    def test_valid_payload(self):
        result = validate(OrderCreate, order_values())
        assert result.is_valid
        assert result.data.total_amount == 21.0

    def test_no_items_rejected(self):
        result = validate(OrderCreate, order_values(items=[]))
        assert not result.is_valid
        assert result.message_for("items") == "At least one item is required"

    def test_line_quantity_below_one(self):
        items = [{"product_id": "prod1", "quantity": 0, "unit_price": 1}]
        result = validate(OrderCreate, order_values(items=items))
        assert result.message_for("items.0.quantity") == "Quantity must be at least 1"

    def test_line_product_required(self):
        items = [{"product_id": "", "quantity": 1, "unit_price": 1}]
        result = validate(OrderCreate, order_values(items=items))
        assert result.message_for("items.0.product_id") == "Product is required"

    def test_blank_dates(self):
        result = validate(OrderCreate, order_values(order_date="", expected_delivery_date=""))
        assert result.message_for("order_date") == "Order date is required"
        assert result.message_for("expected_delivery_date") == "Expected delivery date is required"

    def test_delivery_before_order_date(self):
        result = validate(OrderCreate, order_values(expected_delivery_date="2024-02-01"))
        assert result.message_for("expected_delivery_date") == (
            "Expected delivery date must be on or after the order date"
        )

    def test_unit_price_must_be_finite(self):
        for price in (math.inf, math.nan):
            result = validate(OrderItemCreate, {"product_id": "prod1", "quantity": 1, "unit_price": price})
            assert result.message_for("unit_price") == "Input should be a finite number"

    def test_same_day_delivery_allowed(self):
        assert validate(OrderCreate, order_values(expected_delivery_date="2024-03-01")).is_valid


def test_field_path():
    assert field_path(("items", 0, "quantity")) == "items.0.quantity"
    assert field_path(()) == "__root__"
