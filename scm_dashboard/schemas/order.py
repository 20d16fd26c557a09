# File: scm_dashboard/schemas/order.py
from typing import List, Optional
from datetime import date, datetime
from pydantic import BaseModel, Field, computed_field, field_validator, ValidationInfo

from scm_dashboard.models.order import OrderStatus
from scm_dashboard.schemas.catalog import Product
from scm_dashboard.schemas.common import blank_to_none, require_text
from scm_dashboard.schemas.supplier import SupplierRef


def _check_quantity(v: int) -> int:
    if v < 1:
        raise ValueError('Quantity must be at least 1')
    return v


def _check_unit_price(v: float) -> float:
    if v < 0:
        raise ValueError('Unit price must be positive')
    return v

# ==========================================
# LINE ITEMS
# ==========================================

class OrderItemCreate(BaseModel):
    product_id: str
    quantity: int = 1
    unit_price: float = Field(0, allow_inf_nan=False)

    @field_validator('product_id')
    @classmethod
    def validate_product(cls, v):
        return require_text(v, 'Product is required')

    @field_validator('quantity')
    @classmethod
    def validate_quantity(cls, v):
        return _check_quantity(v)

    @field_validator('unit_price')
    @classmethod
    def validate_unit_price(cls, v):
        return _check_unit_price(v)


class OrderItem(BaseModel):
    product: Product
    quantity: int
    unit_price: float = Field(allow_inf_nan=False)

    @field_validator('quantity')
    @classmethod
    def validate_quantity(cls, v):
        return _check_quantity(v)

    @field_validator('unit_price')
    @classmethod
    def validate_unit_price(cls, v):
        return _check_unit_price(v)

    @computed_field
    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_price

# ==========================================
# ORDER HEADER
# ==========================================

class OrderBase(BaseModel):
    order_number: str
    status: OrderStatus = OrderStatus.PENDING
    order_date: date
    expected_delivery_date: date
    notes: Optional[str] = None

    @field_validator('order_number')
    @classmethod
    def validate_order_number(cls, v):
        return require_text(v, 'Order number is required')

    @field_validator('order_date', mode='before')
    @classmethod
    def order_date_present(cls, v):
        if v == "":
            raise ValueError('Order date is required')
        return v

    @field_validator('expected_delivery_date', mode='before')
    @classmethod
    def delivery_date_present(cls, v):
        if v == "":
            raise ValueError('Expected delivery date is required')
        return v

    @field_validator('expected_delivery_date')
    @classmethod
    def delivery_after_order(cls, v, info: ValidationInfo):
        order_date = info.data.get('order_date')
        if order_date and v < order_date:
            raise ValueError('Expected delivery date must be on or after the order date')
        return v

    @field_validator('notes', mode='before')
    @classmethod
    def empty_notes(cls, v):
        return blank_to_none(v)


class OrderCreate(OrderBase):
    """Payload of the "new order" form"""
    supplier_id: str
    items: List[OrderItemCreate]

    @field_validator('supplier_id')
    @classmethod
    def validate_supplier(cls, v):
        return require_text(v, 'Supplier is required')

    @field_validator('items')
    @classmethod
    def validate_items(cls, v):
        if len(v) < 1:
            raise ValueError('At least one item is required')
        return v

    @property
    def total_amount(self) -> float:
        return sum(item.quantity * item.unit_price for item in self.items)


class OrderUpdate(OrderBase):
    """Header fields editable from the order detail page"""
    supplier_id: str

    @field_validator('supplier_id')
    @classmethod
    def validate_supplier(cls, v):
        return require_text(v, 'Supplier is required')


class Order(OrderBase):
    id: str
    supplier: SupplierRef
    items: List[OrderItem]
    last_updated: Optional[datetime] = None

    @field_validator('items')
    @classmethod
    def validate_items(cls, v):
        if len(v) < 1:
            raise ValueError('At least one item is required')
        return v

    @computed_field
    @property
    def total_amount(self) -> float:
        """Always the sum of the line totals"""
        return sum(item.line_total for item in self.items)

    class Config:
        from_attributes = True
