# File: scm_dashboard/schemas/inventory.py
from typing import Optional
from datetime import date, datetime
from pydantic import BaseModel, field_validator

from scm_dashboard.models.inventory import InventoryStatus
from scm_dashboard.schemas.catalog import Product, Warehouse
from scm_dashboard.schemas.common import blank_to_none, require_text


class InventoryItemBase(BaseModel):
    quantity: int = 0
    location: str
    status: InventoryStatus = InventoryStatus.AVAILABLE
    expiry_date: Optional[date] = None
    lot_number: Optional[str] = None

    @field_validator('quantity')
    @classmethod
    def validate_quantity(cls, v):
        if v < 0:
            raise ValueError('Quantity must be positive')
        return v

    @field_validator('location')
    @classmethod
    def validate_location(cls, v):
        return require_text(v, 'Location is required')

    @field_validator('expiry_date', 'lot_number', mode='before')
    @classmethod
    def empty_optional(cls, v):
        return blank_to_none(v)


class InventoryItemCreate(InventoryItemBase):
    """Payload of the "new inventory" form"""
    product_id: str
    warehouse_id: str

    @field_validator('product_id')
    @classmethod
    def validate_product(cls, v):
        return require_text(v, 'Product is required')

    @field_validator('warehouse_id')
    @classmethod
    def validate_warehouse(cls, v):
        return require_text(v, 'Warehouse is required')


class InventoryItemUpdate(InventoryItemBase):
    """Payload of the detail-page edit form; product and warehouse stay fixed"""
    pass


class InventoryItem(InventoryItemBase):
    id: str
    product: Product
    warehouse: Warehouse
    last_updated: Optional[datetime] = None

    class Config:
        from_attributes = True
