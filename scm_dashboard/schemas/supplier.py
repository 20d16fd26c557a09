# File: scm_dashboard/schemas/supplier.py
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator

from scm_dashboard.schemas.common import blank_to_none, require_text

# ==========================================
# BASE SCHEMAS
# ==========================================

_REQUIRED_MESSAGES = {
    'company_name': 'Company name is required',
    'contact_name': 'Contact name is required',
    'phone': 'Phone number is required',
    'address': 'Address is required',
    'city': 'City is required',
    'state': 'State is required',
    'country': 'Country is required',
    'postal_code': 'Postal code is required',
}


class SupplierBase(BaseModel):
    """Fields shared by the create and edit supplier forms"""
    company_name: str
    contact_name: str
    email: EmailStr
    phone: str
    address: str
    city: str
    state: str
    country: str
    postal_code: str
    tax_id: Optional[str] = None
    payment_terms: Optional[str] = None
    lead_time: int = 0
    notes: Optional[str] = None

    @field_validator(*_REQUIRED_MESSAGES)
    @classmethod
    def validate_required(cls, v, info):
        return require_text(v, _REQUIRED_MESSAGES[info.field_name])

    @field_validator('email', mode='wrap')
    @classmethod
    def validate_email(cls, v, handler):
        try:
            return handler(v)
        except ValidationError:
            raise ValueError('Invalid email address')

    @field_validator('lead_time')
    @classmethod
    def validate_lead_time(cls, v):
        if v < 0:
            raise ValueError('Lead time must be positive')
        return v

    @field_validator('tax_id', 'payment_terms', 'notes', mode='before')
    @classmethod
    def empty_optional(cls, v):
        return blank_to_none(v)

# ==========================================
# SUPPLIER CRUD SCHEMAS
# ==========================================

class SupplierCreate(SupplierBase):
    """New suppliers get their rating and active flag from the store"""
    pass


class SupplierUpdate(SupplierBase):
    """Full editable supplier record"""
    performance_rating: float = Field(allow_inf_nan=False)
    is_active: bool = True

    @field_validator('performance_rating')
    @classmethod
    def validate_rating(cls, v):
        if v < 0 or v > 5:
            raise ValueError('Performance rating must be between 0 and 5')
        return v

# ==========================================
# SUPPLIER RESPONSE SCHEMAS
# ==========================================

class Supplier(SupplierUpdate):
    id: str
    last_updated: datetime

    class Config:
        from_attributes = True


class SupplierRef(BaseModel):
    """Supplier summary embedded in orders"""
    id: str
    name: str
    email: str
    phone: str
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
