from typing import Optional
from pydantic import BaseModel


class Product(BaseModel):
    id: str
    sku: str
    name: str
    category: str
    price: float
    cost: Optional[float] = None


class Warehouse(BaseModel):
    id: str
    name: str
    city: str
    state: str
