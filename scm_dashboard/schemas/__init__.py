# File: scm_dashboard/schemas/__init__.py
from .catalog import Product, Warehouse
from .inventory import InventoryItem, InventoryItemCreate, InventoryItemUpdate
from .supplier import Supplier, SupplierCreate, SupplierUpdate, SupplierRef
from .order import Order, OrderCreate, OrderUpdate, OrderItem, OrderItemCreate
from .filters import ALL, InventoryFilters, OrderFilters, SupplierFilters
from .auth import Token
