from .inventory import inventory
from .order import order
from .supplier import supplier
from .catalog import get_products, get_warehouses
