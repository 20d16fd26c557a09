from .inventory import InventoryStatus
from .order import OrderStatus
from .supplier import SupplierActivity, PerformanceBucket, performance_bucket
