from .base import DashboardContext, ErrorBoundary, FallbackView, ViewState
from .inventory import InventoryListView, InventoryDetailView, NewInventoryView
from .orders import OrderListView, OrderDetailView, NewOrderView
from .suppliers import SupplierListView, SupplierDetailView, NewSupplierView
from .dashboard import DashboardStats, DashboardView
