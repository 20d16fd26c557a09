# File: scm_dashboard/api/v1/api.py
from fastapi import APIRouter, Depends

from scm_dashboard.api.v1.endpoints import auth_refresh, catalog, inventory, orders, suppliers
from scm_dashboard.core.deps import get_current_subject

api_router = APIRouter()

api_router.include_router(
    auth_refresh.router,
    prefix="/auth",
    tags=["authentication"]
)

protected = [Depends(get_current_subject)]

api_router.include_router(
    inventory.router,
    prefix="/inventory",
    tags=["inventory"],
    dependencies=protected
)

api_router.include_router(
    orders.router,
    prefix="/orders",
    tags=["orders"],
    dependencies=protected
)

api_router.include_router(
    suppliers.router,
    prefix="/suppliers",
    tags=["suppliers"],
    dependencies=protected
)

api_router.include_router(
    catalog.router,
    tags=["catalog"],
    dependencies=protected
)
