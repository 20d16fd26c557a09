# File: scm_dashboard/api/v1/endpoints/orders.py
from typing import Any, List

from fastapi import APIRouter, Depends

from scm_dashboard import crud
from scm_dashboard.core.deps import get_db
from scm_dashboard.db.database import MockDatabase
from scm_dashboard.schemas.order import Order, OrderCreate, OrderUpdate

router = APIRouter()


@router.get("", response_model=List[Order], operation_id="get_orders")
def get_orders(
    *,
    db: MockDatabase = Depends(get_db),
    skip: int = 0,
    limit: int = 1000,
) -> Any:
    return crud.order.get_multi(db, skip=skip, limit=limit)


@router.post("", response_model=Order, status_code=201, operation_id="create_order")
def create_order(
    *,
    db: MockDatabase = Depends(get_db),
    order_in: OrderCreate,
) -> Any:
    """Create a purchase order; the order number must be unique"""
    return crud.order.create(db, obj_in=order_in)


@router.get("/{order_id}", response_model=Order, operation_id="get_order")
def get_order(
    *,
    db: MockDatabase = Depends(get_db),
    order_id: str,
) -> Any:
    return crud.order.build(db, crud.order.get_row(db, id=order_id))


@router.put("/{order_id}", response_model=Order, operation_id="update_order")
def update_order(
    *,
    db: MockDatabase = Depends(get_db),
    order_id: str,
    order_update: OrderUpdate,
) -> Any:
    return crud.order.update(db, id=order_id, obj_in=order_update)
