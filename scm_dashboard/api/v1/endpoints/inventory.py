# File: scm_dashboard/api/v1/endpoints/inventory.py
from typing import Any, List

from fastapi import APIRouter, Depends

from scm_dashboard import crud
from scm_dashboard.core.deps import get_db
from scm_dashboard.db.database import MockDatabase
from scm_dashboard.schemas.inventory import InventoryItem, InventoryItemCreate, InventoryItemUpdate

router = APIRouter()


@router.get("", response_model=List[InventoryItem], operation_id="get_inventory_items")
def get_inventory_items(
    *,
    db: MockDatabase = Depends(get_db),
    skip: int = 0,
    limit: int = 1000,
) -> Any:
    """Get inventory items"""
    return crud.inventory.get_multi(db, skip=skip, limit=limit)


@router.post("", response_model=InventoryItem, status_code=201, operation_id="create_inventory_item")
def create_inventory_item(
    *,
    db: MockDatabase = Depends(get_db),
    item_in: InventoryItemCreate,
) -> Any:
    """Create new inventory item"""
    return crud.inventory.create(db, obj_in=item_in)


@router.get("/{item_id}", response_model=InventoryItem, operation_id="get_inventory_item")
def get_inventory_item(
    *,
    db: MockDatabase = Depends(get_db),
    item_id: str,
) -> Any:
    return crud.inventory.build(db, crud.inventory.get_row(db, id=item_id))


@router.put("/{item_id}", response_model=InventoryItem, operation_id="update_inventory_item")
def update_inventory_item(
    *,
    db: MockDatabase = Depends(get_db),
    item_id: str,
    item_update: InventoryItemUpdate,
) -> Any:
    """Update inventory item"""
    return crud.inventory.update(db, id=item_id, obj_in=item_update)
