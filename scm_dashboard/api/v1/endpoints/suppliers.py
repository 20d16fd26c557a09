# File: scm_dashboard/api/v1/endpoints/suppliers.py
from typing import Any, List

from fastapi import APIRouter, Depends

from scm_dashboard import crud
from scm_dashboard.core.deps import get_db
from scm_dashboard.db.database import MockDatabase
from scm_dashboard.schemas.supplier import Supplier, SupplierCreate, SupplierUpdate

router = APIRouter()


@router.get("", response_model=List[Supplier], operation_id="get_suppliers")
def get_suppliers(
    *,
    db: MockDatabase = Depends(get_db),
    skip: int = 0,
    limit: int = 1000,
) -> Any:
    return crud.supplier.get_multi(db, skip=skip, limit=limit)


@router.post("", response_model=Supplier, status_code=201, operation_id="create_supplier")
def create_supplier(
    *,
    db: MockDatabase = Depends(get_db),
    supplier_in: SupplierCreate,
) -> Any:
    """New suppliers start active with a 4.5 rating"""
    return crud.supplier.create(db, obj_in=supplier_in)


@router.get("/{supplier_id}", response_model=Supplier, operation_id="get_supplier")
def get_supplier(
    *,
    db: MockDatabase = Depends(get_db),
    supplier_id: str,
) -> Any:
    return crud.supplier.build(db, crud.supplier.get_row(db, id=supplier_id))


@router.patch("/{supplier_id}", response_model=Supplier, operation_id="patch_supplier")
@router.put("/{supplier_id}", response_model=Supplier, operation_id="update_supplier")
def update_supplier(
    *,
    db: MockDatabase = Depends(get_db),
    supplier_id: str,
    supplier_update: SupplierUpdate,
) -> Any:
    return crud.supplier.update(db, id=supplier_id, obj_in=supplier_update)
