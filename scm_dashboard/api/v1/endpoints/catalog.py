from typing import Any, List

from fastapi import APIRouter, Depends

from scm_dashboard import crud
from scm_dashboard.core.deps import get_db
from scm_dashboard.db.database import MockDatabase
from scm_dashboard.schemas.catalog import Product, Warehouse

router = APIRouter()


@router.get("/products", response_model=List[Product], operation_id="get_products")
def get_products(db: MockDatabase = Depends(get_db)) -> Any:
    return crud.get_products(db)


@router.get("/warehouses", response_model=List[Warehouse], operation_id="get_warehouses")
def get_warehouses(db: MockDatabase = Depends(get_db)) -> Any:
    return crud.get_warehouses(db)
