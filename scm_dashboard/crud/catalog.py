from typing import List

from scm_dashboard.db.database import MockDatabase
from scm_dashboard.schemas.catalog import Product, Warehouse


def get_products(db: MockDatabase) -> List[Product]:
    return [Product.model_validate(row) for row in db.products.values()]


def get_warehouses(db: MockDatabase) -> List[Warehouse]:
    return [Warehouse.model_validate(row) for row in db.warehouses.values()]
