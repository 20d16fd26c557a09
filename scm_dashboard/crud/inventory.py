import logging

from scm_dashboard.crud.base import CRUDBase, require_row
from scm_dashboard.db.database import MockDatabase
from scm_dashboard.schemas.catalog import Product, Warehouse
from scm_dashboard.schemas.inventory import InventoryItem, InventoryItemCreate, InventoryItemUpdate

logger = logging.getLogger(__name__)


class CRUDInventory(CRUDBase[InventoryItem, InventoryItemCreate, InventoryItemUpdate]):
    def build(self, db: MockDatabase, row: dict) -> InventoryItem:
        values = {k: v for k, v in row.items() if k not in ("product_id", "warehouse_id")}
        return InventoryItem(
            **values,
            product=Product.model_validate(require_row(db, "products", row["product_id"], "Product")),
            warehouse=Warehouse.model_validate(require_row(db, "warehouses", row["warehouse_id"], "Warehouse")),
        )

    def create(self, db: MockDatabase, *, obj_in: InventoryItemCreate) -> InventoryItem:
        require_row(db, "products", obj_in.product_id, "Product")
        require_row(db, "warehouses", obj_in.warehouse_id, "Warehouse")
        item = self.insert(db, obj_in.model_dump())
        logger.info(f"Created inventory item {item.id} ({item.product.sku} x {item.quantity})")
        return item

    def update(self, db: MockDatabase, *, id: str, obj_in: InventoryItemUpdate) -> InventoryItem:
        return self.apply_update(db, id=id, values=obj_in.model_dump())


inventory = CRUDInventory(InventoryItem, table="inventory", id_prefix="inv", label="Inventory item")
