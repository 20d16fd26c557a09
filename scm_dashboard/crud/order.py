import logging
from typing import Optional

from scm_dashboard.core.exceptions import ConflictError
from scm_dashboard.crud.base import CRUDBase, require_row
from scm_dashboard.crud.supplier import supplier as crud_supplier
from scm_dashboard.db.database import MockDatabase
from scm_dashboard.schemas.catalog import Product
from scm_dashboard.schemas.order import Order, OrderCreate, OrderItem, OrderUpdate

logger = logging.getLogger(__name__)


class CRUDOrder(CRUDBase[Order, OrderCreate, OrderUpdate]):
    def build(self, db: MockDatabase, row: dict) -> Order:
        supplier_row = require_row(db, "suppliers", row["supplier_id"], "Supplier")
        items = [
            OrderItem(
                product=Product.model_validate(require_row(db, "products", line["product_id"], "Product")),
                quantity=line["quantity"],
                unit_price=line["unit_price"],
            )
            for line in row["items"]
        ]
        values = {k: v for k, v in row.items() if k not in ("supplier_id", "items")}
        return Order(**values, supplier=crud_supplier.reference(supplier_row), items=items)

    def get_by_order_number(self, db: MockDatabase, *, order_number: str) -> Optional[dict]:
        for row in self.rows(db).values():
            if row["order_number"] == order_number:
                return row
        return None

    def _check_order_number(self, db: MockDatabase, order_number: str, exclude_id: Optional[str] = None):
        existing = self.get_by_order_number(db, order_number=order_number)
        if existing is not None and existing["id"] != exclude_id:
            raise ConflictError(f"Order number {order_number} already exists")

    def create(self, db: MockDatabase, *, obj_in: OrderCreate) -> Order:
        require_row(db, "suppliers", obj_in.supplier_id, "Supplier")
        for line in obj_in.items:
            require_row(db, "products", line.product_id, "Product")
        self._check_order_number(db, obj_in.order_number)

        order = self.insert(db, obj_in.model_dump())
        logger.info(f"Created order {order.order_number} ({len(order.items)} lines, total {order.total_amount:.2f})")
        return order

    def update(self, db: MockDatabase, *, id: str, obj_in: OrderUpdate) -> Order:
        self.get_row(db, id=id)
        require_row(db, "suppliers", obj_in.supplier_id, "Supplier")
        self._check_order_number(db, obj_in.order_number, exclude_id=id)
        return self.apply_update(db, id=id, values=obj_in.model_dump())


order = CRUDOrder(Order, table="orders", id_prefix="ord", label="Order")
