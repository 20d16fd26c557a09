import logging

from scm_dashboard.crud.base import CRUDBase
from scm_dashboard.db.database import MockDatabase
from scm_dashboard.schemas.supplier import Supplier, SupplierCreate, SupplierRef, SupplierUpdate

logger = logging.getLogger(__name__)

DEFAULT_PERFORMANCE_RATING = 4.5


class CRUDSupplier(CRUDBase[Supplier, SupplierCreate, SupplierUpdate]):
    def create(self, db: MockDatabase, *, obj_in: SupplierCreate) -> Supplier:
        values = obj_in.model_dump()
        values.update(performance_rating=DEFAULT_PERFORMANCE_RATING, is_active=True)
        supplier = self.insert(db, values)
        logger.info(f"Created supplier {supplier.id} ({supplier.company_name})")
        return supplier

    def update(self, db: MockDatabase, *, id: str, obj_in: SupplierUpdate) -> Supplier:
        return self.apply_update(db, id=id, values=obj_in.model_dump())

    def reference(self, row: dict) -> SupplierRef:
        return SupplierRef(
            id=row["id"],
            name=row["company_name"],
            email=row["email"],
            phone=row["phone"],
            address=f"{row['address']}, {row['city']}, {row['state']} {row['postal_code']}",
            latitude=row.get("latitude"),
            longitude=row.get("longitude"),
        )


supplier = CRUDSupplier(Supplier, table="suppliers", id_prefix="sup", label="Supplier")
