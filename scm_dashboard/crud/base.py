from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
import uuid

from pydantic import BaseModel

from scm_dashboard.core.exceptions import NotFoundError
from scm_dashboard.db.database import MockDatabase

ModelType = TypeVar("ModelType", bound=BaseModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Read/write access to one table of the mock store.

    Rows are stored as plain dicts holding references by id; `build` turns a
    row into the response schema with its references resolved.
    """

    def __init__(self, model: Type[ModelType], table: str, id_prefix: str, label: str):
        self.model = model
        self.table = table
        self.id_prefix = id_prefix
        self.label = label

    def rows(self, db: MockDatabase) -> Dict[str, dict]:
        return db.table(self.table)

    def new_id(self) -> str:
        return f"{self.id_prefix}{uuid.uuid4().hex[:9]}"

    def get_row(self, db: MockDatabase, *, id: str) -> dict:
        row = self.rows(db).get(id)
        if row is None:
            raise NotFoundError(f"{self.label} not found")
        return row

    def build(self, db: MockDatabase, row: dict) -> ModelType:
        return self.model.model_validate(row)

    def get(self, db: MockDatabase, *, id: str) -> Optional[ModelType]:
        row = self.rows(db).get(id)
        return self.build(db, row) if row is not None else None

    def get_multi(self, db: MockDatabase, *, skip: int = 0, limit: Optional[int] = None) -> List[ModelType]:
        rows = list(self.rows(db).values())
        end = None if limit is None else skip + limit
        return [self.build(db, row) for row in rows[skip:end]]

    def insert(self, db: MockDatabase, values: Dict[str, Any]) -> ModelType:
        row = dict(values, id=self.new_id(), last_updated=datetime.now())
        self.rows(db)[row["id"]] = row
        return self.build(db, row)

    def apply_update(self, db: MockDatabase, *, id: str, values: Dict[str, Any]) -> ModelType:
        row = self.get_row(db, id=id)
        row.update(values)
        row["last_updated"] = datetime.now()
        return self.build(db, row)


def require_row(db: MockDatabase, table: str, id: str, label: str) -> dict:
    row = db.table(table).get(id)
    if row is None:
        raise NotFoundError(f"{label} not found")
    return row
