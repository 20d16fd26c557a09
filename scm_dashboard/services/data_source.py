"""
Where collection queries and mutations get their data.

`MockDataSource` answers from the in-process mock store; `HttpDataSource`
talks to the REST API through `ApiClient`. Both expose the same coroutines
and return parsed schema objects.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel

from scm_dashboard import crud
from scm_dashboard.core.config import settings
from scm_dashboard.core.exceptions import NotFoundError
from scm_dashboard.core.http import ApiClient, endpoint, update_method
from scm_dashboard.db.database import MockDatabase
from scm_dashboard.schemas import InventoryItem, Order, Product, Supplier, Warehouse

logger = logging.getLogger(__name__)

RESPONSE_MODELS: Dict[str, Type[BaseModel]] = {
    "inventory": InventoryItem,
    "orders": Order,
    "suppliers": Supplier,
    "products": Product,
    "warehouses": Warehouse,
}

LABELS = {
    "inventory": "Inventory item",
    "orders": "Order",
    "suppliers": "Supplier",
}


class DataSource:
    async def list(self, module: str) -> List[BaseModel]:
        raise NotImplementedError

    async def get(self, module: str, identity: str) -> BaseModel:
        raise NotImplementedError

    async def create(self, module: str, payload: BaseModel) -> BaseModel:
        raise NotImplementedError

    async def update(self, module: str, identity: str, payload: BaseModel) -> BaseModel:
        raise NotImplementedError


class MockDataSource(DataSource):
    """Serves the mock store in-process, yielding to the event loop on every call"""

    def __init__(self, db: Optional[MockDatabase] = None, latency: float = 0.0):
        self.db = db or MockDatabase()
        self.latency = latency
        self.crud = {
            "inventory": crud.inventory,
            "orders": crud.order,
            "suppliers": crud.supplier,
        }

    async def _wait(self):
        await asyncio.sleep(self.latency)

    async def list(self, module: str) -> List[BaseModel]:
        await self._wait()
        if module == "products":
            return crud.get_products(self.db)
        if module == "warehouses":
            return crud.get_warehouses(self.db)
        return self.crud[module].get_multi(self.db)

    async def get(self, module: str, identity: str) -> BaseModel:
        await self._wait()
        record = self.crud[module].get(self.db, id=identity)
        if record is None:
            raise NotFoundError(f"{LABELS[module]} not found")
        return record

    async def create(self, module: str, payload: BaseModel) -> BaseModel:
        await self._wait()
        return self.crud[module].create(self.db, obj_in=payload)

    async def update(self, module: str, identity: str, payload: BaseModel) -> BaseModel:
        await self._wait()
        return self.crud[module].update(self.db, id=identity, obj_in=payload)


class HttpDataSource(DataSource):
    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or ApiClient()

    def _parse(self, module: str, payload: Any) -> BaseModel:
        return RESPONSE_MODELS[module].model_validate(payload)

    async def list(self, module: str) -> List[BaseModel]:
        payload = await self.client.request(endpoint(module, "list"))
        return [self._parse(module, item) for item in payload or []]

    async def get(self, module: str, identity: str) -> BaseModel:
        payload = await self.client.request(endpoint(module, "item", id=identity))
        return self._parse(module, payload)

    async def create(self, module: str, payload: BaseModel) -> BaseModel:
        body = payload.model_dump(mode="json")
        result = await self.client.request(endpoint(module, "create"), "POST", body)
        return self._parse(module, result)

    async def update(self, module: str, identity: str, payload: BaseModel) -> BaseModel:
        body = payload.model_dump(mode="json")
        result = await self.client.request(endpoint(module, "update", id=identity), update_method(module), body)
        return self._parse(module, result)


def default_data_source() -> DataSource:
    if settings.DATA_SOURCE == "http":
        logger.info(f"Using REST data source at {settings.API_BASE_URL}")
        return HttpDataSource()
    return MockDataSource()
