# File: scm_dashboard/db/database.py
"""
In-memory mock store. Nothing is persisted; every `MockDatabase` starts from
the seed records in `mock_data`.
"""
import copy
import logging
from typing import Dict, Iterator

from fastapi import Request

from scm_dashboard.db import mock_data

logger = logging.getLogger(__name__)


class MockDatabase:
    def __init__(self, seed: bool = True):
        self.products: Dict[str, dict] = {}
        self.warehouses: Dict[str, dict] = {}
        self.inventory: Dict[str, dict] = {}
        self.suppliers: Dict[str, dict] = {}
        self.orders: Dict[str, dict] = {}
        if seed:
            self.load_seed()

    def load_seed(self):
        for table, rows in (
            (self.products, mock_data.PRODUCTS),
            (self.warehouses, mock_data.WAREHOUSES),
            (self.inventory, mock_data.INVENTORY),
            (self.suppliers, mock_data.SUPPLIERS),
            (self.orders, mock_data.ORDERS),
        ):
            table.clear()
            for row in rows:
                record = copy.deepcopy(row)
                record.setdefault("last_updated", mock_data.SEEDED_AT)
                table[record["id"]] = record
        logger.info(
            f"Mock store seeded: {len(self.inventory)} inventory items, "
            f"{len(self.orders)} orders, {len(self.suppliers)} suppliers"
        )

    def table(self, name: str) -> Dict[str, dict]:
        return getattr(self, name)


def get_db(request: Request) -> Iterator[MockDatabase]:
    yield request.app.state.db
