import pytest
from fastapi.testclient import TestClient

from scm_dashboard import crud
from scm_dashboard.core.exceptions import ApiError
from scm_dashboard.db.database import MockDatabase
from scm_dashboard.main import create_app
from scm_dashboard.services.data_source import MockDataSource
from scm_dashboard.views.base import DashboardContext


class FailingDataSource(MockDataSource):
    """Reads work, every write comes back as a server error"""

    def __init__(self, db=None):
        super().__init__(db)
        self.write_calls = 0

    async def create(self, module, payload):
        self.write_calls += 1
        raise ApiError(500, "Internal server error")

    async def update(self, module, identity, payload):
        self.write_calls += 1
        raise ApiError(500, "Internal server error")


@pytest.fixture
def db():
    return MockDatabase()


@pytest.fixture
def source(db):
    return MockDataSource(db)


@pytest.fixture
def ctx(source):
    return DashboardContext.create(source)


@pytest.fixture
def failing_ctx(db):
    return DashboardContext.create(FailingDataSource(db))


@pytest.fixture
def client(db):
    with TestClient(create_app(db)) as c:
        yield c


@pytest.fixture
def inventory_items(db):
    return crud.inventory.get_multi(db)


@pytest.fixture
def orders(db):
    return crud.order.get_multi(db)


@pytest.fixture
def suppliers(db):
    return crud.supplier.get_multi(db)
