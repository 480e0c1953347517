"""API test fixtures — FastAPI test client over each catalog backend.

Invariants:
    - Every route test runs once per backend (sql, json) on the same rows
    - get_catalog_store is overridden; the lifespan is not run by ASGITransport
    - stub_client serves hand-built entities for data-integrity edge cases
"""

import pytest
from httpx import ASGITransport, AsyncClient

from pizzeria.api.dependencies import get_catalog_store
from pizzeria.infrastructure.json_catalog_store import JsonCatalogStore
from pizzeria.infrastructure.sql_catalog_store import SqlCatalogStore
from pizzeria.main import app


class StubCatalogStore:
    """In-memory CatalogStore for edge cases the sample data cannot express."""

    backend = "stub"

    def __init__(self, pizza_types=(), pizzas=(), orders=(), order_details=()):
        self.pizza_types = list(pizza_types)
        self.pizzas = list(pizzas)
        self.orders = list(orders)
        self.order_details = list(order_details)
        self.healthy = True

    async def verify(self):
        return None

    async def list_pizza_types(self):
        return self.pizza_types

    async def list_pizzas(self):
        return self.pizzas

    async def list_orders(self):
        return self.orders

    async def list_order_details(self):
        return self.order_details

    async def health_check(self):
        return self.healthy

    async def close(self):
        return None


async def _client_for(store):
    app.dependency_overrides[get_catalog_store] = lambda: store
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture(params=["sql", "json"])
async def catalog_store(request, snapshot_dir, sqlite_url):
    if request.param == "json":
        store = JsonCatalogStore(snapshot_dir)
    else:
        store = SqlCatalogStore.from_url(sqlite_url)
    await store.verify()
    yield store
    await store.close()


@pytest.fixture
async def client(catalog_store):
    """FastAPI test client with the store dependency overridden."""
    async with await _client_for(catalog_store) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def stub_store():
    return StubCatalogStore()


@pytest.fixture
async def stub_client(stub_store):
    async with await _client_for(stub_store) as c:
        yield c
    app.dependency_overrides.clear()
