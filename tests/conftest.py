"""Root conftest — shared catalog fixtures for every test layer.

Invariants:
    - The same sample rows back the JSON snapshot and the SQLite database, so
      backend tests can compare the two stores row for row
    - Every test gets its own files under tmp_path
"""

import json
import os

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

# Never pick up a developer's pizza.sqlite or .env values
os.environ.setdefault("CATALOG_BACKEND", "sql")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test-pizza.sqlite")
os.environ.setdefault("LOG_FORMAT", "text")

from pizzeria.db.base import Base  # noqa: E402
from pizzeria.infrastructure.json_catalog_store import TABLE_FILES  # noqa: E402
from pizzeria.models import (  # noqa: E402
    Order, OrderDetail, Pizza, PizzaType,
)

SAMPLE_ROWS = {
    "pizza_types": [
        {
            "pizza_type_id": "bbq_ckn",
            "name": "The Barbecue Chicken Pizza",
            "category": "Chicken",
            "ingredients": "Barbecued Chicken, Red Peppers, Green Peppers, Tomatoes, Red Onions, Barbecue Sauce",
        },
        {
            "pizza_type_id": "big_meat",
            "name": "The Big Meat Pizza",
            "category": "Classic",
            "ingredients": "Bacon, Pepperoni, Italian Sausage, Chorizo Sausage",
        },
        {
            "pizza_type_id": "veggie_veg",
            "name": "The Vegetables + Vegetables Pizza",
            "category": "Veggie",
            "ingredients": "Mushrooms, Tomatoes, Red Peppers, Green Peppers, Red Onions, Zucchini, Spinach, Garlic",
        },
    ],
    "pizzas": [
        {"pizza_id": "bbq_ckn_s", "pizza_type_id": "bbq_ckn", "size": "S", "price": "12.75"},
        {"pizza_id": "bbq_ckn_m", "pizza_type_id": "bbq_ckn", "size": "M", "price": "16.75"},
        {"pizza_id": "bbq_ckn_l", "pizza_type_id": "bbq_ckn", "size": "L", "price": "20.75"},
        {"pizza_id": "big_meat_s", "pizza_type_id": "big_meat", "size": "S", "price": "12"},
        {"pizza_id": "veggie_veg_s", "pizza_type_id": "veggie_veg", "size": "S", "price": "12"},
        {"pizza_id": "veggie_veg_l", "pizza_type_id": "veggie_veg", "size": "L", "price": "20.25"},
    ],
    "orders": [
        {"order_id": 1, "date": "2015-01-01", "time": "11:38:36"},
        {"order_id": 2, "date": "2015-01-01", "time": "11:57:40"},
        {"order_id": 3, "date": "2015-01-02", "time": "12:12:28"},
    ],
    "order_details": [
        {"order_details_id": 1, "order_id": 1, "pizza_id": "bbq_ckn_m", "quantity": 1},
        {"order_details_id": 2, "order_id": 2, "pizza_id": "bbq_ckn_s", "quantity": 2},
        {"order_details_id": 3, "order_id": 2, "pizza_id": "veggie_veg_l", "quantity": 1},
        {"order_details_id": 4, "order_id": 2, "pizza_id": "big_meat_s", "quantity": 3},
    ],
}

TABLE_MODELS = {
    "pizza_types": PizzaType,
    "pizzas": Pizza,
    "orders": Order,
    "order_details": OrderDetail,
}


def write_snapshot(directory, rows: dict) -> None:
    """Write rows the way the export utility does."""
    directory.mkdir(parents=True, exist_ok=True)
    for table, filename in TABLE_FILES.items():
        (directory / filename).write_text(
            json.dumps(rows[table], indent=2), encoding="utf-8",
        )


@pytest.fixture
def catalog_rows():
    return {table: [dict(r) for r in rows] for table, rows in SAMPLE_ROWS.items()}


@pytest.fixture
def snapshot_dir(tmp_path, catalog_rows):
    directory = tmp_path / "data"
    write_snapshot(directory, catalog_rows)
    return directory


@pytest.fixture
async def sqlite_url(tmp_path, catalog_rows):
    """File-backed SQLite database seeded with the sample rows."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'pizza.sqlite'}"
    engine = create_async_engine(url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        for table, model in TABLE_MODELS.items():
            await conn.execute(model.__table__.insert(), catalog_rows[table])
    await engine.dispose()
    return url
