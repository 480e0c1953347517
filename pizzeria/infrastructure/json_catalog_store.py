"""JSON Catalog Store — serves catalog snapshots written by the export utility.

Invariants:
    - Files loaded once, in verify(); afterwards every list_* returns the same
      immutable tuple, so concurrent requests share it without locking
    - Missing, unreadable or malformed files raise StoreUnavailableError at startup
    - Entity order is the order of the JSON arrays (export order)

Design Decisions:
    - One file per table, named after the table (pizza_types.json, ...), so the
      export utility and this store agree by construction
"""

import json
import logging
from pathlib import Path

from pizzeria.core.domain_types import (
    Order, OrderDetail, OrderId, Pizza, PizzaId, PizzaType, PizzaTypeId,
    parse_price,
)
from pizzeria.core.errors import StoreUnavailableError

logger = logging.getLogger(__name__)

TABLE_FILES = {
    "pizza_types": "pizza_types.json",
    "pizzas": "pizzas.json",
    "orders": "orders.json",
    "order_details": "order_details.json",
}


def _pizza_type(row: dict) -> PizzaType:
    return PizzaType(
        pizza_type_id=PizzaTypeId(str(row["pizza_type_id"])),
        name=row["name"],
        category=row["category"],
        ingredients=row.get("ingredients") or "",
    )


def _pizza(row: dict) -> Pizza:
    return Pizza(
        pizza_id=PizzaId(str(row["pizza_id"])),
        pizza_type_id=PizzaTypeId(str(row["pizza_type_id"])),
        size=row["size"],
        price=parse_price(row["price"]),
    )


def _order(row: dict) -> Order:
    return Order(
        order_id=OrderId(int(row["order_id"])),
        date=row["date"],
        time=row["time"],
    )


def _order_detail(row: dict) -> OrderDetail:
    return OrderDetail(
        order_details_id=int(row["order_details_id"]),
        order_id=OrderId(int(row["order_id"])),
        pizza_id=PizzaId(str(row["pizza_id"])),
        quantity=int(row["quantity"]),
    )


class JsonCatalogStore:
    """CatalogStore backed by four JSON files in data_dir."""

    backend = "json"

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)
        self._pizza_types: tuple[PizzaType, ...] | None = None
        self._pizzas: tuple[Pizza, ...] = ()
        self._orders: tuple[Order, ...] = ()
        self._order_details: tuple[OrderDetail, ...] = ()

    def _load_table(self, table: str, parse) -> tuple:
        path = self.data_dir / TABLE_FILES[table]
        try:
            with path.open(encoding="utf-8") as f:
                rows = json.load(f)
        except OSError as e:
            raise StoreUnavailableError(
                self.backend, f"cannot read '{path}': {e.strerror}",
            ) from e
        except json.JSONDecodeError as e:
            raise StoreUnavailableError(
                self.backend, f"'{path}' is not valid JSON (line {e.lineno})",
            ) from e
        if not isinstance(rows, list):
            raise StoreUnavailableError(
                self.backend, f"'{path}' must contain a JSON array",
            )
        try:
            entities = tuple(parse(row) for row in rows)
        except (KeyError, TypeError, ValueError) as e:
            raise StoreUnavailableError(
                self.backend, f"'{path}' has an invalid row: {e!r}",
            ) from e
        logger.info(
            f"Loaded {len(entities)} rows from {path.name}",
            extra={"backend": self.backend, "table": table},
        )
        return entities

    async def verify(self) -> None:
        self._pizza_types = self._load_table("pizza_types", _pizza_type)
        self._pizzas = self._load_table("pizzas", _pizza)
        self._orders = self._load_table("orders", _order)
        self._order_details = self._load_table("order_details", _order_detail)

    def _require_loaded(self) -> None:
        if self._pizza_types is None:
            raise RuntimeError("JsonCatalogStore used before verify()")

    async def list_pizza_types(self) -> tuple[PizzaType, ...]:
        self._require_loaded()
        return self._pizza_types

    async def list_pizzas(self) -> tuple[Pizza, ...]:
        self._require_loaded()
        return self._pizzas

    async def list_orders(self) -> tuple[Order, ...]:
        self._require_loaded()
        return self._orders

    async def list_order_details(self) -> tuple[OrderDetail, ...]:
        self._require_loaded()
        return self._order_details

    async def health_check(self) -> bool:
        return self._pizza_types is not None

    async def close(self) -> None:
        return None
