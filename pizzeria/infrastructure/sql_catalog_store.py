"""SQL Catalog Store — reads the four catalog tables through async SQLAlchemy.

Invariants:
    - Read-only: never adds, flushes or commits
    - One short-lived session per list_* call; no state shared across requests
    - Rows returned in storage-native order (no ORDER BY)
    - verify() fails with StoreUnavailableError if the file or any table is missing

Design Decisions:
    - ORM rows converted to frozen domain entities at this boundary so core
      never touches SQLAlchemy objects
    - Unknown dialect, missing driver or malformed URL is StoreUnavailableError,
      same as a missing file
    - Missing SQLite file checked before connecting: the driver would otherwise
      create an empty database and fail later with "no such table"
"""

import logging
from pathlib import Path

from sqlalchemy import func, select
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from pizzeria.core.domain_types import (
    Order, OrderDetail, OrderId, Pizza, PizzaId, PizzaType, PizzaTypeId,
    parse_price,
)
from pizzeria.core.errors import DatabaseError, StoreUnavailableError
from pizzeria.infrastructure.database import DatabaseSessionManager
from pizzeria.models import (
    Order as OrderModel,
    OrderDetail as OrderDetailModel,
    Pizza as PizzaModel,
    PizzaType as PizzaTypeModel,
)

logger = logging.getLogger(__name__)

CATALOG_TABLES = (PizzaTypeModel, PizzaModel, OrderModel, OrderDetailModel)


def sqlite_file_path(database_url: str) -> Path | None:
    """Filesystem path of a file-backed SQLite URL, else None."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return None
    if not url.database or url.database == ":memory:":
        return None
    return Path(url.database)


class SqlCatalogStore:
    """CatalogStore backed by a relational database (pizza.sqlite by default)."""

    backend = "sql"

    def __init__(self, db_manager: DatabaseSessionManager):
        self.db_manager = db_manager

    @classmethod
    def from_url(cls, database_url: str) -> "SqlCatalogStore":
        """Build the store. Raises StoreUnavailableError for an unusable URL."""
        try:
            return cls(DatabaseSessionManager(database_url))
        except (ArgumentError, ImportError) as e:
            raise StoreUnavailableError(
                cls.backend, f"cannot create engine: {e}",
            ) from e

    async def verify(self) -> None:
        path = sqlite_file_path(self.db_manager.database_url)
        if path is not None and not path.is_file():
            raise StoreUnavailableError(
                self.backend, f"database file '{path}' not found",
            )
        for model in CATALOG_TABLES:
            try:
                async with self.db_manager.session() as db:
                    count = await db.scalar(
                        select(func.count()).select_from(model),
                    )
            except DatabaseError as e:
                raise StoreUnavailableError(
                    self.backend,
                    f"table '{model.__tablename__}' unreadable ({e.operation})",
                ) from e
            logger.info(
                f"Table {model.__tablename__}: {count} rows",
                extra={"backend": self.backend, "table": model.__tablename__},
            )

    async def _all(self, model) -> list:
        async with self.db_manager.session() as db:
            result = await db.execute(select(model))
            return list(result.scalars().all())

    async def list_pizza_types(self) -> list[PizzaType]:
        return [
            PizzaType(
                pizza_type_id=PizzaTypeId(row.pizza_type_id),
                name=row.name,
                category=row.category,
                ingredients=row.ingredients or "",
            )
            for row in await self._all(PizzaTypeModel)
        ]

    async def list_pizzas(self) -> list[Pizza]:
        return [
            Pizza(
                pizza_id=PizzaId(row.pizza_id),
                pizza_type_id=PizzaTypeId(row.pizza_type_id),
                size=row.size,
                price=parse_price(row.price),
            )
            for row in await self._all(PizzaModel)
        ]

    async def list_orders(self) -> list[Order]:
        return [
            Order(order_id=OrderId(row.order_id), date=row.date, time=row.time)
            for row in await self._all(OrderModel)
        ]

    async def list_order_details(self) -> list[OrderDetail]:
        return [
            OrderDetail(
                order_details_id=row.order_details_id,
                order_id=OrderId(row.order_id),
                pizza_id=PizzaId(row.pizza_id),
                quantity=row.quantity,
            )
            for row in await self._all(OrderDetailModel)
        ]

    async def health_check(self) -> bool:
        return await self.db_manager.health_check()

    async def close(self) -> None:
        await self.db_manager.dispose()
