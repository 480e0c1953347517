"""Catalog Service — imperative shell around the pure catalog core.

Invariants:
    - Every call fetches fresh collections from the store, then hands them to
      pure core functions (no caching of computed responses)
    - Domain errors (ResourceNotFoundError, EmptyCatalogError, ReferentialGapError)
      propagate unchanged to the global error handler
    - now is read here, never inside core

Design Decisions:
    - ReferentialGapError fails the whole order request (500) instead of
      skipping the line: a partial order would misstate its total
"""

import logging
from datetime import datetime, timezone

from pizzeria.core.catalog import (
    build_catalog, build_catalog_entry, build_order_view, find_order,
)
from pizzeria.core.domain_types import (
    CatalogEntry, Order, OrderDetail, OrderView, PizzaType,
)
from pizzeria.core.errors import ReferentialGapError
from pizzeria.core.pizza_of_the_day import select_pizza_of_the_day
from pizzeria.core.repository_protocols import CatalogStore

logger = logging.getLogger(__name__)


class CatalogService:
    """Read operations behind the /api endpoints."""

    def __init__(
        self,
        store: CatalogStore,
        image_base: str = "/public/pizzas",
        image_ext: str = "webp",
    ):
        self.store = store
        self.image_base = image_base
        self.image_ext = image_ext

    async def get_catalog(self) -> list[CatalogEntry]:
        pizza_types = await self.store.list_pizza_types()
        pizzas = await self.store.list_pizzas()
        return build_catalog(
            pizza_types, pizzas, self.image_base, self.image_ext,
        )

    async def get_pizza_of_the_day(
        self, now: datetime | None = None,
    ) -> CatalogEntry:
        """Today's pizza (UTC), shaped like a catalog entry."""
        now = now or datetime.now(timezone.utc)
        pizza_type = select_pizza_of_the_day(
            await self.store.list_pizza_types(), now,
        )
        pizzas = await self.store.list_pizzas()
        return build_catalog_entry(
            pizza_type, pizzas, self.image_base, self.image_ext,
        )

    async def get_order_view(self, order_id: int) -> OrderView:
        order = find_order(await self.store.list_orders(), order_id)
        try:
            return build_order_view(
                order,
                await self.store.list_order_details(),
                await self.store.list_pizzas(),
                await self.store.list_pizza_types(),
            )
        except ReferentialGapError as e:
            logger.error(
                f"Order {order_id} has an unresolvable reference: {e.message}",
                extra={"error_code": e.code, "order_id": order_id},
            )
            raise

    async def list_pizza_types(self) -> list[PizzaType]:
        return list(await self.store.list_pizza_types())

    async def list_orders(self) -> list[Order]:
        return list(await self.store.list_orders())

    async def list_order_details(self) -> list[OrderDetail]:
        return list(await self.store.list_order_details())
