"""Catalog Aggregator — pure joins from raw store rows to client-facing views.

Invariants:
    - No IO, no memoization: every call re-derives from its inputs
    - build_catalog emits exactly one entry per pizza type, in input order
    - Duplicate (pizza_type_id, size) rows: the later row's price wins
    - Unresolvable pizza / pizza type references raise ReferentialGapError,
      never an AttributeError on a missing row

Design Decisions:
    - Index by id once per call (dict) instead of repeated linear finds
    - find_order raises ResourceNotFoundError instead of returning None, so the
      global handler maps absence to 404 without per-route checks
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from decimal import Decimal

from pizzeria.core.domain_types import (
    CatalogEntry, Order, OrderDetail, OrderLine, OrderLinePizza,
    OrderView, Pizza, PizzaId, PizzaType, PizzaTypeId,
)
from pizzeria.core.errors import ReferentialGapError, ResourceNotFoundError


def image_path(pizza_type_id: str, image_base: str, image_ext: str) -> str:
    """Public image path for a pizza type, e.g. /public/pizzas/bbq_ckn.webp."""
    return f"{image_base.rstrip('/')}/{pizza_type_id}.{image_ext.lstrip('.')}"


def size_map(pizzas: Iterable[Pizza]) -> dict[str, Decimal]:
    """size -> price, last write wins."""
    sizes: dict[str, Decimal] = {}
    for pizza in pizzas:
        sizes[pizza.size] = pizza.price
    return sizes


def build_catalog_entry(
    pizza_type: PizzaType,
    pizzas: Iterable[Pizza],
    image_base: str = "/public/pizzas",
    image_ext: str = "webp",
) -> CatalogEntry:
    """Shape one pizza type; pizzas of other types are ignored."""
    return CatalogEntry(
        id=pizza_type.pizza_type_id,
        name=pizza_type.name,
        category=pizza_type.category,
        description=pizza_type.ingredients,
        image=image_path(pizza_type.pizza_type_id, image_base, image_ext),
        sizes=size_map(
            p for p in pizzas if p.pizza_type_id == pizza_type.pizza_type_id
        ),
    )


def build_catalog(
    pizza_types: Sequence[PizzaType],
    pizzas: Sequence[Pizza],
    image_base: str = "/public/pizzas",
    image_ext: str = "webp",
) -> list[CatalogEntry]:
    """Join every pizza type to its size variants."""
    by_type: dict[PizzaTypeId, list[Pizza]] = defaultdict(list)
    for pizza in pizzas:
        by_type[pizza.pizza_type_id].append(pizza)
    return [
        build_catalog_entry(
            pizza_type, by_type.get(pizza_type.pizza_type_id, []),
            image_base, image_ext,
        )
        for pizza_type in pizza_types
    ]


def find_order(orders: Iterable[Order], order_id: int) -> Order:
    """Linear scan by order_id. Raises ResourceNotFoundError when absent."""
    for order in orders:
        if order.order_id == order_id:
            return order
    raise ResourceNotFoundError("Order", order_id)


def build_order_view(
    order: Order,
    order_details: Sequence[OrderDetail],
    pizzas: Sequence[Pizza],
    pizza_types: Sequence[PizzaType],
) -> OrderView:
    """Resolve the order's line items to pizza name, size and price."""
    pizzas_by_id: dict[PizzaId, Pizza] = {p.pizza_id: p for p in pizzas}
    types_by_id: dict[PizzaTypeId, PizzaType] = {
        t.pizza_type_id: t for t in pizza_types
    }

    items = []
    for detail in order_details:
        if detail.order_id != order.order_id:
            continue
        pizza = pizzas_by_id.get(detail.pizza_id)
        if pizza is None:
            raise ReferentialGapError(
                "Pizza", detail.pizza_id,
                f"order detail {detail.order_details_id}",
            )
        pizza_type = types_by_id.get(pizza.pizza_type_id)
        if pizza_type is None:
            raise ReferentialGapError(
                "PizzaType", pizza.pizza_type_id, f"pizza {pizza.pizza_id}",
            )
        items.append(OrderLine(
            quantity=detail.quantity,
            pizza=OrderLinePizza(
                id=pizza.pizza_id,
                name=pizza_type.name,
                size=pizza.size,
                price=pizza.price,
            ),
        ))
    return OrderView(order=order, items=items)
