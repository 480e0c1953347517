"""Domain Types — immutable catalog entities and the identifiers that link them.

Invariants:
    - PizzaTypeId, PizzaId wrap str; OrderId wraps int — never mix them up
    - Entities are frozen: catalog data is read-only for the process lifetime
    - Prices are Decimal, parsed from the stored representation via its string form

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Frozen dataclasses over ORM rows in core: core never sees SQLAlchemy or files
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PizzaTypeId = NewType("PizzaTypeId", str)
PizzaId = NewType("PizzaId", str)
OrderId = NewType("OrderId", int)


def parse_price(raw: object) -> Decimal:
    """Parse a stored price ("9.50", 9.5, 12) into an exact Decimal.

    Goes through str() so binary floats keep their shortest repr
    (9.75 -> Decimal("9.75"), not the full binary expansion).
    """
    if isinstance(raw, bool) or raw is None:
        raise ValueError(f"Invalid price: {raw!r}")
    if isinstance(raw, Decimal):
        price = raw
    else:
        try:
            price = Decimal(str(raw).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid price: {raw!r}") from None
    # NaN and Infinity parse as Decimal but are not prices
    if not price.is_finite():
        raise ValueError(f"Invalid price: {raw!r}")
    return price


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class PizzaType:
    pizza_type_id: PizzaTypeId
    name: str
    category: str
    ingredients: str


@dataclass(frozen=True)
class Pizza:
    """One purchasable size of a pizza type."""
    pizza_id: PizzaId
    pizza_type_id: PizzaTypeId
    size: str
    price: Decimal


@dataclass(frozen=True)
class Order:
    order_id: OrderId
    date: str
    time: str


@dataclass(frozen=True)
class OrderDetail:
    """One line item of an order."""
    order_details_id: int
    order_id: OrderId
    pizza_id: PizzaId
    quantity: int


# ─── Derived Views ───────────────────────────────────────────────

@dataclass(frozen=True)
class CatalogEntry:
    """Denormalized pizza type with its size -> price map."""
    id: PizzaTypeId
    name: str
    category: str
    description: str
    image: str
    sizes: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class OrderLinePizza:
    id: PizzaId
    name: str
    size: str
    price: Decimal


@dataclass(frozen=True)
class OrderLine:
    quantity: int
    pizza: OrderLinePizza


@dataclass(frozen=True)
class OrderView:
    """An order with its resolved line items."""
    order: Order
    items: list[OrderLine]

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.items)

    @property
    def total(self) -> Decimal:
        return sum(
            (line.pizza.price * line.quantity for line in self.items),
            Decimal("0"),
        )
