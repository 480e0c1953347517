"""Catalog Schemas — Pydantic response models for the /api endpoints.

Invariants:
    - Prices leave the API as JSON numbers (Decimal -> float only here)
    - Raw passthrough models keep the stored column names
    - from_domain() is the single mapping point from core dataclasses

Design Decisions:
    - float at the boundary: clients expect {"S": 9.5}, not {"S": "9.50"};
      two-decimal currency values survive the conversion
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from pizzeria.core.domain_types import CatalogEntry, OrderView


def _price(value: Decimal) -> float:
    return float(value)


class CatalogPizza(BaseModel):
    """A pizza type with its size -> price map."""
    id: str
    name: str
    category: str
    description: str
    image: str
    sizes: dict[str, float] = {}

    @classmethod
    def from_domain(cls, entry: CatalogEntry) -> "CatalogPizza":
        return cls(
            id=entry.id,
            name=entry.name,
            category=entry.category,
            description=entry.description,
            image=entry.image,
            sizes={size: _price(price) for size, price in entry.sizes.items()},
        )


class PizzaTypeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    pizza_type_id: str
    name: str
    category: str
    ingredients: str


class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    order_id: int
    date: str
    time: str


class OrderDetailOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    order_details_id: int
    order_id: int
    pizza_id: str
    quantity: int


class OrderItemPizza(BaseModel):
    id: str
    name: str
    size: str
    price: float


class OrderItem(BaseModel):
    quantity: int
    pizza: OrderItemPizza


class OrderViewOut(BaseModel):
    """An order with resolved line items and totals."""
    order: OrderOut
    items: list[OrderItem] = []
    total_quantity: int = 0
    total: float = 0.0

    @classmethod
    def from_domain(cls, view: OrderView) -> "OrderViewOut":
        return cls(
            order=OrderOut.model_validate(view.order),
            items=[
                OrderItem(
                    quantity=line.quantity,
                    pizza=OrderItemPizza(
                        id=line.pizza.id,
                        name=line.pizza.name,
                        size=line.pizza.size,
                        price=_price(line.pizza.price),
                    ),
                )
                for line in view.items
            ],
            total_quantity=view.total_quantity,
            total=_price(view.total),
        )
