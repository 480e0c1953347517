"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Stores return domain entities (core/domain_types.py), never ORM rows or dicts
    - Every list_* returns the full collection in storage-native order

Design Decisions:
    - Protocol over ABC: SQL and JSON stores are interchangeable without a shared base
    - Async in Protocol: implementations do IO, but the pure aggregator that
      consumes the results is never async — services orchestrate the awaits
"""

from collections.abc import Sequence
from typing import Protocol

from pizzeria.core.domain_types import Order, OrderDetail, Pizza, PizzaType


class CatalogStore(Protocol):
    """Read-only catalog source — implemented by infrastructure/."""
    backend: str

    async def verify(self) -> None:
        """Open the source once at startup. Raises StoreUnavailableError."""
        ...

    async def list_pizza_types(self) -> Sequence[PizzaType]: ...
    async def list_pizzas(self) -> Sequence[Pizza]: ...
    async def list_orders(self) -> Sequence[Order]: ...
    async def list_order_details(self) -> Sequence[OrderDetail]: ...

    async def health_check(self) -> bool: ...

    async def close(self) -> None: ...
