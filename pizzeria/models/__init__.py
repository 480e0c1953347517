"""ORM Models — SQLAlchemy declarative models for the four catalog tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Table and column names match pizza.sqlite exactly (no migrations here)

Design Decisions:
    - One file per entity for locality
"""

from pizzeria.models.pizza_type import PizzaType  # noqa: F401
from pizzeria.models.pizza import Pizza  # noqa: F401
from pizzeria.models.order import Order  # noqa: F401
from pizzeria.models.order_detail import OrderDetail  # noqa: F401
