"""Pizza ORM — one purchasable size of a pizza type.

Invariants:
    - pizza_type_id references pizza_types (many pizzas per type)
    - price is read back as stored; core parses it into Decimal

Design Decisions:
    - price as String, not Numeric: the exported dataset stores prices as text
      and SQLite Numeric round-trips through float
"""

from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from pizzeria.db.base import Base


class Pizza(Base):
    __tablename__ = "pizzas"

    pizza_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    pizza_type_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("pizza_types.pizza_type_id"), nullable=False,
    )
    size: Mapped[str] = mapped_column(String(10), nullable=False)
    price: Mapped[str] = mapped_column(String(20), nullable=False)
