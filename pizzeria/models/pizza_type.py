"""PizzaType ORM — a named recipe, independent of size.

Invariants:
    - pizza_type_id is the natural string key (e.g. "bbq_ckn"), also the image name
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pizzeria.db.base import Base


class PizzaType(Base):
    __tablename__ = "pizza_types"

    pizza_type_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    ingredients: Mapped[str | None] = mapped_column(Text, nullable=True)
