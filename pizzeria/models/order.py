"""Order ORM — an order header; line items live in order_details.

Invariants:
    - date and time are kept as stored text ("2015-01-01", "11:38:36")
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pizzeria.db.base import Base


class Order(Base):
    __tablename__ = "orders"

    order_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    date: Mapped[str] = mapped_column(String(20), nullable=False)
    time: Mapped[str] = mapped_column(String(20), nullable=False)
