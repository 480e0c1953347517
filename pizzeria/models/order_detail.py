"""OrderDetail ORM — one line item (pizza + quantity) of an order."""

from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from pizzeria.db.base import Base


class OrderDetail(Base):
    __tablename__ = "order_details"

    order_details_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("orders.order_id"), nullable=False,
    )
    pizza_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("pizzas.pizza_id"), nullable=False,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
