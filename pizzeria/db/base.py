"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - All catalog models inherit from Base
    - Base.metadata describes the four tables of pizza.sqlite

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all catalog ORM models."""
    pass
