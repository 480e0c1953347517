"""Database Infrastructure — SQLAlchemy declarative Base for the catalog tables.

Invariants:
    - All sessions are async (AsyncSession over aiosqlite), created by
      infrastructure/database.py
"""
