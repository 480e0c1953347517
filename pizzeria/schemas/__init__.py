"""Pydantic Schemas — response models for API endpoints.

Invariants:
    - Schemas shape data at the system boundary (API responses)

Design Decisions:
    - Separate from models/ and core/: schemas are API contracts, models are
      persistence, core types are domain
"""
