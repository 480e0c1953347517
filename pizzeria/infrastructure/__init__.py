"""Infrastructure Layer — catalog store backends and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every backend failure is mapped to a PizzeriaError subtype

Design Decisions:
    - Two interchangeable CatalogStore backends (SQL, JSON) behind one Protocol
"""
