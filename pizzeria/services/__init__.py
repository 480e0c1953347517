"""Services Layer — orchestrates store reads around the pure catalog core.

Invariants:
    - Services await the store, core never does
"""
