"""Infrastructure Layer — database, logging, token and password adapters.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Library errors are mapped to core/errors.py types at this boundary
"""
