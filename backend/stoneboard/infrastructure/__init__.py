"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All SQLAlchemy exceptions mapped to DatabaseError before leaving this layer
"""
