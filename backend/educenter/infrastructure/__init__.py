"""Infrastructure Layer — database access, identifier stores, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures mapped to DatabaseError before leaving this layer

Design Decisions:
    - Implementations of core/repository_protocols.py live here
"""
