"""Services Layer — record workflows orchestrating the core and the database.

Invariants:
    - Services raise EduCenterError subclasses, never HTTPException
    - Identifier allocation always goes through identifier_persistence

Design Decisions:
    - One service module per resource for locality
"""
