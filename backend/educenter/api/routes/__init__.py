"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Multi-step workflows live in services/; routes only load, validate and return

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
