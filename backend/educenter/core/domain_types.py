"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PaymentId is the allocated short code ([A-Z]{3}[0-9]{5}), never a UUID
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PaymentId = NewType("PaymentId", str)


# ─── Enums ───────────────────────────────────────────────────────

class PaymentStatus(str, Enum):
    """Payment states, maps to DB `status` column."""
    NOT_PAYED = "not-payed"
    PAYED = "payed"
