"""Payment Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - PaymentCreate never carries an id or status: both are assigned server-side
    - price >= 0 with at most 2 decimal places
    - for_month is YYYY-MM
    - PaymentUpdate fields are all optional; the id is never updatable

Design Decisions:
    - from_attributes on responses: ORM rows validated directly, no manual mapping
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from educenter.core.domain_types import PaymentStatus

FOR_MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


class PaymentCreate(BaseModel):
    """Payment creation: identifier and status are assigned by the service."""
    model_config = ConfigDict(extra="forbid")

    student_id: UUID
    edu_center_id: UUID
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    note: str | None = Field(None, max_length=2000)
    for_month: str = Field(pattern=FOR_MONTH_PATTERN)
    date_payed: datetime | None = None

    @field_validator("note")
    @classmethod
    def strip_note(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


class PaymentUpdate(BaseModel):
    """Partial payment update: only provided fields are applied."""
    model_config = ConfigDict(extra="forbid")

    price: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)
    note: str | None = Field(None, max_length=2000)
    status: PaymentStatus | None = None
    for_month: str | None = Field(None, pattern=FOR_MONTH_PATTERN)
    date_payed: datetime | None = None


class StudentSummary(BaseModel):
    """Student fields embedded in payment responses."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    full_name: str


class PaymentResponse(BaseModel):
    """Payment response: public-facing payment data."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    price: Decimal
    note: str | None
    status: PaymentStatus
    for_month: str
    date_payed: datetime | None
    student: StudentSummary
