"""Payment ORM — a fee a student owes or has paid to an education center.

Invariants:
    - id is the allocated short code ([A-Z]{3}[0-9]{5}); the primary key
      constraint is what makes it unique across concurrent writers
    - id is immutable once inserted
    - status is "not-payed" on creation

Design Decisions:
    - Short code as primary key rather than a UUID plus unique column: the code is
      the external-facing key and a single constraint guards the namespace
    - student eagerly loaded (selectin): every read returns the student summary
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Text, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from educenter.core.domain_types import PaymentStatus
from educenter.db.base import Base


class Payment(Base):
    """Payment record keyed by its human-readable identifier."""
    __tablename__ = "payments"

    id: Mapped[str] = mapped_column(String(8), primary_key=True)
    student_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    edu_center_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("edu_centers.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PaymentStatus.NOT_PAYED.value,
    )
    for_month: Mapped[str] = mapped_column(String(7), nullable=False)
    date_payed: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    student: Mapped["Student"] = relationship(
        "Student", back_populates="payments", lazy="selectin",
    )
    edu_center: Mapped["EduCenter"] = relationship(
        "EduCenter", back_populates="payments",
    )
