"""Student ORM — a learner enrolled at one education center.

Invariants:
    - edu_center_id links to the owning center (cascade delete)
    - full_name is non-nullable
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from educenter.db.base import Base


class Student(Base):
    """Student enrolled at an education center."""
    __tablename__ = "students"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    edu_center_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("edu_centers.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    edu_center: Mapped["EduCenter"] = relationship(
        "EduCenter", back_populates="students",
    )
    payments: Mapped[list["Payment"]] = relationship(
        "Payment", back_populates="student",
        cascade="all",
    )
    messages: Mapped[list["EduCenterMessage"]] = relationship(
        "EduCenterMessage", back_populates="student",
        cascade="all",
    )
