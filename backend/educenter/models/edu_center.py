"""EduCenter ORM — the tenant that owns students, payments and messages.

Invariants:
    - id is UUID primary key
    - name is non-nullable
    - deleting a center cascades to its students, payments and messages

Design Decisions:
    - ORM-level cascade plus ON DELETE CASCADE FKs: works with and without
      database-enforced foreign keys
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from educenter.db.base import Base


class EduCenter(Base):
    """Education center aggregate root."""
    __tablename__ = "edu_centers"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    students: Mapped[list["Student"]] = relationship(
        "Student", back_populates="edu_center",
        cascade="all",
    )
    payments: Mapped[list["Payment"]] = relationship(
        "Payment", back_populates="edu_center",
        cascade="all",
    )
    messages: Mapped[list["EduCenterMessage"]] = relationship(
        "EduCenterMessage", back_populates="edu_center",
        cascade="all",
    )
