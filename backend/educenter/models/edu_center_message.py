"""EduCenterMessage ORM — a message an education center sends to its students.

Invariants:
    - edu_center_id is required; student_id null means addressed to every student
    - is_read starts False and only moves to True
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from educenter.db.base import Base


class EduCenterMessage(Base):
    """Message from an education center to one or all of its students."""
    __tablename__ = "edu_center_messages"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    edu_center_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("edu_centers.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    student_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    is_read: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    edu_center: Mapped["EduCenter"] = relationship(
        "EduCenter", back_populates="messages",
    )
    student: Mapped[Optional["Student"]] = relationship(
        "Student", back_populates="messages",
    )
