"""Message Schemas — messages an education center sends to its students.

Invariants:
    - title 1-200 chars, text 1-5000 chars, both stripped
    - student_id omitted means the message is addressed to the whole center
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessageCreate(BaseModel):
    edu_center_id: UUID
    student_id: UUID | None = None
    title: str = Field(min_length=1, max_length=200)
    text: str = Field(min_length=1, max_length=5000)

    @field_validator("title", "text")
    @classmethod
    def strip_content(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    edu_center_id: UUID
    student_id: UUID | None
    title: str
    text: str
    is_read: bool
    created_at: datetime
