"""Edu Center Messages — messages an education center sends to its students.

Invariants:
    - The sending edu center must exist
    - A targeted student must exist and belong to the sending center
    - is_read only transitions False → True
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from educenter.api.routes.lookup_helpers import get_or_404
from educenter.core.errors import ErrorContext, ValidationError
from educenter.infrastructure.database import get_db
from educenter.models.edu_center import EduCenter
from educenter.models.edu_center_message import EduCenterMessage
from educenter.models.student import Student
from educenter.schemas.message import MessageCreate, MessageResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/messages", tags=["messages"])


@router.post(
    "", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_message(
    body: MessageCreate, db: AsyncSession = Depends(get_db),
):
    await get_or_404(db, EduCenter, body.edu_center_id, "EduCenter")
    if body.student_id:
        student = await get_or_404(db, Student, body.student_id, "Student")
        if student.edu_center_id != body.edu_center_id:
            raise ValidationError(
                "Student does not belong to this edu center", "student_id",
                ErrorContext(edu_center_id=str(body.edu_center_id)),
            )
    message = EduCenterMessage(**body.model_dump())
    db.add(message)
    await db.commit()
    await db.refresh(message)
    logger.info(
        f"Message {message.id} sent",
        extra={"edu_center_id": body.edu_center_id, "student_id": body.student_id},
    )
    return message


@router.get("", response_model=list[MessageResponse])
async def list_messages(
    edu_center_id: UUID = Query(...),
    student_id: UUID | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """List a center's messages; with student_id, the ones that student receives."""
    await get_or_404(db, EduCenter, edu_center_id, "EduCenter")
    query = select(EduCenterMessage).where(
        EduCenterMessage.edu_center_id == edu_center_id,
    )
    if student_id:
        query = query.where(
            (EduCenterMessage.student_id == student_id)
            | EduCenterMessage.student_id.is_(None),
        )
    result = await db.execute(
        query.order_by(EduCenterMessage.created_at.desc()),
    )
    return result.scalars().all()


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    message_id: UUID, db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, EduCenterMessage, message_id, "Message")


@router.post("/{message_id}/read", response_model=MessageResponse)
async def mark_message_read(
    message_id: UUID, db: AsyncSession = Depends(get_db),
):
    message = await get_or_404(db, EduCenterMessage, message_id, "Message")
    if not message.is_read:
        message.is_read = True
        await db.commit()
        await db.refresh(message)
    return message


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_message(
    message_id: UUID, db: AsyncSession = Depends(get_db),
):
    message = await get_or_404(db, EduCenterMessage, message_id, "Message")
    await db.delete(message)
    await db.commit()
