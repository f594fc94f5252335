"""Students — CRUD for students scoped by education center.

Invariants:
    - A student can only be created under an existing edu center
    - Listing requires edu_center_id
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from educenter.api.routes.lookup_helpers import get_or_404
from educenter.infrastructure.database import get_db
from educenter.models.edu_center import EduCenter
from educenter.models.student import Student
from educenter.schemas.student import StudentCreate, StudentResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/students", tags=["students"])


@router.post(
    "", response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_student(
    body: StudentCreate, db: AsyncSession = Depends(get_db),
):
    await get_or_404(db, EduCenter, body.edu_center_id, "EduCenter")
    student = Student(**body.model_dump())
    db.add(student)
    await db.commit()
    await db.refresh(student)
    logger.info(
        f"Student created: {student.id}",
        extra={"student_id": student.id, "edu_center_id": student.edu_center_id},
    )
    return student


@router.get("", response_model=list[StudentResponse])
async def list_students(
    edu_center_id: UUID = Query(...),
    db: AsyncSession = Depends(get_db),
):
    await get_or_404(db, EduCenter, edu_center_id, "EduCenter")
    result = await db.execute(
        select(Student)
        .where(Student.edu_center_id == edu_center_id)
        .order_by(Student.full_name),
    )
    return result.scalars().all()


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: UUID, db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, Student, student_id, "Student")


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(
    student_id: UUID, db: AsyncSession = Depends(get_db),
):
    student = await get_or_404(db, Student, student_id, "Student")
    await db.delete(student)
    await db.commit()
    logger.info(f"Student {student_id} deleted", extra={"student_id": student_id})
