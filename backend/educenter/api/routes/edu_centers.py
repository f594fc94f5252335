"""Edu Centers — CRUD for education centers.

Invariants:
    - Deleting a center removes its students, payments and messages
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from educenter.api.routes.lookup_helpers import get_or_404
from educenter.infrastructure.database import get_db
from educenter.models.edu_center import EduCenter
from educenter.schemas.edu_center import EduCenterCreate, EduCenterResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/edu-centers", tags=["edu-centers"])


@router.post(
    "", response_model=EduCenterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_edu_center(
    body: EduCenterCreate, db: AsyncSession = Depends(get_db),
):
    edu_center = EduCenter(**body.model_dump())
    db.add(edu_center)
    await db.commit()
    await db.refresh(edu_center)
    logger.info(
        f"Edu center created: {edu_center.name}",
        extra={"edu_center_id": edu_center.id},
    )
    return edu_center


@router.get("", response_model=list[EduCenterResponse])
async def list_edu_centers(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(EduCenter).order_by(EduCenter.created_at.desc())
        .limit(limit).offset(offset),
    )
    return result.scalars().all()


@router.get("/{edu_center_id}", response_model=EduCenterResponse)
async def get_edu_center(
    edu_center_id: UUID, db: AsyncSession = Depends(get_db),
):
    return await get_or_404(db, EduCenter, edu_center_id, "EduCenter")


@router.delete("/{edu_center_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_edu_center(
    edu_center_id: UUID, db: AsyncSession = Depends(get_db),
):
    edu_center = await get_or_404(db, EduCenter, edu_center_id, "EduCenter")
    await db.delete(edu_center)
    await db.commit()
    logger.info(
        f"Edu center {edu_center_id} deleted",
        extra={"edu_center_id": edu_center_id},
    )
