"""Payments — REST surface over PaymentService.

Invariants:
    - Identifiers are never accepted from the client; POST always allocates one
    - Allocation exhaustion surfaces as 503 IDENTIFIER_CAPACITY_EXHAUSTED, no record written
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from educenter.config import get_settings
from educenter.core.identifier_allocator import IdentifierAllocator
from educenter.infrastructure.database import get_db
from educenter.schemas.payment import PaymentCreate, PaymentResponse, PaymentUpdate
from educenter.services.payment_service import PaymentService

router = APIRouter(prefix="/api/v1/payments", tags=["payments"])


def get_payment_service(db: AsyncSession = Depends(get_db)) -> PaymentService:
    settings = get_settings()
    return PaymentService(
        db,
        IdentifierAllocator(max_attempts=settings.identifier_max_attempts),
        conflict_retries=settings.identifier_conflict_retries,
    )


@router.post(
    "", response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_payment(
    body: PaymentCreate, service: PaymentService = Depends(get_payment_service),
):
    return await service.create(body)


@router.get("", response_model=list[PaymentResponse])
async def list_payments(
    edu_center_id: UUID | None = Query(None),
    service: PaymentService = Depends(get_payment_service),
):
    return await service.find_all(edu_center_id)


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(
    payment_id: str, service: PaymentService = Depends(get_payment_service),
):
    return await service.get_one(payment_id)


@router.patch("/{payment_id}", response_model=PaymentResponse)
async def update_payment(
    payment_id: str,
    body: PaymentUpdate,
    service: PaymentService = Depends(get_payment_service),
):
    return await service.update(payment_id, body)


@router.delete("/{payment_id}", response_model=PaymentResponse)
async def delete_payment(
    payment_id: str, service: PaymentService = Depends(get_payment_service),
):
    return await service.remove(payment_id)
