"""Payment Service — create, list, read, update and delete payments.

Invariants:
    - create() verifies the student and the edu center exist before allocating
    - Every new payment gets an allocated identifier and status "not-payed"
    - A primary-key violation on insert becomes IdentifierConflictError; any other
      IntegrityError becomes DatabaseError
    - No payment is ever written without an identifier

Design Decisions:
    - Service takes the request's AsyncSession: one unit of work per request
    - Allocator injected so tests can script candidates
    - Marking a payment "payed" without a date stamps the current UTC time
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from educenter.core.domain_types import PaymentId, PaymentStatus
from educenter.core.errors import (
    DatabaseError, ErrorContext, IdentifierConflictError, ResourceNotFoundError,
    ValidationError,
)
from educenter.core.identifier_allocator import IdentifierAllocator
from educenter.infrastructure.payment_identifier_store import SqlPaymentIdentifierStore
from educenter.models.edu_center import EduCenter
from educenter.models.payment import Payment
from educenter.models.student import Student
from educenter.schemas.payment import PaymentCreate, PaymentUpdate
from educenter.services.identifier_persistence import (
    DEFAULT_CONFLICT_RETRIES, allocate_and_persist,
)

logger = logging.getLogger(__name__)


class PaymentService:
    """Payment workflows over a single database session."""

    def __init__(
        self,
        db: AsyncSession,
        allocator: IdentifierAllocator | None = None,
        conflict_retries: int = DEFAULT_CONFLICT_RETRIES,
    ):
        self._db = db
        self._allocator = allocator or IdentifierAllocator()
        self._conflict_retries = conflict_retries
        self._store = SqlPaymentIdentifierStore(db)

    async def create(self, body: PaymentCreate) -> Payment:
        student = await self._get_student(body.student_id)
        await self._get_edu_center(body.edu_center_id)
        if student.edu_center_id != body.edu_center_id:
            raise ValidationError(
                "Student does not belong to this edu center", "student_id",
                ErrorContext(edu_center_id=str(body.edu_center_id)),
            )

        async def insert(identifier: PaymentId) -> Payment:
            payment = Payment(
                id=identifier,
                **body.model_dump(),
                status=PaymentStatus.NOT_PAYED.value,
            )
            self._db.add(payment)
            try:
                await self._db.commit()
            except IntegrityError as e:
                await self._db.rollback()
                if await self._store.contains(identifier):
                    raise IdentifierConflictError(identifier) from e
                logger.error(f"Payment insert rejected: {e}")
                raise DatabaseError("Integrity constraint violated", "commit") from e
            return payment

        payment = await allocate_and_persist(
            self._allocator, self._store, insert, self._conflict_retries,
        )
        logger.info(
            f"Payment {payment.id} created",
            extra={
                "payment_id": payment.id,
                "edu_center_id": body.edu_center_id,
                "student_id": body.student_id,
            },
        )
        return await self.get_one(payment.id)

    async def find_all(self, edu_center_id: UUID | None) -> list[Payment]:
        if not edu_center_id:
            raise ResourceNotFoundError("EduCenter", "")
        await self._get_edu_center(edu_center_id)
        result = await self._db.execute(
            select(Payment)
            .where(Payment.edu_center_id == edu_center_id)
            .order_by(Payment.created_at.desc()),
        )
        return list(result.scalars().all())

    async def get_one(self, payment_id: str) -> Payment:
        result = await self._db.execute(
            select(Payment)
            .where(Payment.id == payment_id)
            .execution_options(populate_existing=True),
        )
        payment = result.scalar_one_or_none()
        if not payment:
            raise ResourceNotFoundError("Payment", payment_id)
        return payment

    async def update(self, payment_id: str, body: PaymentUpdate) -> Payment:
        payment = await self.get_one(payment_id)
        changes = body.model_dump(exclude_unset=True)
        # required columns cannot be cleared
        for key in ("price", "status", "for_month"):
            if key in changes and changes[key] is None:
                del changes[key]
        if "status" in changes:
            changes["status"] = PaymentStatus(changes["status"]).value
        for key, value in changes.items():
            setattr(payment, key, value)
        if payment.status == PaymentStatus.PAYED.value and payment.date_payed is None:
            payment.date_payed = datetime.now(timezone.utc)
        await self._db.commit()
        logger.info(
            f"Payment {payment_id} updated: {sorted(changes)}",
            extra={"payment_id": payment_id},
        )
        return await self.get_one(payment_id)

    async def remove(self, payment_id: str) -> Payment:
        payment = await self.get_one(payment_id)
        await self._db.delete(payment)
        await self._db.commit()
        logger.info(f"Payment {payment_id} deleted", extra={"payment_id": payment_id})
        return payment

    async def _get_student(self, student_id: UUID) -> Student:
        student = await self._db.get(Student, student_id)
        if not student:
            raise ResourceNotFoundError("Student", str(student_id))
        return student

    async def _get_edu_center(self, edu_center_id: UUID) -> EduCenter:
        edu_center = await self._db.get(EduCenter, edu_center_id)
        if not edu_center:
            raise ResourceNotFoundError("EduCenter", str(edu_center_id))
        return edu_center
