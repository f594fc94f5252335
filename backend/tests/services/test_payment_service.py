"""Payment Service — tests for payment workflows against a real SQL store.

Tests cover:
    - create assigns a short-code identifier and status "not-payed"
    - create validates the student and the edu center
    - a primary-key collision on insert is retried with a fresh snapshot
    - allocation failure leaves no record behind
    - find_all / get_one / update / remove
"""

import re
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from educenter.core.errors import (
    CapacityExhaustedError, ResourceNotFoundError, ValidationError,
)
from educenter.core.identifier_allocator import IdentifierAllocator
from educenter.models.edu_center import EduCenter
from educenter.models.payment import Payment
from educenter.models.student import Student
from educenter.schemas.payment import PaymentCreate, PaymentUpdate
from educenter.services.payment_service import PaymentService


def _create_body(student, **overrides) -> PaymentCreate:
    fields = {
        "student_id": student.id,
        "edu_center_id": student.edu_center_id,
        "price": Decimal("450000.00"),
        "note": "October tuition",
        "for_month": "2026-10",
    }
    fields.update(overrides)
    return PaymentCreate(**fields)


async def _payment_count(db) -> int:
    return (await db.execute(select(func.count()).select_from(Payment))).scalar_one()


async def _seed_payment(db, student, identifier: str) -> None:
    db.add(Payment(
        id=identifier, student_id=student.id, edu_center_id=student.edu_center_id,
        price=Decimal("1.00"), for_month="2026-09",
    ))
    await db.commit()
    db.expunge_all()


async def test_create_assigns_identifier_and_initial_status(test_db, seed_student):
    service = PaymentService(test_db)

    payment = await service.create(_create_body(seed_student))

    assert re.match(r"^[A-Z]{3}[0-9]{5}$", payment.id)
    assert payment.status == "not-payed"
    assert payment.student.full_name == "Aziza Karimova"
    assert payment.price == Decimal("450000.00")


async def test_create_skips_identifiers_already_in_table(
    test_db, seed_student, scripted_rng,
):
    await _seed_payment(test_db, seed_student, "ABC12345")
    allocator = IdentifierAllocator(rng=scripted_rng("ABC12345", "XYZ67890"))
    service = PaymentService(test_db, allocator)

    payment = await service.create(_create_body(seed_student))

    assert payment.id == "XYZ67890"


async def test_create_retries_after_primary_key_conflict(
    test_db, seed_student, scripted_rng,
):
    await _seed_payment(test_db, seed_student, "ABC12345")
    allocator = IdentifierAllocator(
        rng=scripted_rng("ABC12345", "ABC12345", "XYZ67890"),
    )
    service = PaymentService(test_db, allocator)

    real_snapshot = service._store.existing_identifiers
    reads = []

    async def stale_then_real():
        reads.append(1)
        if len(reads) == 1:
            return frozenset()  # snapshot taken before the concurrent insert
        return await real_snapshot()

    service._store.existing_identifiers = stale_then_real

    payment = await service.create(_create_body(seed_student))

    assert payment.id == "XYZ67890"
    assert len(reads) == 2
    assert await _payment_count(test_db) == 2


async def test_create_exhaustion_writes_nothing(test_db, seed_student, constant_rng):
    await _seed_payment(test_db, seed_student, "AAA10000")
    allocator = IdentifierAllocator(rng=constant_rng("AAA10000"), max_attempts=10)
    service = PaymentService(test_db, allocator)

    with pytest.raises(CapacityExhaustedError):
        await service.create(_create_body(seed_student))

    assert await _payment_count(test_db) == 1


async def test_create_rejects_unknown_student(test_db, seed_student):
    service = PaymentService(test_db)
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await service.create(_create_body(seed_student, student_id=uuid4()))
    assert exc_info.value.resource_type == "Student"


async def test_create_rejects_unknown_edu_center(test_db, seed_student):
    service = PaymentService(test_db)
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await service.create(_create_body(seed_student, edu_center_id=uuid4()))
    assert exc_info.value.resource_type == "EduCenter"


async def test_create_rejects_student_from_other_center(test_db, seed_student):
    other = EduCenter(name="Other Center")
    test_db.add(other)
    await test_db.commit()
    service = PaymentService(test_db)

    with pytest.raises(ValidationError):
        await service.create(_create_body(seed_student, edu_center_id=other.id))
    assert await _payment_count(test_db) == 0


async def test_find_all_scopes_to_edu_center(test_db, seed_student):
    other = EduCenter(name="Other Center")
    test_db.add(other)
    await test_db.commit()
    other_student = Student(full_name="Bobur Aliyev", edu_center_id=other.id)
    test_db.add(other_student)
    await test_db.commit()

    service = PaymentService(test_db)
    mine = await service.create(_create_body(seed_student))
    await service.create(_create_body(other_student))

    payments = await service.find_all(seed_student.edu_center_id)

    assert [p.id for p in payments] == [mine.id]


async def test_find_all_requires_edu_center(test_db):
    service = PaymentService(test_db)
    with pytest.raises(ResourceNotFoundError):
        await service.find_all(None)
    with pytest.raises(ResourceNotFoundError):
        await service.find_all(uuid4())


async def test_get_one_missing_raises(test_db):
    with pytest.raises(ResourceNotFoundError):
        await PaymentService(test_db).get_one("NOP00000")


async def test_update_marks_payed_and_stamps_date(test_db, seed_student):
    service = PaymentService(test_db)
    created = await service.create(_create_body(seed_student))

    updated = await service.update(created.id, PaymentUpdate(status="payed"))

    assert updated.id == created.id
    assert updated.status == "payed"
    assert updated.date_payed is not None


async def test_update_applies_only_given_fields(test_db, seed_student):
    service = PaymentService(test_db)
    created = await service.create(_create_body(seed_student))

    updated = await service.update(
        created.id, PaymentUpdate(price=Decimal("500000"), status=None),
    )

    assert updated.price == Decimal("500000")
    assert updated.status == "not-payed"
    assert updated.note == "October tuition"
    assert updated.date_payed is None


async def test_remove_returns_payment_and_deletes_it(test_db, seed_student):
    service = PaymentService(test_db)
    created = await service.create(_create_body(seed_student))

    removed = await service.remove(created.id)

    assert removed.id == created.id
    with pytest.raises(ResourceNotFoundError):
        await service.get_one(created.id)
