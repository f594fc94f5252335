"""Payment Identifier Store — SQL read side of the payment identifier namespace.

Invariants:
    - existing_identifiers() returns a frozenset snapshot (hash lookups, immutable)
    - Uniqueness itself is enforced by the payments primary key, not by this class

Design Decisions:
    - Full snapshot read per allocation attempt: one round-trip regardless of how
      many candidates collide; contains() is used only to classify IntegrityError
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from educenter.models.payment import Payment


class SqlPaymentIdentifierStore:
    """IdentifierStore backed by the payments table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def existing_identifiers(self) -> frozenset[str]:
        result = await self._db.execute(select(Payment.id))
        return frozenset(result.scalars().all())

    async def contains(self, identifier: str) -> bool:
        result = await self._db.execute(
            select(Payment.id).where(Payment.id == identifier),
        )
        return result.scalar_one_or_none() is not None
