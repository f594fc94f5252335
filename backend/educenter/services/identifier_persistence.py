"""Identifier Persistence — allocate-then-persist loop that closes the check-then-act race.

Invariants:
    - Every attempt reads a fresh snapshot; a stale snapshot is never reused after a conflict
    - Only IdentifierConflictError triggers a retry; every other error propagates unchanged
    - After max_retries conflicts, CapacityExhaustedError is raised and nothing is returned

Design Decisions:
    - The store's uniqueness constraint is the arbiter between concurrent writers
      (possibly in different processes), so no in-process lock is taken
    - The allocator stays pure; this module is the only place that touches both the
      snapshot read and the write
"""

import logging
from typing import TypeVar

from educenter.core.errors import CapacityExhaustedError, IdentifierConflictError
from educenter.core.identifier_allocator import IdentifierAllocator
from educenter.core.repository_protocols import IdentifierStore, PersistRecord

logger = logging.getLogger(__name__)

DEFAULT_CONFLICT_RETRIES = 3

T = TypeVar("T")


async def allocate_and_persist(
    allocator: IdentifierAllocator,
    store: IdentifierStore,
    persist: PersistRecord[T],
    max_retries: int = DEFAULT_CONFLICT_RETRIES,
) -> T:
    """Allocate an identifier against a fresh snapshot and persist it.

    Retries with a new snapshot when `persist` reports a uniqueness conflict.
    Returns whatever `persist` returns for the winning identifier.
    """
    for attempt in range(1, max_retries + 1):
        existing = await store.existing_identifiers()
        identifier = allocator.allocate(existing)
        try:
            return await persist(identifier)
        except IdentifierConflictError:
            logger.warning(
                f"Identifier {identifier} taken by a concurrent writer, retrying",
                extra={"attempt": attempt, "payment_id": identifier},
            )
    logger.error(
        f"Identifier allocation gave up after {max_retries} conflicts",
        extra={"attempt": max_retries, "error_code": "IDENTIFIER_CAPACITY_EXHAUSTED"},
    )
    raise CapacityExhaustedError(max_retries, "persist")
