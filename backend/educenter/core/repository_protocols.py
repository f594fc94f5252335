"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but the allocator that consumes their results is never async itself
"""

from collections.abc import Awaitable, Set as AbstractSet
from typing import Protocol, TypeVar

from educenter.core.domain_types import PaymentId

T_co = TypeVar("T_co", covariant=True)


class IdentifierStore(Protocol):
    """Read side of a durable identifier namespace, implemented by shell."""
    async def existing_identifiers(self) -> AbstractSet[str]: ...


class PersistRecord(Protocol[T_co]):
    """Writes a record under the given identifier.

    Must raise IdentifierConflictError when the store rejects the identifier
    on its uniqueness constraint.
    """
    def __call__(self, identifier: PaymentId) -> Awaitable[T_co]: ...
