"""Identifier Allocator — pure generation of short, collision-free record codes.

Invariants:
    - Candidates match [A-Z]{3}[0-9]{5}; suffix lies in [10000, 99999]
    - allocate() never returns a member of `existing` and never mutates it
    - Membership is a hash-set lookup; a non-set input is frozen once per call
    - allocate() gives up after max_attempts collisions with CapacityExhaustedError

Design Decisions:
    - Pure and synchronous: reading the snapshot and persisting the result belong
      to the shell (services/identifier_persistence.py)
    - Random source injectable: tests script or seed candidates, production uses
      a fresh random.Random
    - Alphabet, prefix length and suffix range are constructor parameters so a
      tiny keyspace can be exercised; production code uses the defaults
"""

import random
import string
from collections.abc import Collection, Set as AbstractSet
from typing import Protocol

from educenter.core.domain_types import PaymentId
from educenter.core.errors import CapacityExhaustedError

PREFIX_ALPHABET = string.ascii_uppercase
PREFIX_LENGTH = 3
SUFFIX_MIN = 10_000
SUFFIX_MAX = 99_999
DEFAULT_MAX_ATTEMPTS = 1000


class RandomSource(Protocol):
    """Subset of random.Random used by the allocator."""
    def choice(self, seq): ...
    def randint(self, a: int, b: int) -> int: ...


class IdentifierAllocator:
    """Generates identifiers that do not collide with a given snapshot."""

    def __init__(
        self,
        rng: RandomSource | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        alphabet: str = PREFIX_ALPHABET,
        prefix_length: int = PREFIX_LENGTH,
        suffix_min: int = SUFFIX_MIN,
        suffix_max: int = SUFFIX_MAX,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if not alphabet:
            raise ValueError("alphabet cannot be empty")
        if suffix_min > suffix_max:
            raise ValueError("suffix_min must not exceed suffix_max")
        self._rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.alphabet = alphabet
        self.prefix_length = prefix_length
        self.suffix_min = suffix_min
        self.suffix_max = suffix_max

    @property
    def keyspace_size(self) -> int:
        """Number of distinct identifiers this allocator can produce."""
        return len(self.alphabet) ** self.prefix_length * (
            self.suffix_max - self.suffix_min + 1
        )

    def generate_candidate(self) -> PaymentId:
        """Build one random candidate. No uniqueness check."""
        prefix = "".join(
            self._rng.choice(self.alphabet) for _ in range(self.prefix_length)
        )
        suffix = self._rng.randint(self.suffix_min, self.suffix_max)
        return PaymentId(f"{prefix}{suffix}")

    def allocate(
        self, existing: Collection[str], max_attempts: int | None = None,
    ) -> PaymentId:
        """Return the first candidate not present in `existing`.

        Raises CapacityExhaustedError when every one of `max_attempts`
        candidates (defaults to the allocator's bound) collides.
        """
        limit = max_attempts or self.max_attempts
        taken = existing if isinstance(existing, AbstractSet) else frozenset(existing)
        for _ in range(limit):
            candidate = self.generate_candidate()
            if candidate not in taken:
                return candidate
        raise CapacityExhaustedError(limit, "generation")
