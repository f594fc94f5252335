"""Root conftest — shared test configuration.

Invariants:
    - No test reaches a real database (DATABASE_URL points at SQLite)
    - scripted_rng replays exact identifiers through the allocator's random source
"""

import os
from collections import deque

import pytest

# Ensure tests never reach a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")


class ScriptedRandom:
    """Random source that yields the given identifiers, in order, as candidates."""

    def __init__(self, *identifiers: str):
        self.letters: deque[str] = deque()
        self.suffixes: deque[int] = deque()
        for identifier in identifiers:
            self.letters.extend(identifier[:3])
            self.suffixes.append(int(identifier[3:]))

    def choice(self, seq):
        letter = self.letters.popleft()
        assert letter in seq
        return letter

    def randint(self, a: int, b: int) -> int:
        suffix = self.suffixes.popleft()
        assert a <= suffix <= b
        return suffix

    @property
    def remaining(self) -> int:
        return len(self.suffixes)


class ConstantRandom:
    """Random source that always produces the same candidate."""

    def __init__(self, identifier: str):
        self._letters = identifier[:3]
        self._suffix = int(identifier[3:])
        self._position = 0
        self.candidates = 0

    def choice(self, seq):
        letter = self._letters[self._position % 3]
        self._position += 1
        return letter

    def randint(self, a: int, b: int) -> int:
        self.candidates += 1
        return self._suffix


@pytest.fixture
def scripted_rng():
    """Factory: scripted_rng("ABC12345", "XYZ67890") → ScriptedRandom."""
    return ScriptedRandom


@pytest.fixture
def constant_rng():
    """Factory: constant_rng("AAA10000") → ConstantRandom."""
    return ConstantRandom
