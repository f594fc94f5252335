"""Settings — tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from educenter.config import Settings


def test_postgres_url_gets_asyncpg_driver():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_sqlite_url_left_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///x.db")
    assert settings.database_url == "sqlite+aiosqlite:///x.db"


def test_identifier_defaults():
    settings = Settings()
    assert settings.identifier_max_attempts == 1000
    assert settings.identifier_conflict_retries == 3


def test_identifier_bounds_read_from_env(monkeypatch):
    monkeypatch.setenv("IDENTIFIER_MAX_ATTEMPTS", "25")
    monkeypatch.setenv("IDENTIFIER_CONFLICT_RETRIES", "5")
    settings = Settings()
    assert settings.identifier_max_attempts == 25
    assert settings.identifier_conflict_retries == 5


def test_identifier_bound_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(identifier_max_attempts=0)
