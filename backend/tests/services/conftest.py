"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (the payments primary key still rejects duplicates, which is all the
      conflict path needs)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from educenter.db.base import Base
from educenter.infrastructure.database import get_db, DatabaseSessionManager
import educenter.infrastructure.database as db_module
from educenter.main import app
from educenter.models.edu_center import EduCenter
from educenter.models.student import Student


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_edu_center(test_db):
    """Insert an edu center directly into the test DB."""
    edu_center = EduCenter(name="Bright Future Academy", phone="+998901234567")
    test_db.add(edu_center)
    await test_db.commit()
    await test_db.refresh(edu_center)
    return edu_center


@pytest.fixture
async def seed_student(test_db, seed_edu_center):
    """Insert a student belonging to seed_edu_center."""
    student = Student(full_name="Aziza Karimova", edu_center_id=seed_edu_center.id)
    test_db.add(student)
    await test_db.commit()
    await test_db.refresh(student)
    return student
