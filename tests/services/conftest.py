"""Service test fixtures — async DB, engine wiring, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so get_write_lock and readiness checks see the test engine
    - make_service builds an EmployeeService on its own session with a ticking clock

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares one connection,
      so rows committed by one session are visible to the next
    - Ticking clock: each mutation gets a strictly later timestamp, so
      updated_at assertions never depend on wall-clock resolution
"""

import asyncio

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from ems.db.base import Base
import ems.models  # noqa: F401
from ems.infrastructure.database import get_db, DatabaseSessionManager
from ems.infrastructure.employee_store import SqlEmployeeStore
from ems.infrastructure.id_allocator import SqlIdAllocator
from ems.services.employee_service import EmployeeService
import ems.infrastructure.database as db_module
from ems.main import app
from tests.services.ticking_clock import TickingClock


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
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
def clock():
    return TickingClock()


@pytest.fixture
def write_lock():
    return asyncio.Lock()


@pytest.fixture
def service(test_db, write_lock, clock):
    """EmployeeService over the test DB."""
    return EmployeeService(
        SqlEmployeeStore(test_db), SqlIdAllocator(test_db), write_lock, clock,
    )


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
    fake_manager.write_lock = asyncio.Lock()
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
