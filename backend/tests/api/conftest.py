"""Route test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager points at the test engine so readiness probes see it

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features are not exercised here)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from company_api.db.base import Base
from company_api.infrastructure.database import get_db, DatabaseSessionManager
from company_api.models.company import Company
from company_api.models.employee import Employee
import company_api.infrastructure.database as db_module
from company_api.main import app


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
async def client(test_engine):
    """FastAPI test client with DB dependency overridden."""
    manager = DatabaseSessionManager.from_engine(test_engine)

    async def override_get_db():
        async with manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = db_module.db_manager
    db_module.db_manager = manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager

@pytest.fixture
async def seed_company(test_db):
    """Acme with three employees of different ages."""
    company = Company(
        name="Acme", address="1 Main St", country="USA",
        employees=[
            Employee(name="Sam Raiden", age=26, position="Software developer"),
            Employee(name="Jana McLeaf", age=30, position="Software developer"),
            Employee(name="Kane Miller", age=35, position="Administrator"),
        ],
    )
    test_db.add(company)
    await test_db.commit()
    return company
