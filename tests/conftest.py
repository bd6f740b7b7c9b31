"""
Root conftest: shared pytest fixtures.

Database tests run against an in-memory SQLite database (aiosqlite) created
fresh for every test. bcrypt runs at its minimum cost so hashing stays fast.
"""

import os

# Settings are read once, on first import of chatterbox
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_DEFAULTS", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from chatterbox.shared.models import Base

from tests.factories import CountingHasher


# ===================================================================
# Fixtures
# ===================================================================

@pytest.fixture
def hasher():
    """A cheap hasher that counts its calls."""
    return CountingHasher()


@pytest.fixture
async def engine():
    """Fresh in-memory database with every table created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    """A session for repository/service tests; rolled back afterwards."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(session_factory, hasher):
    """httpx client talking to the app in-process, backed by the test database."""
    from chatterbox.api.dependencies.database import get_db
    from chatterbox.api.dependencies.services import get_hasher
    from chatterbox.api.main import app

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_hasher] = lambda: hasher
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
