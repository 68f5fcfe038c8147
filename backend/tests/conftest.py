"""Shared fixtures: the onboarding test database and API clients.

Database-backed fixtures run against "<DATABASE_NAME>_test" and skip the
test when nothing listens on DATABASE_HOST:DATABASE_PORT.
"""

import socket
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import settings
from app.models import Candidate, User
from app.models.base import Base

TEST_DATABASE_URL = (
    f"{settings.database_url.rsplit('/', 1)[0]}/{settings.database_name}_test"
)

# Same id the 001 migration seeds as the local user
TEST_USER_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")
TEST_CANDIDATE_ID = uuid.UUID("00000000-0000-0000-0000-000000000002")


def _postgres_listening() -> bool:
    try:
        with socket.create_connection(
            (settings.database_host, settings.database_port), timeout=1
        ):
            return True
    except OSError:
        return False


_POSTGRES_UP = _postgres_listening()


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Engine on a freshly created schema, dropped again afterwards."""
    if not _POSTGRES_UP:
        pytest.skip(
            f"no PostgreSQL on {settings.database_host}:{settings.database_port}"
        )

    engine = create_async_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    user = User(id=TEST_USER_ID, email="candidate@example.com")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def test_candidate(db_session: AsyncSession, test_user: User) -> Candidate:
    """Candidate of test_user with no step rows and the flag unset."""
    candidate = Candidate(
        id=TEST_CANDIDATE_ID,
        user_id=test_user.id,
        full_name="Test Candidate",
        career_stage="mid",
    )
    db_session.add(candidate)
    await db_session.commit()
    await db_session.refresh(candidate)
    return candidate


@asynccontextmanager
async def _api_client(
    engine: AsyncEngine,
    monkeypatch: pytest.MonkeyPatch,
    user_id: uuid.UUID | None,
) -> AsyncGenerator[AsyncClient, None]:
    """Client for app.main.app acting as user_id against the test database."""
    from app.core.database import get_db
    from app.main import app

    factory = async_sessionmaker(engine, expire_on_commit=False)

    async def test_db() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            yield session
            await session.commit()

    monkeypatch.setattr(settings, "default_user_id", user_id)
    app.dependency_overrides[get_db] = test_db
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(
    db_engine: AsyncEngine,
    test_candidate: Candidate,  # noqa: ARG001 - user and candidate rows must exist
    monkeypatch: pytest.MonkeyPatch,
) -> AsyncGenerator[AsyncClient, None]:
    """API client whose DEFAULT_USER_ID is TEST_USER_ID."""
    async with _api_client(db_engine, monkeypatch, TEST_USER_ID) as ac:
        yield ac


@pytest_asyncio.fixture
async def unauthenticated_client(
    db_engine: AsyncEngine, monkeypatch: pytest.MonkeyPatch
) -> AsyncGenerator[AsyncClient, None]:
    """API client with DEFAULT_USER_ID unset."""
    async with _api_client(db_engine, monkeypatch, None) as ac:
        yield ac
