"""
Pytest fixtures for test database, client, and authentication.

Each test gets its own SQLite database file, so concurrent sessions really
are separate connections and the unique constraints are exercised for real.
"""

import datetime as dt
from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from meetx.main import app
from meetx.db.base import Base
from meetx.db.session import get_db
from meetx.core.security import create_access_token, hash_password
from meetx.models.user import User
from meetx.models.activity import Activity

TEST_PASSWORD = "testpassword123"


@pytest_asyncio.fixture
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker, None]:
    """Fresh schema in a throwaway SQLite file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'meetx_test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests each get their own session on the test database."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _create_user(session: AsyncSession, name: str, email: str) -> User:
    user = User(
        name=name,
        email=email,
        phone="5551234",
        hashed_password=hash_password(TEST_PASSWORD),
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user in the database."""
    return await _create_user(db_session, "Test User", "test@example.com")


@pytest_asyncio.fixture
async def other_user(db_session: AsyncSession) -> User:
    return await _create_user(db_session, "Other User", "other@example.com")


@pytest_asyncio.fixture
async def auth_token(test_user: User) -> str:
    return create_access_token(test_user.id)


@pytest_asyncio.fixture
async def auth_headers(auth_token: str) -> dict:
    """Authorization headers with Bearer token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest_asyncio.fixture
async def other_headers(other_user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}


@pytest_asyncio.fixture
async def test_activity(db_session: AsyncSession, test_user: User) -> Activity:
    """Create an activity a month from now."""
    activity = Activity(
        title="Morning Yoga",
        description="Gentle flow session in the park",
        location="Central Park",
        date=dt.date.today() + dt.timedelta(days=30),
        time="07:30",
        capacity=20,
        created_by=test_user.id,
    )
    db_session.add(activity)
    await db_session.commit()
    await db_session.refresh(activity)
    return activity


@pytest_asyncio.fixture
async def second_activity(db_session: AsyncSession) -> Activity:
    activity = Activity(
        title="Evening Climbing",
        description="Indoor bouldering for all levels",
        location="Rock Gym",
        date=dt.date.today() + dt.timedelta(days=10),
        time="18:00",
    )
    db_session.add(activity)
    await db_session.commit()
    await db_session.refresh(activity)
    return activity
