"""
Pytest configuration and fixtures for Brainly tests.
"""

import os

os.environ.setdefault("SECRET_KEY", "test_secret_key_for_testing_only")
os.environ.setdefault("REDIS_URL", "")

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import crud
from auth import create_access_token
from config import API_PREFIX
from database import Base, get_db
from main import app
from schemas import UserCreate


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_engine():
    """Create a test database engine with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
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
def session_maker(db_engine):
    return sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    """HTTP client bound to the app, with the database dependency overridden."""

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def _create_user(session_maker, username, password="password1"):
    # separate session so the returned user is detached and fully loaded
    async with session_maker() as session:
        return await crud.signup(session, UserCreate(username=username, password=password))


@pytest.fixture
async def test_user(session_maker):
    return await _create_user(session_maker, "alice_01")


@pytest.fixture
async def other_user(session_maker):
    return await _create_user(session_maker, "bob_02")


@pytest.fixture
def auth_headers(test_user) -> dict:
    return {"Authorization": create_access_token(test_user.id)}


@pytest.fixture
def other_headers(other_user) -> dict:
    return {"Authorization": create_access_token(other_user.id)}


@pytest.fixture
def api():
    """Build a path under the API prefix."""
    return lambda path: f"{API_PREFIX}{path}"
