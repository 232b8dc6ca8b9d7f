"""
Pytest fixtures - isolated DB per test, HTTP client, registered users.
"""

import os

# Must be set before the app (and its engine) is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("ENVIRONMENT", "test")

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from skillloop.core.security import create_access_token, hash_password
from skillloop.db.base import Base
from skillloop.db.models import User
from skillloop.db.session import get_db
from skillloop.main import app
from tests.helpers import register


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()

@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as s:
        yield s

@pytest_asyncio.fixture
async def client(session: AsyncSession):
    # Same commit/rollback contract as get_db, on one shared session
    async def override_get_db():
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()

@pytest_asyncio.fixture
async def test_user(session: AsyncSession) -> User:
    user = User(
        name="Test User",
        email="test@example.com",
        phone="5550000000",
        hashed_password=hash_password("password123"),
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user

@pytest.fixture
def auth_headers(test_user: User) -> dict:
    token = create_access_token(test_user.id)
    return {"Authorization": f"Bearer {token}"}

@pytest_asyncio.fixture
async def alice(client: AsyncClient) -> dict:
    return await register(client, "Alice", "alice@example.com", "1234567890")

@pytest_asyncio.fixture
async def bob(client: AsyncClient) -> dict:
    return await register(client, "Bob", "bob@example.com", "2345678901")

@pytest_asyncio.fixture
async def carol(client: AsyncClient) -> dict:
    return await register(client, "Carol", "carol@example.com", "3456789012")
