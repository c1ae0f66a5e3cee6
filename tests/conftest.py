"""
Pytest fixtures - per-test app, SQLite database, client and auth helpers.
Challenge: Isolated tests; each test gets its own Settings, engine and database file.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.core.security import create_access_token, hash_password
from app.db.base import Base
from app.db.models import Item, User
from app.db.repositories import ItemRepository, ReviewRepository, UserRepository
from app.main import create_app

TEST_PASSWORD = "password123"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        secret_key="test-secret",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    application = create_app(settings)
    async with application.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def session(app: FastAPI) -> AsyncGenerator[AsyncSession, None]:
    async with app.state.session_maker() as s:
        yield s


@pytest_asyncio.fixture
async def client(app: FastAPI):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def make_user(session: AsyncSession):
    """Create and commit a user directly through the repository."""

    async def _make(username: str, email: str | None = None, password: str = TEST_PASSWORD) -> User:
        user = await UserRepository(session).create(
            username=username,
            email=email or f"{username}@example.com",
            hashed_password=hash_password(password),
        )
        await session.commit()
        return user

    return _make


@pytest.fixture
def make_item(session: AsyncSession):
    async def _make(name: str = "Test Item", description: str | None = None, category: str | None = None) -> Item:
        item = await ItemRepository(session).create(name=name, description=description, category=category)
        await session.commit()
        return item

    return _make


@pytest.fixture
def make_review(session: AsyncSession):
    async def _make(user: User, item: Item, rating: int = 5, content: str = "Great"):
        review = await ReviewRepository(session).create(
            user_id=user.id, item_id=item.id, rating=rating, content=content
        )
        await session.commit()
        return review

    return _make


@pytest.fixture
def headers_for(settings: Settings):
    """Bearer header for a user, signed with the test app's secret."""

    def _headers(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id, settings)}"}

    return _headers


@pytest_asyncio.fixture
async def test_user(make_user) -> User:
    return await make_user("testuser")


@pytest_asyncio.fixture
async def other_user(make_user) -> User:
    return await make_user("otheruser")


@pytest_asyncio.fixture
async def test_item(make_item) -> Item:
    return await make_item("Test Item 1", "Description for Test Item 1", "Category A")


@pytest.fixture
def auth_headers(test_user: User, headers_for) -> dict:
    return headers_for(test_user)
