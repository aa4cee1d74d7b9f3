"""
Pytest configuration and fixtures for the blog API tests
"""

import os
import sys
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from blog.auth import create_access_token, hash_password  # noqa: E402
from blog.database import Base, get_db  # noqa: E402
from blog.models import Category, Media, User  # noqa: E402
from main import create_app  # noqa: E402

# One private in-memory database per test; StaticPool keeps the single
# connection alive so every session sees the same schema.
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Session for service-level tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def test_user(test_db: AsyncSession) -> User:
    user = User(
        username="author",
        email="author@example.com",
        hashed_password=hash_password("secret-password"),
    )
    test_db.add(user)
    await test_db.commit()
    return user


@pytest.fixture
async def tech_category(test_db: AsyncSession) -> Category:
    category = Category(name="Tech", slug="tech")
    test_db.add(category)
    await test_db.commit()
    return category


@pytest.fixture
async def news_category(test_db: AsyncSession) -> Category:
    category = Category(name="News", slug="news")
    test_db.add(category)
    await test_db.commit()
    return category


@pytest.fixture
async def cover_image(test_db: AsyncSession) -> Media:
    media = Media(url="https://cdn.example.com/cover.png", alt_text="Cover")
    test_db.add(media)
    await test_db.commit()
    return media


@pytest.fixture
def auth_headers(test_user: User) -> dict[str, str]:
    token = create_access_token({"sub": test_user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app with the test database."""
    app = create_app()

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Unhandled errors are rendered by the 500 handler instead of re-raised
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
