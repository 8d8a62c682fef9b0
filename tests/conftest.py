"""Shared fixtures: a fresh in-memory database per test and an HTTP client.

The application reads its settings at import time, so the environment is
prepared before anything from ``src`` is imported.
"""

import os

os.environ.setdefault("ASYNC_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import src.core.database as db_module
from src.core.database import create_tables, get_session
from src.apps.auth.dependencies import get_user_service
from src.apps.blog.repositories.post_repository import PostRepository
from src.main import app


@pytest.fixture
async def test_engine(monkeypatch):
    # StaticPool keeps the single in-memory connection alive for the whole test
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    monkeypatch.setattr(db_module, "engine", engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def client(test_engine):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def user_service(test_engine):
    return get_user_service()


@pytest.fixture
async def user_token(user_service):
    """Create a user and return its plain-text API token."""
    _, token = await user_service.create_user("Test User", "user@example.com")
    return token


@pytest.fixture
def auth_headers(user_token):
    return {"Authorization": f"Bearer {user_token}"}


@pytest.fixture
def post_repository(test_engine):
    return PostRepository(get_session)  # type: ignore


@pytest.fixture
def make_post(post_repository):
    """Factory inserting posts straight into the database."""
    counter = {"n": 0}

    async def _make(title=None):
        counter["n"] += 1
        return await post_repository.create({"title": title or f"Post {counter['n']}"})

    return _make
