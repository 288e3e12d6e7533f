"""
Taste of Aloha Backend — Test Configuration (conftest.py)
==========================================================

What:  Shared pytest fixtures for the test suite.

Fixtures:
    ├── mock_db_session: AsyncMock session (no database)
    ├── memory_store:    fresh InMemoryMenuStore per test
    ├── sqlite_factory:  session factory for a private in-memory SQLite database
    ├── sqlite_store:    SqlMenuStore over one session from sqlite_factory
    ├── app:             fresh FastAPI app whose store is memory_store
    ├── test_client:     httpx AsyncClient talking to `app` over ASGI
    ├── db_app:          FastAPI app using the real store dependency on SQLite
    ├── db_client:       httpx AsyncClient talking to `db_app`
    └── malasada:        the sample item payload used across tests
"""

import os

# Settings are read at import time, so the overrides come first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["STORE_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from aloha.database import create_all, session_scope
from aloha.config import settings
from aloha.dependencies import get_menu_store, get_session_factory
from aloha.services.memory_store import InMemoryMenuStore
from aloha.services.sql_store import SqlMenuStore


@pytest.fixture
def mock_db_session():
    """
    A MagicMock that simulates AsyncSession behavior.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = item
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def memory_store():
    return InMemoryMenuStore()


@pytest_asyncio.fixture
async def sqlite_factory():
    """
    Session factory for a throwaway in-memory SQLite database.

    StaticPool keeps the single connection (and so the database) alive for
    the whole test.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_all(engine)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def sqlite_store(sqlite_factory):
    async with session_scope(sqlite_factory) as session:
        yield SqlMenuStore(session)


@pytest.fixture
def app(memory_store):
    from aloha.main import create_app

    application = create_app()
    application.dependency_overrides[get_menu_store] = lambda: memory_store
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def db_app(sqlite_factory, monkeypatch):
    """
    App on the real request path: get_menu_store → session_scope →
    SqlMenuStore, against the SQLite factory instead of the configured URL.
    """
    from aloha.main import create_app

    monkeypatch.setattr(settings, "store_backend", "database")
    application = create_app()
    application.dependency_overrides[get_session_factory] = lambda: sqlite_factory
    return application


@pytest_asyncio.fixture
async def db_client(db_app):
    transport = ASGITransport(app=db_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def malasada():
    return {
        "name": "Malasada",
        "description": "fried dough",
        "price": 3.50,
        "category": "dessert",
    }
