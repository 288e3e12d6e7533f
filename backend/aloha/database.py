"""
Taste of Aloha Backend — Database Session Management
=====================================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       session scope shared by requests and scripts.
How:   One engine per process with connection pooling; one session per
       request that commits on success and rolls back on error.
Who:   Used by the SQL store, the maintenance scripts and Alembic.

Connection Pooling:
    pool_size / max_overflow come from settings and only apply to server
    databases. SQLite URLs (local runs, tests) use SQLAlchemy's default
    pool for the dialect.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from aloha.config import settings


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {
        # Echo SQL only when debugging; it is noisy otherwise
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine: AsyncEngine = create_async_engine(settings.database_url, **_engine_options())

# expire_on_commit=False: returned rows stay readable after the request
# session commits (the response is serialized after that point)
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object, which Alembic reads for migrations.
    """
    pass


@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker = async_session_factory,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Transactional scope around a series of operations.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the caller
        3. On success: commits
        4. On error: rolls back and re-raises
        5. Always: closes the session (returns connection to pool)

    Used by the maintenance scripts, the health check and, per request,
    by get_menu_store().
    """
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            # Roll back for ANY failure, including non-DB errors raised
            # after a query succeeded
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_all(target: AsyncEngine = engine) -> None:
    """
    Create every table known to Base.metadata.

    For local development and tests; deployments run `alembic upgrade head`.
    """
    # Registers MenuItem with Base.metadata
    from aloha.models import menu_item  # noqa: F401

    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
