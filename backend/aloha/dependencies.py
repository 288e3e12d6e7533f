"""
Taste of Aloha Backend — FastAPI Dependencies
==============================================

What:  Provides the MenuStore each request works against.
How:   STORE_BACKEND=database → a SqlMenuStore over a request-scoped session
       (rollback on error); STORE_BACKEND=memory → the process-wide
       InMemoryMenuStore.

Tests replace get_session_factory (to point at a throwaway SQLite engine)
or get_menu_store (to inject a store directly) through
app.dependency_overrides.
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker

from aloha.config import settings
from aloha.database import async_session_factory, session_scope
from aloha.services.memory_store import memory_store
from aloha.services.sql_store import SqlMenuStore
from aloha.services.store_base import MenuStore


def get_session_factory() -> async_sessionmaker:
    return async_session_factory


async def get_menu_store(
    factory: async_sessionmaker = Depends(get_session_factory),
) -> AsyncGenerator[MenuStore, None]:
    if settings.store_backend == "memory":
        yield memory_store
        return

    # Handlers commit their own writes; this scope rolls back whatever a
    # failed request left behind
    async with session_scope(factory) as session:
        yield SqlMenuStore(session)
