"""
Taste of Aloha Backend — Health & Root Routes
==============================================

What:  GET /health for liveness probes and GET / with a static greeting.
How:   /health runs a lightweight SELECT 1 through the SQL store (skipped for
       the in-memory backend) and reports the result.

Status levels:
    ok:        store answered
    degraded:  store unreachable (HTTP 200 still; the process is alive)
"""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import async_sessionmaker

from aloha import __version__
from aloha.config import settings
from aloha.database import async_session_factory, session_scope
from aloha.dependencies import get_session_factory
from aloha.schemas.common import HealthResponse
from aloha.services.sql_store import SqlMenuStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

GREETING = "Taste of Aloha backend is running 🌺"

_start_time = time.time()


async def check_store(factory: async_sessionmaker = async_session_factory) -> str:
    """Returns "memory", "connected" or "disconnected"."""
    if settings.store_backend == "memory":
        return "memory"
    try:
        async with session_scope(factory) as session:
            await SqlMenuStore(session).ping()
    except Exception as e:
        logger.warning("Health check: database unreachable: %s", str(e))
        return "disconnected"
    return "connected"


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def root() -> str:
    return GREETING


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Used by container health checks; excluded from the request log.",
)
async def health_check(
    factory: async_sessionmaker = Depends(get_session_factory),
) -> HealthResponse:
    store_status = await check_store(factory)

    return HealthResponse(
        status="degraded" if store_status == "disconnected" else "ok",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        store=store_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
