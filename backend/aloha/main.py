"""
Taste of Aloha Backend — FastAPI Application Factory
=====================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires middleware, exception handlers and routes; the
       module-level `app` is what uvicorn serves (uvicorn aloha.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → GZip → CORS    │
    │                                                     │
    │  Routes:                                            │
    │    /api/menu    (menu_service, whole table)         │
    │    /api/snacks  (snack_service, Snack category)     │
    │    /health, /                                       │
    │                                                     │
    │  Exception Handlers:                                │
    │    NotFound→404 │ Validation→500 │ Database→500     │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging, configuration check, SQLite table bootstrap
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from aloha import __version__
from aloha.config import settings
from aloha.database import create_all, dispose_engine
from aloha.exceptions import DatabaseError, NotFoundError, ValidationError
from aloha.middleware.logging import RequestLoggingMiddleware
from aloha.middleware.request_id import RequestIDMiddleware, request_id_var
from aloha.routes import health, items
from aloha.schemas.common import ErrorResponse
from aloha.services.menu_service import menu_service, snack_service

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure application-wide logging once, before anything else logs.

    Format: 2024-05-01T10:00:00 [INFO] aloha.services.menu_service: message
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's access log duplicates aloha.access
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Taste of Aloha backend starting up (store=%s)", settings.store_backend)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving so /health can report the problem
        logger.error("Configuration error: %s", str(e))

    if settings.store_backend == "database" and settings.is_sqlite:
        # No migrations for throwaway SQLite databases
        await create_all()
        logger.info("SQLite tables ensured")

    logger.info("Server running at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def current_request_id(request: Request) -> Optional[str]:
    """
    The id RequestIDMiddleware assigned to this request.

    Read from request.state, which lives in the ASGI scope and so also
    reaches the catch-all handler running outside the middleware stack.
    """
    return getattr(request.state, "request_id", None) or request_id_var.get("") or None


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    request_id = current_request_id(request)
    body = ErrorResponse(
        error=error,
        message=message,
        details=details or None,
        request_id=request_id,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
        headers={"X-Request-ID": request_id} if request_id else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler table:
        NotFoundError           → 404
        ValidationError         → 500, failure message echoed
        RequestValidationError  → 500 (non-integer id, unparseable JSON)
        DatabaseError           → 500, underlying reason in details
        Exception (fallback)    → 500, generic message
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(request, 404, "not_found", exc.message, exc.context)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("Validation error on %s %s: %s", request.method, request.url.path, exc.message)
        return error_response(request, 500, "validation_error", exc.message, exc.context)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        first = exc.errors()[0] if exc.errors() else {}
        field = ".".join(str(part) for part in first.get("loc", ())) or "request"
        message = f"{field}: {first.get('msg', 'invalid request')}"
        logger.warning("Request rejected on %s %s: %s", request.method, request.url.path, message)
        return error_response(request, 500, "validation_error", message, {"field": field})

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        return error_response(request, 500, "persistence_error", exc.message, exc.context)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return error_response(
            request,
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Tests build their own instance and override get_menu_store on it.
    """
    app = FastAPI(
        title="Taste of Aloha API",
        description="Menu items and snacks for the Taste of Aloha restaurant site.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(items.build_router("/api/menu", menu_service, "Menu"))
    app.include_router(items.build_router("/api/snacks", snack_service, "Snacks"))
    app.include_router(health.router)

    return app


app = create_app()
