# access_tokens/main.py (async version)

import logging
import asyncio
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.openapi.utils import get_openapi
from contextlib import asynccontextmanager

from access_tokens.adapters.configuration.config import settings
from access_tokens.adapters.outbound.persistence.database import database, get_db_context
from access_tokens.adapters.outbound.persistence import models  # noqa: F401  registers the tables
from access_tokens.adapters.outbound.security.api_key_gate import api_key_gate

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.
    """
    # Startup
    logger.info("Application starting up...")

    if not settings.API_KEY:
        api_key_gate.warn_open_mode()

    if settings.DB_CREATE_ALL:
        await database.create_all()

    app.state.cleanup_task = None
    if settings.TOKEN_CLEANUP_INTERVAL_MINUTES > 0:
        app.state.cleanup_task = asyncio.create_task(
            periodic_cleanup(settings.TOKEN_CLEANUP_INTERVAL_MINUTES)
        )

    yield

    # Shutdown
    logger.info("Application shutting down...")
    if app.state.cleanup_task is not None:
        app.state.cleanup_task.cancel()
        try:
            await app.state.cleanup_task
        except asyncio.CancelledError:
            pass
    await database.dispose()


# Create FastAPI instance
app = FastAPI(
    title="Access Tokens",
    description="Issues and lists opaque bearer access tokens",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
    docs_url="/docs" if settings.SCHEMA_VISIBILITY else None,
    redoc_url="/redoc" if settings.SCHEMA_VISIBILITY else None,
    openapi_url="/openapi.json" if settings.SCHEMA_VISIBILITY else None,
)

# Middlewares
from access_tokens.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
    AsyncSecurityHeadersMiddleware,
    request_validation_exception_handler,
)

# Last added runs first; error responses still pass through logging and headers
app.add_middleware(AsyncExceptionMiddleware)
app.add_middleware(AsyncRequestLoggingMiddleware)
app.add_middleware(AsyncSecurityHeadersMiddleware)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

# Routers
from access_tokens.adapters.inbound.api.router import api_router
from access_tokens.adapters.inbound.api.endpoints import console_endpoint

app.include_router(console_endpoint.router)
app.include_router(api_router, prefix="/api")


@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "ok"}


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    spec = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    # Remove unwanted schemas and 422 responses
    for schema in ("HTTPValidationError", "ValidationError"):
        spec.get("components", {}).get("schemas", {}).pop(schema, None)

    for path in spec.get("paths", {}).values():
        for op in path.values():
            op.get("responses", {}).pop("422", None)

    app.openapi_schema = spec
    return spec


app.openapi = custom_openapi


# ── EXPIRED TOKEN CLEANUP TASK ────────────────────────────────────────────────
async def cleanup_expired_tokens() -> int:
    """Deletes expired tokens from the database."""
    from access_tokens.application.use_cases.token_use_cases import AsyncAccessTokenService

    async with get_db_context() as db:
        return await AsyncAccessTokenService(db).purge_expired_tokens()


async def periodic_cleanup(interval_minutes: int):
    """Background task to periodically clean up expired tokens."""
    while True:
        try:
            await asyncio.sleep(interval_minutes * 60)
            await cleanup_expired_tokens()
        except asyncio.CancelledError:
            logger.info("Token cleanup task cancelled")
            break
        except Exception as e:
            logger.exception(f"Error in cleanup_expired_tokens: {e}")
