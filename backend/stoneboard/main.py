"""Stoneboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StoneboardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The database pool is opened once in the lifespan, stored on app.state,
      and closed on shutdown
    - A database that cannot be reached at startup terminates the process

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Storage handle on app.state instead of a module global so tests and
      multiple apps can hold their own
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stoneboard.api.error_handlers import register_error_handlers
from stoneboard.api.routes import debug, health, maps_config, posts
from stoneboard.config import get_settings
from stoneboard.core.errors import DatabaseError
from stoneboard.infrastructure.database import DatabaseSessionManager
from stoneboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        create_tables=settings.database_create_tables,
    )
    try:
        await db_manager.open()
    except DatabaseError as e:
        logger.critical(f"Database unavailable at startup, exiting: {e.message}")
        raise SystemExit(1) from e
    app.state.db_manager = db_manager
    logger.info(
        f"Stoneboard API started (pin color policy: {settings.pin_color_policy.value})",
    )
    try:
        yield
    finally:
        logger.info("Stoneboard API shutting down")
        await db_manager.close()


app = FastAPI(
    title="Stoneboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(health.router)
app.include_router(posts.router)
app.include_router(debug.router)
app.include_router(maps_config.router)

register_error_handlers(app)
