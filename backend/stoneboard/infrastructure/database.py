"""Database Session Manager — async connection pool with explicit lifecycle.

Invariants:
    - open() is called once at process start, close() once at shutdown
    - The manager lives on app.state; routes receive sessions through get_db,
      never through a module-level global
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)

Design Decisions:
    - expire_on_commit=False: rows returned by the store stay readable after commit
    - Pool sizing only applies to server databases; SQLite uses the driver default pool
    - open() creates missing tables when asked, like a "CREATE TABLE IF NOT EXISTS"
      bootstrap; Alembic migrations remain the source of truth for upgrades
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from stoneboard.core.errors import DatabaseError
from stoneboard.db.base import Base
import stoneboard.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


def map_sqlalchemy_error(e: SQLAlchemyError, operation: str) -> DatabaseError:
    """Translate a SQLAlchemy exception into the domain DatabaseError."""
    if isinstance(e, IntegrityError):
        return DatabaseError("Integrity constraint violated", operation)
    if isinstance(e, OperationalError):
        return DatabaseError("Connection or operational error", operation)
    if isinstance(e, DBAPIError):
        return DatabaseError("Database driver error", operation)
    return DatabaseError("Database operation failed", operation)


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions with rollback on error."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 5,
        create_tables: bool = False,
    ):
        self.database_url = database_url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.create_tables = create_tables
        self.engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    async def open(self) -> None:
        """Create the engine, verify connectivity, optionally create tables."""
        if self.engine is not None:
            return
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not self.database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(self.database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        try:
            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                if self.create_tables:
                    await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error(f"DB startup failed: {e}")
            await self.close()
            raise map_sqlalchemy_error(e, "connect") from e
        logger.info("Database pool opened")

    async def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info("Database pool closed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        if self._session_factory is None:
            raise RuntimeError("Database not opened")
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"DB session error: {e}")
            raise map_sqlalchemy_error(e, "session") from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        if self._session_factory is None:
            return False
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """FastAPI dependency: the manager opened in the lifespan."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_db_manager(request).session() as session:
        yield session
