"""
Database Connection Handle

Explicitly constructed handle around a SQLAlchemy async engine and its
connection pool. Created once at startup, passed to every component that
needs the store, and disposed at shutdown.

Responsibility:
    - Own the engine and connection pool (sized from Settings)
    - Scoped transactions with guaranteed release of the connection
    - Rollback on any exception inside the transaction block
    - Translate driver failures into TransientStoreError
    - Health check and schema creation helpers

Architecture Notes:
    - Infrastructure Layer (external dependency on the database)
    - No module-level singleton: the API lifespan and the Celery worker each
      build their own Database and dispose it when they stop
    - SQLite URLs use NullPool so every checkout opens a fresh connection
      (tests, local development)

Error Handling:
    - SQLAlchemyError anywhere in acquire/begin/execute/commit ->
      rollback (when a transaction is open), connection released,
      TransientStoreError raised
    - DomainException raised inside the block -> rollback, re-raised unchanged
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import replace
from typing import Any, AsyncIterator, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from hr_tracker.domain.shared.exceptions import TransientStoreError
from hr_tracker.infrastructure.persistence.database.tables import metadata
from hr_tracker.shared.config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database URL.

    Pool sizing (DB_POOL_SIZE, DB_MAX_OVERFLOW, DB_POOL_TIMEOUT,
    DB_POOL_RECYCLE) applies to server databases only.
    """
    engine_kwargs: dict[str, Any] = {"echo": settings.db_echo}

    if settings.is_sqlite:
        engine_kwargs["poolclass"] = NullPool
    else:
        engine_kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_recycle=settings.db_pool_recycle,
            pool_pre_ping=True,
        )

    logger.info(
        f"Creating database engine: url={_redacted(settings.database_url)}, "
        f"pool_size={settings.db_pool_size if not settings.is_sqlite else 'n/a'}"
    )
    return create_async_engine(settings.database_url, **engine_kwargs)


def _redacted(url: str) -> str:
    # Hide credentials in log lines
    if "@" not in url or "://" not in url:
        return url
    scheme, rest = url.split("://", 1)
    return f"{scheme}://***@{rest.split('@', 1)[1]}"


class Database:
    """
    Store handle injected into repositories.

    Usage:
        >>> database = Database.from_settings(settings)
        >>> async with database.transaction() as conn:
        ...     await conn.execute(stmt)
        >>> await database.dispose()
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(build_engine(settings))

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncConnection]:
        """
        Borrow a connection and run the block inside one transaction.

        Commits when the block exits normally; rolls back when it raises.
        The connection is returned to the pool on every exit path.

        Raises:
            TransientStoreError: The database failed (already rolled back)
        """
        try:
            async with self.engine.connect() as conn:
                trans = await conn.begin()
                try:
                    yield conn
                except BaseException:
                    if trans.is_active:
                        await trans.rollback()
                        logger.debug("Transaction rolled back")
                    raise
                if trans.is_active:
                    await trans.commit()
        except SQLAlchemyError as e:
            logger.error(f"Database error, transaction rolled back: {e}")
            raise TransientStoreError(
                "Database operation failed", original_error=e
            ) from e

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[AsyncConnection]:
        """Borrow a connection for read-only work (no explicit transaction)."""
        try:
            async with self.engine.connect() as conn:
                yield conn
        except SQLAlchemyError as e:
            logger.error(f"Database error during read: {e}")
            raise TransientStoreError("Database read failed", original_error=e) from e

    async def create_schema(self) -> None:
        """Create owned tables if they do not exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info("Database schema ensured")

    async def health_check(self) -> bool:
        """
        Check database connectivity with SELECT 1.

        Returns False on any database error (doesn't raise).
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Database health check failed: {e}")
            return False

    async def dispose(self) -> None:
        """Close pooled connections. Safe to call multiple times."""
        logger.info("Disposing database engine")
        await self.engine.dispose()


def database_from_url(url: str, settings: Optional[Settings] = None) -> Database:
    """Build a Database for an explicit URL, keeping other settings."""
    return Database.from_settings(replace(settings or Settings(), database_url=url))
