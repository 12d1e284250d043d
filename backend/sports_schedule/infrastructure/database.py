"""Database Session Manager — async engine, per-request sessions and store error mapping.

Invariants:
    - A session that raises rolls back before the error leaves this module
    - SQLAlchemy exceptions surface as DatabaseError (500); domain errors pass through untouched
    - Pool sizing applies to server databases only; sqlite URLs get the driver default pool

Design Decisions:
    - Module-level db_manager set by init_db() in the FastAPI lifespan; tests swap it directly
    - expire_on_commit=False: routes serialize ORM rows after the commit that created them
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from sports_schedule.core.errors import DatabaseError

logger = logging.getLogger(__name__)

# most specific first: IntegrityError and OperationalError are DBAPIErrors
_STORE_FAILURES: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Constraint violated while writing", "commit"),
    (OperationalError, "Database unreachable or busy", "execute"),
    (DBAPIError, "Database driver rejected the statement", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def _as_database_error(exc: SQLAlchemyError) -> DatabaseError:
    for kind, message, operation in _STORE_FAILURES:
        if isinstance(exc, kind):
            return DatabaseError(message, operation)
    return DatabaseError("Database operation failed", "unknown")


def _engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict:
    options = {"pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
        )
    return options


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions for the schedule store."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            **_engine_options(database_url, pool_size, max_overflow),
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            error = _as_database_error(e)
            logger.error(
                f"{error.message}: {e}", extra={"error_code": error.code},
            )
            raise error from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """SELECT 1 round trip, used by the readiness probe."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except (DatabaseError, OSError) as e:
            logger.error(f"Readiness ping failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    logger.info("Database engine created")
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
