"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions, and OS-level connection failures (refused, reset,
      timed out), mapped to DataAccessError (core/errors.py), tagged with
      the operation name, logged once here and nowhere else
    - No retries: a persistent outage surfaces instead of being hidden

Design Decisions:
    - Manager built by the FastAPI lifespan and stored on app.state; routes get it
      through Depends(get_db_manager), never through a module global
    - One session per read: independent reads in one request can run concurrently
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, TypeVar

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from dashboard.core.errors import DataAccessError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, operation: str = "unknown",
    ) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback; store failures become DataAccessError."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(
                f"DB integrity error in {operation}: {type(e.orig).__name__}",
                extra={"operation": operation},
            )
            raise DataAccessError("Integrity constraint violated", operation) from e
        except OperationalError as e:
            await session.rollback()
            logger.error(
                f"DB operational error in {operation}: {e}",
                extra={"operation": operation},
            )
            raise DataAccessError("Connection or operational error", operation) from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(
                f"DB driver error in {operation}: {e}",
                extra={"operation": operation},
            )
            raise DataAccessError("Database driver error", operation) from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(
                f"SQLAlchemy error in {operation}: {e}",
                extra={"operation": operation},
            )
            raise DataAccessError("Database operation failed", operation) from e
        except (OSError, asyncio.TimeoutError) as e:
            await session.rollback()
            logger.error(
                f"DB connection error in {operation}: {type(e).__name__}",
                extra={"operation": operation},
            )
            raise DataAccessError("Connection failed", operation) from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session("health_check") as db:
                await db.execute(text("SELECT 1"))
            return True
        except DataAccessError:
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


async def with_store_timeout(
    awaitable: Awaitable[T], timeout: float | None, operation: str,
) -> T:
    """Bound a store call; expiry is reported as DataAccessError('timeout')."""
    try:
        return await asyncio.wait_for(awaitable, timeout)
    except asyncio.TimeoutError as e:
        logger.error(
            f"Store call {operation} exceeded {timeout}s",
            extra={"operation": operation},
        )
        raise DataAccessError(f"no response within {timeout}s", "timeout") from e


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """FastAPI dependency for the process-wide session manager."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager
