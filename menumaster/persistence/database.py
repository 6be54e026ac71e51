"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import logfire
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from menumaster.config import Settings
from menumaster.domain.error import StoreUnavailableError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


@asynccontextmanager
async def store_errors(operation: str) -> AsyncGenerator[None, None]:
    """Translate driver and connection failures into StoreUnavailableError.

    Constraint violations are real bugs and pass through untouched.

    Args:
        operation: Name of the repository operation, for logs
    """
    try:
        yield
    except IntegrityError:
        raise
    except (DBAPIError, OSError) as e:
        logfire.error("Record store unavailable", operation=operation, error=str(e))
        raise StoreUnavailableError(f"{operation} failed: store unavailable") from e
