# src/wonderboard/db/session.py

"""Database engine and session management."""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)

from wonderboard import config

from .models import Base

logger = logging.getLogger(__name__)


def _create_engine() -> AsyncEngine:
    """Create the async engine with appropriate configuration.

    SQLite doesn't support connection pooling, so we only configure
    pool settings for other databases like PostgreSQL.
    """
    url = config.DATABASE_URL

    # SQLite doesn't support connection pooling
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=config.DB_ECHO)

    # PostgreSQL and other databases get full pool configuration
    return create_async_engine(
        url,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=config.DB_POOL_RECYCLE,
        echo=config.DB_ECHO,
    )


# The engine is the core interface to the database.
engine = _create_engine()

# autoflush=False: Changes are not flushed until the repository asks for it.
# expire_on_commit=False: Objects remain accessible after commit.
AsyncSessionLocal = async_sessionmaker(
    bind=engine, autocommit=False, autoflush=False, expire_on_commit=False
)


async def create_schema(bind: AsyncEngine = engine) -> None:
    """Create any missing tables for the relational backend."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready", extra={"url": str(bind.url)})
