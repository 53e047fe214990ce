# src/wonderboard/api/deps.py

"""FastAPI dependencies that hand a Repository to the route handlers."""

import logging
from typing import AsyncGenerator

from wonderboard import config
from wonderboard.db.session import AsyncSessionLocal
from wonderboard.repository import JsonFileRepository, Repository, SqlRepository

logger = logging.getLogger(__name__)

# The file backend is one shared document per process
_file_repository: JsonFileRepository | None = None


def get_file_repository() -> JsonFileRepository:
    """Return the process-wide file repository, loading it on first use."""
    global _file_repository
    if _file_repository is None:
        repository = JsonFileRepository(config.DATA_FILE)
        repository.load()
        _file_repository = repository
    return _file_repository


async def get_repository() -> AsyncGenerator[Repository, None]:
    """FastAPI dependency that provides the configured repository.

    The SQL backend gets a fresh session per request, rolled back on
    exceptions and closed afterwards.
    """
    if config.STORAGE_BACKEND == "file":
        yield get_file_repository()
        return

    async with AsyncSessionLocal() as session:
        try:
            yield SqlRepository(session)
        except Exception as e:
            logger.error(f"Database session error, rolling back: {e}")
            await session.rollback()
            raise
