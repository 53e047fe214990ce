# tests/conftest.py

"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from wonderboard.api.deps import get_repository
from wonderboard.db.models import Base
from wonderboard.main import app
from wonderboard.repository import JsonFileRepository, Repository, SqlRepository

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Fixture providing a fresh in-memory database per test.
    StaticPool keeps the single connection alive so every session sees it.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Fixture to provide a database session bound to the test database."""
    session_factory = async_sessionmaker(
        bind=db_engine, expire_on_commit=False, autocommit=False, autoflush=False
    )
    async with session_factory() as session:
        yield session


@pytest.fixture
def sql_repository(db_session: AsyncSession) -> SqlRepository:
    return SqlRepository(db_session)


@pytest.fixture
def file_repository(tmp_path) -> JsonFileRepository:
    repository = JsonFileRepository(tmp_path / "data.json")
    repository.load()
    return repository


@pytest.fixture(params=["sql", "file"])
def repository(
    request, sql_repository: SqlRepository, file_repository: JsonFileRepository
) -> Repository:
    """Fixture running a test once against each storage backend."""
    if request.param == "sql":
        return sql_repository
    return file_repository


@pytest.fixture
async def async_client(repository: Repository) -> AsyncGenerator[AsyncClient, None]:
    """Fixture to provide an async test client for the API."""

    # Override the repository dependency to use the test backend
    async def override_get_repository() -> AsyncGenerator[Repository, None]:
        yield repository

    app.dependency_overrides[get_repository] = override_get_repository

    transport = ASGITransport(app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    # Clean up the override after the test
    del app.dependency_overrides[get_repository]
