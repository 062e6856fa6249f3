"""Test configuration for database e2e tests.

This module provides fixtures for running the game catalogue persistence
layer against a real PostgreSQL server started with testcontainers.

The suite is skipped unless ``DATABASE__ENABLE_POSTGRES_TESTS=true``.
"""

from __future__ import annotations

from test.settings import test_settings
from typing import AsyncGenerator, Generator

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from game_persistence.core.database import create_all, create_engine, create_sessionmaker, drop_all

pytestmark = pytest.mark.e2e


@pytest.fixture(scope="session")
def postgres_container() -> Generator:
    """Start a PostgreSQL container for the whole test session."""
    if not test_settings.database.enable_postgres_tests:
        pytest.skip("PostgreSQL e2e tests are disabled (set DATABASE__ENABLE_POSTGRES_TESTS=true)")

    from testcontainers.postgres import PostgresContainer

    postgres_config = test_settings.database.postgres
    container = PostgresContainer(
        test_settings.database.postgres_image,
        username=postgres_config.user,
        password=postgres_config.password.get_secret_value(),
        dbname=postgres_config.db,
    )
    with container as pg:
        yield pg


@pytest.fixture(scope="session")
def database_url(postgres_container) -> str:
    """Connection URL of the running container.

    ``create_engine`` rewrites the driver to asyncpg.
    """
    return postgres_container.get_connection_url()


@pytest.fixture(scope="function")
async def postgres_engine(database_url: str) -> AsyncGenerator:
    """Create PostgreSQL engine with a fresh schema for each test."""
    engine = create_engine(database_url, echo=False)

    await create_all(engine)

    try:
        yield engine
    finally:
        await drop_all(engine)
        await engine.dispose()


@pytest.fixture(scope="function")
async def postgres_session(postgres_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create PostgreSQL session for testing."""
    session_factory = create_sessionmaker(postgres_engine)

    async with session_factory() as session:
        yield session
