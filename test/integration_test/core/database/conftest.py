"""Test configuration for database integration tests.

Each test gets a fresh database built from ``test_settings.database.url``
(in-memory SQLite by default) and a session seeded with the game catalogue.
"""

from __future__ import annotations

from test.settings import test_settings
from typing import AsyncGenerator

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession

from game_persistence.core.database import create_all, create_engine, create_sessionmaker, drop_all, transaction
from game_persistence.core.database.seed import seed_game_catalog


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator:
    """Create the engine for the configured test database."""
    url = test_settings.database.url
    kwargs = {"poolclass": StaticPool} if ":memory:" in url else {}
    engine = create_engine(url, **kwargs)

    await create_all(engine)

    try:
        yield engine
    finally:
        await drop_all(engine)
        await engine.dispose()


@pytest.fixture(scope="function")
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    """Open a session on the test database."""
    session_factory = create_sessionmaker(engine)

    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
async def seeded_catalog(session) -> AsyncSession:
    """Seed the game catalogue; no transaction is left open."""
    await seed_game_catalog(session)
    return session


@pytest.fixture(scope="function")
async def scenario_session(seeded_catalog) -> AsyncGenerator[AsyncSession, None]:
    """Seeded session with a fresh transaction, committed after the test."""
    async with transaction(seeded_catalog):
        yield seeded_catalog
