"""Test configuration for database unit tests.

This module provides common fixtures and utilities for testing the
database layer with in-memory SQLite and mocked dependencies.
"""

from __future__ import annotations

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession

from game_persistence.core.database import create_all, create_engine, create_sessionmaker


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine for testing."""
    engine = create_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    # Create all tables
    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    session_factory = create_sessionmaker(in_memory_engine)

    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def mock_session():
    """Mock async database session.

    ``exec`` resolves to a result whose ``one``, ``one_or_none``, ``unique``
    and iteration can be configured per test.
    """
    session = AsyncMock()
    session.add = MagicMock()
    session.expunge_all = MagicMock()
    mock_result = MagicMock()
    mock_result.__iter__ = MagicMock(return_value=iter([]))
    mock_result.one = MagicMock()
    mock_result.one_or_none = MagicMock()
    mock_result.unique = MagicMock(return_value=mock_result)
    mock_result.all = MagicMock(return_value=[])
    session.exec = AsyncMock(return_value=mock_result)
    session.execute = AsyncMock(return_value=MagicMock(rowcount=0))
    return session


@pytest.fixture(scope="function")
def sample_game_data() -> dict:
    """Sample game data for testing."""
    return {"title": "Super Mario Brothers"}


@pytest.fixture(scope="function")
def sample_game_review_data() -> dict:
    """Sample game review data for testing."""
    return {
        "score": 0.75,
        "note": "Tight controls, great level design",
        "game_id": 1,
    }
