"""
Database utility functions for engine and session management.

This module provides the core utility functions for creating database engines,
session factories and transaction scopes. Built with async SQLAlchemy.

Functions:
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all / drop_all: Creates or drops all tables from ORM metadata
- transaction: Commits on success, rolls back on error
- clear_cache: Detaches every instance held by a session
"""

from __future__ import annotations

import logging
import re
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from .base import Base

logger = logging.getLogger(__name__)

_POSTGRES_URL = re.compile(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://")
_SQLITE_URL = re.compile(r"^sqlite(?:\+[a-z0-9_]+)?://")


def normalize_url(db_url: str) -> str:
    """Rewrite a database URL so that it names an async driver.

    ``postgres://``, ``postgresql://`` and ``postgresql+<driver>://`` become
    ``postgresql+asyncpg://``; ``sqlite://`` variants become ``sqlite+aiosqlite://``.
    Any other URL is returned unchanged.
    """
    url = _POSTGRES_URL.sub("postgresql+asyncpg://", db_url, count=1)
    return _SQLITE_URL.sub("sqlite+aiosqlite://", url, count=1)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(db_url: str, **kwargs: Any) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    The URL is normalized with ``normalize_url`` first. SQLite connections
    get foreign key enforcement switched on.

    Args:
        db_url: Database connection URL
        **kwargs: Extra keyword arguments for ``create_async_engine``

    Returns:
        Configured AsyncEngine instance
    """
    url = normalize_url(db_url)
    kwargs.setdefault("pool_pre_ping", True)
    engine = create_async_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Sessions keep their loaded attributes after commit; ``clear_cache`` is
    the explicit way to force later reads back to storage.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    Args:
        engine: Async SQLAlchemy engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all(engine: AsyncEngine) -> None:
    """Drop all tables for the current ORM metadata.

    Args:
        engine: Async SQLAlchemy engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Run a block inside one transaction on ``session``.

    The transaction begins with the first statement of the block, commits
    when the block exits normally, and rolls back when it raises. Commit-time
    failures (such as ``EntityValidationError``) are rolled back and re-raised.

    Usage::

        async with transaction(session):
            await GameRepository(session).create(Game(title="F-Zero"))
    """
    try:
        yield session
        await session.commit()
    except BaseException:
        logger.debug("Rolling back transaction")
        await session.rollback()
        raise


def clear_cache(session: AsyncSession) -> None:
    """Detach every instance the session currently manages.

    Subsequent queries materialize fresh instances from storage instead of
    returning what the identity map already holds.
    """
    session.expunge_all()
