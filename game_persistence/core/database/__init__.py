"""
Database layer for the game catalogue.

This package provides a unified location for all database entities and repositories.

Structure:
- entities/: Database entity models (Game, GameReview)
- repositories/: Data access layer
- base.py: SQLModel base class with key-based equality
- errors.py: Exceptions raised by this layer
- validation.py: Flush-time validation hook
- seed.py: Fixture seeding routines
- session.py: Global engine and session factory management
- utils.py: Engine, session, transaction and cache helpers
"""

from .base import Base
from .entities import Game, GameReview
from .errors import EntityValidationError, PersistenceError
from .repositories import GameRepoBundle, GameRepository, GameReviewRepository, build_repos
from .utils import (
    clear_cache,
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
    normalize_url,
    transaction,
)

__all__ = [
    "Base",
    "EntityValidationError",
    "Game",
    "GameRepoBundle",
    "GameRepository",
    "GameReview",
    "GameReviewRepository",
    "PersistenceError",
    "build_repos",
    "clear_cache",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
    "normalize_url",
    "transaction",
]
