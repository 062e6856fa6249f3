"""
Database entity models.

This package contains all database entity models organized by business domain
and table relationships.

Modules:
- games: Game and GameReview tables
"""

from .. import validation  # noqa: F401  registers the flush-time validation hook
from . import games
from .games import Game, GameBase, GameReview, GameReviewBase

__all__ = [
    "Game",
    "GameBase",
    "GameReview",
    "GameReviewBase",
    "games",
]
