"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
sharing one session, so every repository writes into the same transaction.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlmodel.ext.asyncio.session import AsyncSession

from .game_reviews import GameReviewRepository
from .games import GameRepository


@dataclass(frozen=True)
class GameRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    games: GameRepository
    reviews: GameReviewRepository


def build_repos(*, session: AsyncSession) -> GameRepoBundle:
    """Build a GameRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return GameRepoBundle(
        games=GameRepository(session),
        reviews=GameReviewRepository(session),
    )
