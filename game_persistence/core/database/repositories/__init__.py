"""
Database repository layer using SQLModel.

This package contains all repository classes organized by table. Each module
provides type-safe data access operations for its corresponding SQLModel
entity model.

Modules:
- base: AsyncBaseRepository interface and AsyncQueryBuilder utilities
- games: Game repository operations
- game_reviews: Game review repository operations
- bundle: GameRepoBundle sharing one session across repositories
"""

from .bundle import GameRepoBundle, build_repos
from .game_reviews import GameReviewRepository
from .games import GameRepository

__all__ = [
    "GameRepoBundle",
    "GameRepository",
    "GameReviewRepository",
    "build_repos",
]
