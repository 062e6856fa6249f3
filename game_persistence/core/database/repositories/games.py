"""
Game repository implementation.

This module provides data access operations for games: saving, exact title
lookups, and the join-fetch query that loads every game together with its
reviews in a single round trip.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import contains_eager
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.games import Game, GameReview
from .base import AsyncBaseRepository, AsyncQueryBuilder


class GameRepository(AsyncBaseRepository[Game]):
    """Repository for game data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLModel Session for database operations
        """
        super().__init__(session, Game)

    async def create(self, game: Game) -> Game:
        """Save a new game in the current transaction.

        The flush assigns the surrogate key and runs title validation.

        Args:
            game: Game SQLModel instance

        Returns:
            The same Game with ``id`` populated
        """
        self.session.add(game)
        await self.session.flush()
        return game

    async def get_by_id(self, game_id: int) -> Optional[Game]:
        stmt = select(Game).where(Game.id == game_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, game: Game) -> Game:
        self.session.add(game)
        await self.session.flush()
        return game

    async def delete(self, game_id: int) -> bool:
        """Delete a game by its ID.

        Reviews referencing the game are not removed; deleting a game that
        still has reviews fails on the foreign key where the backend enforces it.

        Args:
            game_id: Game ID to delete

        Returns:
            True if deleted, False if not found
        """
        game = await self.get_by_id(game_id)
        if game is None:
            return False
        await self.session.delete(game)
        await self.session.flush()
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[Game]:
        """List games ordered by ID.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (title)

        Returns:
            List of Game instances; ``reviews`` is not loaded
        """
        stmt = select(Game).order_by(Game.id)  # type: ignore

        if filters:
            stmt = AsyncQueryBuilder.apply_filters(stmt, Game, filters)

        stmt = AsyncQueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.exec(stmt)
        return list(result)

    async def get_by_title(self, title: str) -> Game:
        """Get the single game whose title matches exactly.

        Args:
            title: Exact game title

        Returns:
            The matching Game

        Raises:
            sqlalchemy.exc.NoResultFound: No game has this title.
            sqlalchemy.exc.MultipleResultsFound: Several games share this title.
        """
        stmt = select(Game).where(Game.title == title)
        result = await self.session.exec(stmt)
        return result.one()

    async def find_by_title(self, title: str) -> Optional[Game]:
        """Like ``get_by_title`` but returns None when no game matches.

        Raises:
            sqlalchemy.exc.MultipleResultsFound: Several games share this title.
        """
        stmt = select(Game).where(Game.title == title)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_with_reviews(self) -> List[Game]:
        """Join-fetch every game that has reviews, with its reviews loaded.

        Inner join, so games without reviews are left out. Games are ordered
        by ID and returned once each; reviews are ordered by ID. Games already
        held by the session are refreshed from the fetched rows.

        Returns:
            List of Game instances with ``reviews`` populated
        """
        stmt = (
            select(Game)
            .join(Game.reviews)  # type: ignore
            .options(contains_eager(Game.reviews))  # type: ignore
            .order_by(Game.id, GameReview.id)  # type: ignore
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.unique().all())
