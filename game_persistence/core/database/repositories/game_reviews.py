"""
Game review repository implementation.

This module provides data access operations for game reviews. Reviews are
saved independently of their game; ``list_with_game`` is the one query that
resolves ``GameReview.game``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import contains_eager
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.games import GameReview
from .base import AsyncBaseRepository, AsyncQueryBuilder


class GameReviewRepository(AsyncBaseRepository[GameReview]):
    """Repository for game review data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLModel Session for database operations
        """
        super().__init__(session, GameReview)

    async def create(self, review: GameReview) -> GameReview:
        """Save a new review in the current transaction.

        Only ``game_id`` is written; a ``game`` set on the instance is ignored
        by the flush.

        Args:
            review: GameReview SQLModel instance

        Returns:
            The same GameReview with ``id`` populated
        """
        self.session.add(review)
        await self.session.flush()
        return review

    async def get_by_id(self, review_id: int) -> Optional[GameReview]:
        stmt = select(GameReview).where(GameReview.id == review_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, review: GameReview) -> GameReview:
        self.session.add(review)
        await self.session.flush()
        return review

    async def delete(self, review_id: int) -> bool:
        review = await self.get_by_id(review_id)
        if review is None:
            return False
        await self.session.delete(review)
        await self.session.flush()
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[GameReview]:
        """List reviews ordered by ID.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (game_id, score, note)

        Returns:
            List of GameReview instances; ``game`` is not loaded
        """
        stmt = select(GameReview).order_by(GameReview.id)  # type: ignore

        if filters:
            stmt = AsyncQueryBuilder.apply_filters(stmt, GameReview, filters)

        stmt = AsyncQueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.exec(stmt)
        return list(result)

    async def list_for_game(self, game_id: int) -> List[GameReview]:
        """Get the reviews whose foreign key points at a game.

        Args:
            game_id: Game ID

        Returns:
            List of GameReview instances ordered by ID; ``game`` is not loaded
        """
        stmt = select(GameReview).where(GameReview.game_id == game_id).order_by(GameReview.id)  # type: ignore
        result = await self.session.exec(stmt)
        return list(result)

    async def list_with_game(self) -> List[GameReview]:
        """Join-fetch every review together with its game.

        ``game`` is resolved from the stored ``game_id`` alone, whatever the
        instance carried when it was saved. Reviews already held by the
        session are refreshed from the fetched rows. Reviews without a game
        are left out by the inner join.

        Returns:
            List of GameReview instances ordered by ID with ``game`` populated
        """
        stmt = (
            select(GameReview)
            .join(GameReview.game)  # type: ignore
            .options(contains_eager(GameReview.game))  # type: ignore
            .order_by(GameReview.id)  # type: ignore
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result)
