"""
Fixture seeding for the game catalogue.

Establishes a known data state in three strictly sequential phases, each in
its own committed transaction:

1. ``clear_data``: bulk delete every review, then every game.
2. ``insert_game_data``: save one ``Game`` per title, then clear the cache.
3. ``insert_review_data``: look each game up by title and save two reviews
   for it, then clear the cache.

The cache is cleared after phases 2 and 3 so that the next read goes to
storage instead of the identity map.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, Sequence

from sqlmodel.ext.asyncio.session import AsyncSession

from .entities.games import Game, GameReview
from .repositories.bundle import build_repos
from .utils import clear_cache, transaction

logger = logging.getLogger(__name__)

GAME_TITLES: Sequence[str] = ("Super Mario Brothers", "Mario Kart", "F-Zero")


async def clear_data(session: AsyncSession) -> None:
    """Delete every review and every game, reviews first."""
    repos = build_repos(session=session)
    async with transaction(session):
        logger.info("Dumping old records...")
        await repos.reviews.delete_all()
        await repos.games.delete_all()


async def insert_game_data(session: AsyncSession, titles: Iterable[str] = GAME_TITLES) -> None:
    """Save one game per title, commit, then clear the cache."""
    repos = build_repos(session=session)
    async with transaction(session):
        logger.info("Inserting games...")
        for title in titles:
            await repos.games.create(Game(title=title))
    clear_cache(session)


async def insert_review_data(
    session: AsyncSession,
    titles: Iterable[str] = GAME_TITLES,
    score_factory: Callable[[], float] = random.random,
) -> None:
    """Save two reviews for each titled game, commit, then clear the cache.

    The first review of each pair only carries ``game_id``; the second
    carries both ``game_id`` and ``game``.

    Raises:
        sqlalchemy.exc.NoResultFound: A title matches no game.
        sqlalchemy.exc.MultipleResultsFound: A title matches several games.
    """
    repos = build_repos(session=session)
    async with transaction(session):
        logger.info("Inserting reviews...")
        for title in titles:
            game = await repos.games.get_by_title(title)

            await repos.reviews.create(GameReview(game_id=game.id, score=score_factory()))

            review = GameReview(game_id=game.id, score=score_factory())
            review.game = game
            await repos.reviews.create(review)
    clear_cache(session)


async def seed_game_catalog(session: AsyncSession, titles: Sequence[str] = GAME_TITLES) -> None:
    """Reset the catalogue to the given titles with two reviews each."""
    await clear_data(session)
    await insert_game_data(session, titles)
    await insert_review_data(session, titles)
