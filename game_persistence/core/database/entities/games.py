"""
Game catalogue entity models.

This module contains the database entities for games and the reviews
written about them. A game owns many reviews; a review points back at
its game through the ``game_id`` foreign key.

Both relationships are read-only mappings over ``game_reviews.game_id``:
the scalar foreign key is what gets written, and assigning ``GameReview.game``
never changes it. Neither side is loaded implicitly; see
``GameRepository.list_with_reviews`` and ``GameReviewRepository.list_with_game``.
"""

from typing import List, Optional

from sqlmodel import Field, Relationship

from ..base import Base


class GameBase(Base):
    """Base fields for game entity.

    Validation runs when this model is built directly, and when a ``Game``
    row is flushed (see ``game_persistence.core.database.validation``).
    """

    title: str = Field(min_length=3, max_length=50, description="Game title")


class Game(GameBase, table=True):
    """Persistent game record.

    Table: games
    """

    __tablename__ = "games"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Relationships
    reviews: List["GameReview"] = Relationship(
        back_populates="game",
        sa_relationship_kwargs={"lazy": "raise", "viewonly": True},
    )

    def __repr__(self) -> str:
        return f"Game(id={self.id}, title={self.title})"


class GameReviewBase(Base):
    """Base fields for game review entity."""

    score: Optional[float] = Field(default=None, description="Review score")
    note: Optional[str] = Field(default=None, description="Free-text review note")

    # Foreign key to game
    game_id: Optional[int] = Field(default=None, foreign_key="games.id", index=True)


class GameReview(GameReviewBase, table=True):
    """Persistent review of a game.

    ``game_id`` and ``game`` are set independently. A review may carry a
    valid ``game_id`` while ``game`` stays unset.

    Table: game_reviews
    """

    __tablename__ = "game_reviews"
    __table_args__ = ({"extend_existing": True},)

    # Primary key
    id: Optional[int] = Field(default=None, primary_key=True)

    # Relationships
    game: Optional[Game] = Relationship(
        back_populates="reviews",
        sa_relationship_kwargs={"lazy": "raise", "viewonly": True},
    )

    def __repr__(self) -> str:
        return f"GameReview(id={self.id}, score={self.score}, note={self.note}, game_id={self.game_id})"
