"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the database layer using SQLModel.
"""

from __future__ import annotations

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities.

    Entities compare by surrogate key: two instances of the same class are
    equal when both carry an ``id`` and the ids match. An instance without
    an ``id`` is only equal to itself.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        own_id = getattr(self, "id", None)
        other_id = getattr(other, "id", None)
        if own_id is None or other_id is None:
            return self is other
        return own_id == other_id
