"""
Flush-time entity validation.

SQLModel table classes skip pydantic validation on construction, so an
invalid ``Game`` can be built and added to a session freely. This module
installs a ``before_flush`` hook on every ORM session that validates each
new or modified table entity against its non-table base model (``GameBase``
for ``Game`` and so on). A violation aborts the flush, and therefore the
commit that triggered it, with ``EntityValidationError``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional, Type

from pydantic import ValidationError
from sqlalchemy import event
from sqlalchemy.orm import Session
from sqlmodel import SQLModel

from .base import Base
from .errors import EntityValidationError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def validation_model_for(entity_cls: Type[SQLModel]) -> Optional[Type[SQLModel]]:
    """Return the nearest non-table SQLModel ancestor of a table entity class."""
    for parent in entity_cls.__mro__[1:]:
        if parent in (Base, SQLModel):
            break
        if isinstance(parent, type) and issubclass(parent, SQLModel) and not hasattr(parent, "__table__"):
            return parent
    return None


def validate_entity(entity: Any) -> None:
    """Validate a table entity against its base model.

    Raises:
        EntityValidationError: If any column constraint is violated.
    """
    model = validation_model_for(type(entity))
    if model is None:
        return
    try:
        model.model_validate(entity, from_attributes=True)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        logger.warning("Rejecting %r at flush: %s", entity, errors)
        raise EntityValidationError(entity, errors) from exc


@event.listens_for(Session, "before_flush")
def _validate_pending_entities(session: Session, flush_context: Any, instances: Any) -> None:
    for entity in [*session.new, *session.dirty]:
        if isinstance(entity, Base):
            validate_entity(entity)
