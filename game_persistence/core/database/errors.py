"""Error types raised by the database layer.

Purpose:
- Give callers one base class (`PersistenceError`) to catch for failures
  originating in this package.
- Carry the rejected entity and the validation details when a flush refuses
  to write an invalid record.

Lookup cardinality failures are not wrapped: repositories let SQLAlchemy's
``NoResultFound`` and ``MultipleResultsFound`` propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class PersistenceError(Exception):
    pass


class EntityValidationError(PersistenceError):
    """An entity failed its column constraints while being flushed.

    Args:
        entity: The rejected instance.
        errors: The pydantic error list describing each violated constraint.
    """

    def __init__(self, entity: Any, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        self.entity = entity
        self.errors = errors or []
        fields = ", ".join(".".join(str(part) for part in error.get("loc", ())) for error in self.errors)
        super().__init__(f"{type(entity).__name__} rejected at flush, invalid field(s): {fields or 'unknown'}")
