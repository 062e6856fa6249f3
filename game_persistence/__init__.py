"""Game persistence.

Object-relational mapping for a small game catalogue: ``Game`` records and
the ``GameReview`` records that point back at them.

Core subpackages
----------------

- ``game_persistence.core``:

  - Settings (``pydantic-settings``) and logging configuration.

- ``game_persistence.core.database``:

  - SQLModel entities for the ``games`` and ``game_reviews`` tables.
  - Async engine/session helpers, a transaction scope and cache clearing.
  - Repositories with save, lookup, bulk delete and join-fetch queries.
  - Fixture seeding used by the integration scenarios.

Typical workflow
----------------

1. Build an engine with ``create_engine`` and create the tables with
   ``create_all``.
2. Open a session from ``create_sessionmaker(engine)``.
3. Save entities through the repositories inside ``transaction(session)``.
4. Call ``clear_cache(session)`` before reading back, so the read hits
   storage instead of the identity map.

Relationships are never loaded implicitly. ``GameRepository.list_with_reviews``
and ``GameReviewRepository.list_with_game`` join-fetch them in one query.
"""
