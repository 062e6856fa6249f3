"""Unit tests for the game catalogue persistence layer.

Covers entity validation, repository operations (mocked and in-memory
SQLite) and the engine, session and transaction helpers.
"""
