"""End-to-end tests for the game catalogue persistence layer.

These tests run against a real PostgreSQL server started with
testcontainers and are skipped unless PostgreSQL tests are enabled.
"""
