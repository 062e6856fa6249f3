"""
Core utilities and configuration for the game persistence package.

This package provides core functionality including logging configuration,
settings and the database layer.
"""

from game_persistence.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
