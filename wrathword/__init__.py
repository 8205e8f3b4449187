"""
WrathWord Game Engine Package

A Wordle-style engine: duplicate-aware guess scoring, a deterministic daily
answer, a one-time hint, and saved games that survive restarts, with
in-memory, JSON-file and MongoDB storage.
"""

from .config import Config


def create_game_module(config_class=Config):
    """
    Factory for creating GameModule instances.

    Args:
        config_class: Configuration class to use

    Returns:
        GameModule with the configured storage backend
    """
    from .composition import GameModule

    return GameModule.create(config_class)
