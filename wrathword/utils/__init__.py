"""
Utilities Package

Contains the structured game logger and small helper functions.
"""

from .game_logger import GameLogger, game_logger
from .helpers import today_iso, scoped_key, daily_completion_key, completed_dates_key, stats_key

__all__ = [
    'GameLogger', 'game_logger',
    'today_iso', 'scoped_key', 'daily_completion_key', 'completed_dates_key', 'stats_key'
]
