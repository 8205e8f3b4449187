"""
Data Models Package

Contains the game's value objects and the GameSession aggregate.
"""

from .tile_state import TileState
from .feedback import Feedback
from .game_config import GameConfig, GameConfigError, GameMode
from .game_session import (
    GameSession, GameStatus, HintCell,
    GameSessionError, GameOverError, HintAlreadyUsedError
)
from .persisted_state import PersistedGameState
from .player_stats import LengthStats, TotalStats

__all__ = [
    'TileState', 'Feedback', 'GameConfig', 'GameConfigError', 'GameMode',
    'GameSession', 'GameStatus', 'HintCell',
    'GameSessionError', 'GameOverError', 'HintAlreadyUsedError',
    'PersistedGameState', 'LengthStats', 'TotalStats'
]
