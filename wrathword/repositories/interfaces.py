"""
Repository Interfaces

The collaborators the game engine depends on. Every completion call takes
``(length, max_rows, date_iso)`` in that order.
"""

import abc
from typing import Dict, List, Optional

from ..config.game_settings import VALID_LENGTHS
from ..models.persisted_state import PersistedGameState
from ..models.player_stats import LengthStats, TotalStats


class WordList(abc.ABC):
    """Source of answer words and allowed guesses."""

    @abc.abstractmethod
    def get_answers(self, length: int) -> List[str]:
        """Answer words for a length (uppercase copy)."""

    @abc.abstractmethod
    def is_valid_guess(self, word: str, length: int) -> bool:
        """Case-insensitive membership in the allowed guesses."""

    @abc.abstractmethod
    def get_answer_count(self, length: int) -> int:
        """Number of answers for a length."""


class GameRepository(abc.ABC):
    """Stores the single in-progress game snapshot."""

    @abc.abstractmethod
    def save(self, state: PersistedGameState) -> None:
        """Replace the saved game."""

    @abc.abstractmethod
    def load(self) -> Optional[PersistedGameState]:
        """Saved game, or None when missing or unreadable. Never raises for those."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Remove the saved game."""

    def has_saved_game(self) -> bool:
        return self.load() is not None


class CompletionRepository(abc.ABC):
    """Tracks finished daily puzzles so they can't be replayed."""

    @abc.abstractmethod
    def is_daily_completed(self, length: int, max_rows: int, date_iso: str) -> bool:
        """Whether the daily puzzle for this board and date is finished."""

    @abc.abstractmethod
    def mark_daily_completed(self, length: int, max_rows: int, date_iso: str) -> None:
        """Record the daily puzzle as finished."""

    @abc.abstractmethod
    def get_completed_dates(self, length: int) -> List[str]:
        """Sorted dates with a completed daily puzzle for a length."""

    @abc.abstractmethod
    def clear_completion(self, length: int, max_rows: int, date_iso: str) -> None:
        """Forget a completion."""


class StatsRepository(abc.ABC):
    """Per word length player statistics."""

    @abc.abstractmethod
    def get_stats(self, length: int) -> LengthStats:
        """Stats for a length, empty when nothing was recorded or the record is unreadable."""

    @abc.abstractmethod
    def save_stats(self, length: int, stats: LengthStats) -> None:
        """Replace the stats for a length."""

    def record_game_result(self, length: int, won: bool, guesses: int, date_iso: str) -> LengthStats:
        stats = self.get_stats(length).record(won, guesses, date_iso)
        self.save_stats(length, stats)
        return stats

    def get_win_rate(self, length: int) -> int:
        return self.get_stats(length).win_rate

    def get_all_stats(self) -> Dict[int, LengthStats]:
        return {length: self.get_stats(length) for length in VALID_LENGTHS}

    def get_total_stats(self) -> TotalStats:
        return TotalStats.from_lengths(self.get_all_stats().values())
