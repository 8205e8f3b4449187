"""
In-Memory Stores

Process-local repositories. Used by the "memory" storage backend and as
test doubles.
"""

from typing import Dict, List, Optional, Set

from ..models.persisted_state import PersistedGameState
from ..models.player_stats import LengthStats
from .interfaces import CompletionRepository, GameRepository, StatsRepository


class InMemoryGameRepository(GameRepository):

    def __init__(self):
        self._state: Optional[PersistedGameState] = None
        self.save_count = 0

    def save(self, state: PersistedGameState) -> None:
        self._state = state
        self.save_count += 1

    def load(self) -> Optional[PersistedGameState]:
        return self._state

    def clear(self) -> None:
        self._state = None


class InMemoryCompletionRepository(CompletionRepository):

    def __init__(self):
        self._completed: Set[tuple] = set()
        self._dates: Dict[int, Set[str]] = {}

    def is_daily_completed(self, length: int, max_rows: int, date_iso: str) -> bool:
        return (length, max_rows, date_iso) in self._completed

    def mark_daily_completed(self, length: int, max_rows: int, date_iso: str) -> None:
        self._completed.add((length, max_rows, date_iso))
        self._dates.setdefault(length, set()).add(date_iso)

    def get_completed_dates(self, length: int) -> List[str]:
        return sorted(self._dates.get(length, ()))

    def clear_completion(self, length: int, max_rows: int, date_iso: str) -> None:
        self._completed.discard((length, max_rows, date_iso))
        # Keep the date if another row budget still completed it
        if not any(k[0] == length and k[2] == date_iso for k in self._completed):
            self._dates.get(length, set()).discard(date_iso)


class InMemoryStatsRepository(StatsRepository):

    def __init__(self):
        self._stats: Dict[int, LengthStats] = {}

    def get_stats(self, length: int) -> LengthStats:
        return self._stats.get(length, LengthStats())

    def save_stats(self, length: int, stats: LengthStats) -> None:
        self._stats[length] = stats
