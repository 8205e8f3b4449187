"""
JSON File Stores

Local key-value persistence in a single JSON file, the desktop stand-in for
on-device storage. Keys follow the app's storage scheme and may be scoped
to a player id.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models.persisted_state import PersistedGameState
from ..models.player_stats import LengthStats
from ..utils.game_logger import GameLogger, game_logger
from ..utils.helpers import completed_dates_key, daily_completion_key, scoped_key, stats_key
from .interfaces import CompletionRepository, GameRepository, StatsRepository

GAME_STATE_KEY = 'game.state'


class JsonFileStore:
    """
    Minimal key-value store persisted as one JSON object.

    The file is rewritten atomically on every change. A missing file reads
    as empty; an unreadable one is logged and also reads as empty.
    """

    def __init__(self, path: str, logger: Optional[GameLogger] = None):
        self.path = Path(path)
        self.logger = logger or game_logger

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open('r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.log_warning('read_store', 'Unreadable store file, ignoring it',
                                    path=str(self.path), error=str(e))
            return {}
        if not isinstance(data, dict):
            self.logger.log_warning('read_store', 'Store file is not a JSON object, ignoring it',
                                    path=str(self.path))
            return {}
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix='.store-', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get(self, key: str, default: Any = None) -> Any:
        return self._read_all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)

    def keys(self) -> List[str]:
        return list(self._read_all().keys())


class JsonFileGameRepository(GameRepository):
    """Game snapshot stored under ``[player.]game.state``."""

    def __init__(self, store: JsonFileStore, player_id: Optional[str] = None):
        self.store = store
        self.player_id = player_id

    def _key(self) -> str:
        return scoped_key(GAME_STATE_KEY, self.player_id)

    def save(self, state: PersistedGameState) -> None:
        self.store.set(self._key(), state.to_dict())

    def load(self) -> Optional[PersistedGameState]:
        data = self.store.get(self._key())
        if data is None:
            return None
        try:
            return PersistedGameState.from_dict(data)
        except (ValueError, TypeError) as e:
            self.store.logger.log_warning('load_game', 'Discarding corrupt saved game', error=str(e))
            return None

    def clear(self) -> None:
        self.store.remove(self._key())


class JsonFileCompletionRepository(CompletionRepository):
    """
    Daily completion flags stored as ``daily.<len>x<rows>.<date>.completed``
    plus a per-length ``daily.<len>.completedDates`` index.
    """

    def __init__(self, store: JsonFileStore, player_id: Optional[str] = None):
        self.store = store
        self.player_id = player_id

    def _completion_key(self, length: int, max_rows: int, date_iso: str) -> str:
        return scoped_key(daily_completion_key(length, max_rows, date_iso), self.player_id)

    def _dates_key(self, length: int) -> str:
        return scoped_key(completed_dates_key(length), self.player_id)

    def is_daily_completed(self, length: int, max_rows: int, date_iso: str) -> bool:
        return self.store.get(self._completion_key(length, max_rows, date_iso)) is True

    def mark_daily_completed(self, length: int, max_rows: int, date_iso: str) -> None:
        self.store.set(self._completion_key(length, max_rows, date_iso), True)
        dates = self.get_completed_dates(length)
        if date_iso not in dates:
            self.store.set(self._dates_key(length), sorted(dates + [date_iso]))

    def get_completed_dates(self, length: int) -> List[str]:
        dates = self.store.get(self._dates_key(length), [])
        if not isinstance(dates, list):
            return []
        return sorted(d for d in dates if isinstance(d, str))

    def clear_completion(self, length: int, max_rows: int, date_iso: str) -> None:
        self.store.remove(self._completion_key(length, max_rows, date_iso))

        # Drop the date from the index unless another row budget completed it
        prefix = scoped_key(f"daily.{length}x", self.player_id)
        suffix = f".{date_iso}.completed"
        still_completed = any(
            k.startswith(prefix) and k.endswith(suffix) for k in self.store.keys()
        )
        if not still_completed:
            dates = [d for d in self.get_completed_dates(length) if d != date_iso]
            self.store.set(self._dates_key(length), dates)


class JsonFileStatsRepository(StatsRepository):
    """Player stats stored per length under ``[player.]stats.<len>``."""

    def __init__(self, store: JsonFileStore, player_id: Optional[str] = None):
        self.store = store
        self.player_id = player_id

    def _key(self, length: int) -> str:
        return scoped_key(stats_key(length), self.player_id)

    def get_stats(self, length: int) -> LengthStats:
        data = self.store.get(self._key(length))
        if data is None:
            return LengthStats()
        try:
            return LengthStats.from_dict(data)
        except ValueError as e:
            self.store.logger.log_warning('load_stats', 'Discarding corrupt stats',
                                          length=length, error=str(e))
            return LengthStats()

    def save_stats(self, length: int, stats: LengthStats) -> None:
        self.store.set(self._key(length), stats.to_dict())
