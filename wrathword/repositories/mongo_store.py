"""
MongoDB Stores

Game snapshots and daily completions kept in MongoDB, so a player's
progress follows them between devices.

Collections:
- ``games``: one document per player, ``_id`` = scoped ``game.state`` key
- ``completions``: one document per completed daily board and date
- ``stats``: one document per player and word length
"""

import datetime
from typing import List, Optional

from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..models.persisted_state import PersistedGameState
from ..models.player_stats import LengthStats
from ..utils.game_logger import GameLogger, game_logger
from ..utils.helpers import daily_completion_key, scoped_key, stats_key
from .file_store import GAME_STATE_KEY
from .interfaces import CompletionRepository, GameRepository, StatsRepository


def connect_database(mongo_uri: str, db_name: str) -> Database:
    """
    Open a MongoDB connection and return the game database.

    Raises:
        PyMongoError: If the server can't be reached
    """
    client = MongoClient(mongo_uri, server_api=ServerApi('1'))
    client.admin.command('ping')
    return client[db_name]


class MongoGameRepository(GameRepository):
    """Saved game per player in the ``games`` collection."""

    def __init__(self, database: Database, player_id: Optional[str] = None,
                 logger: Optional[GameLogger] = None):
        self.collection = database.games
        self.player_id = player_id
        self.logger = logger or game_logger

    def _key(self) -> str:
        return scoped_key(GAME_STATE_KEY, self.player_id)

    def save(self, state: PersistedGameState) -> None:
        self.collection.replace_one(
            {"_id": self._key()},
            {
                "_id": self._key(),
                "state": state.to_dict(),
                "updated_at": datetime.datetime.utcnow(),
            },
            upsert=True
        )

    def load(self) -> Optional[PersistedGameState]:
        try:
            doc = self.collection.find_one({"_id": self._key()})
        except PyMongoError as e:
            self.logger.log_error(e, 'load_game')
            return None

        if not doc or 'state' not in doc:
            return None

        try:
            return PersistedGameState.from_dict(doc['state'])
        except (ValueError, TypeError) as e:
            self.logger.log_warning('load_game', 'Discarding corrupt saved game', error=str(e))
            return None

    def clear(self) -> None:
        self.collection.delete_one({"_id": self._key()})


class MongoCompletionRepository(CompletionRepository):
    """Completed daily boards in the ``completions`` collection."""

    def __init__(self, database: Database, player_id: Optional[str] = None):
        self.collection = database.completions
        self.player_id = player_id

        # Date lookups per player and length
        self.collection.create_index([("player_id", 1), ("length", 1), ("date_iso", 1)])

    def _key(self, length: int, max_rows: int, date_iso: str) -> str:
        return scoped_key(daily_completion_key(length, max_rows, date_iso), self.player_id)

    def is_daily_completed(self, length: int, max_rows: int, date_iso: str) -> bool:
        return self.collection.find_one({"_id": self._key(length, max_rows, date_iso)}) is not None

    def mark_daily_completed(self, length: int, max_rows: int, date_iso: str) -> None:
        key = self._key(length, max_rows, date_iso)
        self.collection.update_one(
            {"_id": key},
            {
                "$setOnInsert": {
                    "player_id": self.player_id,
                    "length": length,
                    "max_rows": max_rows,
                    "date_iso": date_iso,
                    "completed_at": datetime.datetime.utcnow(),
                }
            },
            upsert=True
        )

    def get_completed_dates(self, length: int) -> List[str]:
        dates = self.collection.distinct("date_iso", {"player_id": self.player_id, "length": length})
        return sorted(dates)

    def clear_completion(self, length: int, max_rows: int, date_iso: str) -> None:
        self.collection.delete_one({"_id": self._key(length, max_rows, date_iso)})


class MongoStatsRepository(StatsRepository):
    """Per length player stats in the ``stats`` collection."""

    def __init__(self, database: Database, player_id: Optional[str] = None,
                 logger: Optional[GameLogger] = None):
        self.collection = database.stats
        self.player_id = player_id
        self.logger = logger or game_logger

    def _key(self, length: int) -> str:
        return scoped_key(stats_key(length), self.player_id)

    def get_stats(self, length: int) -> LengthStats:
        try:
            doc = self.collection.find_one({"_id": self._key(length)})
        except PyMongoError as e:
            self.logger.log_error(e, 'load_stats', length=length)
            return LengthStats()

        if not doc or 'stats' not in doc:
            return LengthStats()

        try:
            return LengthStats.from_dict(doc['stats'])
        except ValueError as e:
            self.logger.log_warning('load_stats', 'Discarding corrupt stats', length=length, error=str(e))
            return LengthStats()

    def save_stats(self, length: int, stats: LengthStats) -> None:
        self.collection.replace_one(
            {"_id": self._key(length)},
            {
                "_id": self._key(length),
                "player_id": self.player_id,
                "length": length,
                "stats": stats.to_dict(),
                "updated_at": datetime.datetime.utcnow(),
            },
            upsert=True
        )
