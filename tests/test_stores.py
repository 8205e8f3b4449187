import json

import mongomock
import pytest

from wrathword.models import GameConfig, GameMode, GameSession, LengthStats, PersistedGameState
from wrathword.repositories import (
    InMemoryCompletionRepository, InMemoryStatsRepository, JsonFileCompletionRepository,
    JsonFileGameRepository, JsonFileStatsRepository, JsonFileStore, MongoCompletionRepository,
    MongoGameRepository, MongoStatsRepository
)


@pytest.fixture
def state():
    config = GameConfig.create(5, 6, GameMode.DAILY, "2025-01-15")
    session = GameSession.create(config, "CRANE").submit_guess("STARE")
    return PersistedGameState.from_session(session)


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(str(tmp_path / "state" / "store.json"))


@pytest.fixture
def database():
    return mongomock.MongoClient().wrathword


# --- JSON file store ---

def test_file_store_basics(store):
    assert store.get("missing") is None
    assert store.get("missing", 3) == 3
    store.set("a", {"b": 1})
    assert store.get("a") == {"b": 1}
    assert store.keys() == ["a"]
    store.remove("a")
    store.remove("a")
    assert store.keys() == []


def test_file_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileStore(str(path))
    assert store.keys() == []
    store.set("k", 1)
    assert json.loads(path.read_text(encoding="utf-8")) == {"k": 1}


def test_file_store_ignores_non_object(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert JsonFileStore(str(path)).get("k") is None


def test_file_game_repository(store, state):
    repo = JsonFileGameRepository(store)
    assert repo.load() is None
    assert repo.has_saved_game() is False

    repo.save(state)
    assert store.keys() == ["game.state"]
    assert repo.load() == state
    assert repo.load().restore().guesses == ("STARE",)

    repo.clear()
    assert repo.load() is None


def test_file_game_repository_survives_reopen(tmp_path, state):
    path = str(tmp_path / "store.json")
    JsonFileGameRepository(JsonFileStore(path)).save(state)
    assert JsonFileGameRepository(JsonFileStore(path)).load() == state


def test_file_game_repository_discards_corrupt_state(store, state):
    store.set("game.state", {"length": 5})
    assert JsonFileGameRepository(store).load() is None

    store.set("game.state", "garbage")
    assert JsonFileGameRepository(store).load() is None


def test_file_player_scoping(store, state):
    alice = JsonFileGameRepository(store, player_id="alice")
    bob = JsonFileGameRepository(store, player_id="bob")
    alice.save(state)
    assert "alice.game.state" in store.keys()
    assert bob.load() is None

    done = JsonFileCompletionRepository(store, player_id="alice")
    done.mark_daily_completed(5, 6, "2025-01-15")
    assert "alice.daily.5x6.2025-01-15.completed" in store.keys()
    assert "alice.daily.5.completedDates" in store.keys()
    assert not JsonFileCompletionRepository(store, player_id="bob").is_daily_completed(5, 6, "2025-01-15")


def test_file_completion_keys(store):
    repo = JsonFileCompletionRepository(store)
    repo.mark_daily_completed(5, 6, "2025-01-15")
    repo.mark_daily_completed(5, 6, "2025-01-15")
    repo.mark_daily_completed(5, 4, "2025-01-13")

    assert store.get("daily.5x6.2025-01-15.completed") is True
    assert store.get("daily.5.completedDates") == ["2025-01-13", "2025-01-15"]
    assert repo.is_daily_completed(5, 6, "2025-01-15")
    assert not repo.is_daily_completed(5, 5, "2025-01-15")
    assert not repo.is_daily_completed(6, 6, "2025-01-15")
    assert repo.get_completed_dates(6) == []


def test_file_clear_completion_keeps_shared_date(store):
    repo = JsonFileCompletionRepository(store)
    repo.mark_daily_completed(5, 6, "2025-01-15")
    repo.mark_daily_completed(5, 4, "2025-01-15")

    repo.clear_completion(5, 6, "2025-01-15")
    assert not repo.is_daily_completed(5, 6, "2025-01-15")
    assert repo.get_completed_dates(5) == ["2025-01-15"]

    repo.clear_completion(5, 4, "2025-01-15")
    assert repo.get_completed_dates(5) == []


# --- In-memory store ---

def test_memory_completion_repository():
    repo = InMemoryCompletionRepository()
    repo.mark_daily_completed(4, 6, "2025-01-15")
    repo.mark_daily_completed(4, 6, "2025-01-10")
    repo.mark_daily_completed(4, 8, "2025-01-10")
    assert repo.get_completed_dates(4) == ["2025-01-10", "2025-01-15"]

    repo.clear_completion(4, 6, "2025-01-10")
    assert repo.get_completed_dates(4) == ["2025-01-10", "2025-01-15"]
    repo.clear_completion(4, 8, "2025-01-10")
    assert repo.get_completed_dates(4) == ["2025-01-15"]


# --- MongoDB store ---

def test_mongo_game_repository(database, state):
    repo = MongoGameRepository(database)
    assert repo.load() is None

    repo.save(state)
    repo.save(state)
    assert database.games.count_documents({}) == 1
    assert database.games.find_one({"_id": "game.state"})["state"]["answer"] == "CRANE"
    assert repo.load() == state

    repo.clear()
    assert repo.has_saved_game() is False


def test_mongo_game_repository_discards_corrupt_state(database):
    database.games.insert_one({"_id": "game.state", "state": {"rows": "nope"}})
    assert MongoGameRepository(database).load() is None


def test_mongo_player_scoping(database, state):
    MongoGameRepository(database, player_id="alice").save(state)
    assert database.games.find_one({"_id": "alice.game.state"}) is not None
    assert MongoGameRepository(database, player_id="bob").load() is None


def test_mongo_completion_repository(database):
    repo = MongoCompletionRepository(database)
    repo.mark_daily_completed(5, 6, "2025-01-15")
    repo.mark_daily_completed(5, 6, "2025-01-15")
    repo.mark_daily_completed(5, 4, "2025-01-15")
    repo.mark_daily_completed(5, 6, "2025-01-02")
    repo.mark_daily_completed(6, 6, "2025-01-03")

    assert database.completions.find_one({"_id": "daily.5x6.2025-01-15.completed"}) is not None
    assert repo.is_daily_completed(5, 6, "2025-01-15")
    assert not repo.is_daily_completed(5, 5, "2025-01-15")
    assert repo.get_completed_dates(5) == ["2025-01-02", "2025-01-15"]
    assert repo.get_completed_dates(6) == ["2025-01-03"]

    repo.clear_completion(5, 6, "2025-01-15")
    assert not repo.is_daily_completed(5, 6, "2025-01-15")
    assert repo.get_completed_dates(5) == ["2025-01-02", "2025-01-15"]


def test_mongo_completions_are_per_player(database):
    alice = MongoCompletionRepository(database, player_id="alice")
    bob = MongoCompletionRepository(database, player_id="bob")
    alice.mark_daily_completed(5, 6, "2025-01-15")
    assert alice.get_completed_dates(5) == ["2025-01-15"]
    assert bob.get_completed_dates(5) == []
    assert not bob.is_daily_completed(5, 6, "2025-01-15")


# --- Player stats ---

@pytest.fixture(params=["memory", "file", "mongo"])
def stats_repository(request, store, database):
    if request.param == "memory":
        return InMemoryStatsRepository()
    if request.param == "file":
        return JsonFileStatsRepository(store, "p1")
    return MongoStatsRepository(database, "p1")


def test_stats_start_empty(stats_repository):
    assert stats_repository.get_stats(5) == LengthStats()
    assert stats_repository.get_win_rate(5) == 0
    assert stats_repository.get_total_stats().played == 0


def test_stats_record_and_reload(stats_repository):
    stats_repository.record_game_result(5, True, 3, "2025-01-14")
    stats_repository.record_game_result(5, True, 4, "2025-01-15")
    stats_repository.record_game_result(6, False, 6, "2025-01-15")

    five = stats_repository.get_stats(5)
    assert five.games_played == 2
    assert five.current_streak == 2
    assert five.guess_distribution == {3: 1, 4: 1}
    assert stats_repository.get_stats(6).games_won == 0
    assert stats_repository.get_stats(4) == LengthStats()
    assert set(stats_repository.get_all_stats()) == {4, 5, 6}

    totals = stats_repository.get_total_stats()
    assert (totals.played, totals.won, totals.win_rate, totals.max_streak) == (3, 2, 67, 2)


def test_file_stats_layout(store):
    JsonFileStatsRepository(store, "p1").record_game_result(5, True, 2, "2025-01-15")
    assert store.get("p1.stats.5") == {
        "gamesPlayed": 1,
        "gamesWon": 1,
        "currentStreak": 1,
        "maxStreak": 1,
        "lastPlayedDate": "2025-01-15",
        "guessDistribution": {"2": 1},
    }
    assert JsonFileStatsRepository(store, "p2").get_stats(5).games_played == 0


def test_file_stats_discards_corrupt_record(store):
    store.set("stats.5", {"gamesPlayed": "lots"})
    assert JsonFileStatsRepository(store).get_stats(5) == LengthStats()


def test_mongo_stats_document(database):
    MongoStatsRepository(database, "p1").record_game_result(4, False, 6, "2025-01-15")
    doc = database.stats.find_one({"_id": "p1.stats.4"})
    assert doc["player_id"] == "p1"
    assert doc["length"] == 4
    assert doc["stats"]["gamesPlayed"] == 1
    assert MongoStatsRepository(database, "p2").get_stats(4).games_played == 0


def test_mongo_stats_discards_corrupt_record(database):
    database.stats.insert_one({"_id": "stats.5", "stats": {"guessDistribution": [1, 2]}})
    assert MongoStatsRepository(database).get_stats(5) == LengthStats()
