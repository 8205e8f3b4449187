import json
import logging

from wrathword.composition import GameModule
from wrathword.models import GameConfig, GameMode
from wrathword.utils import GameLogger, scoped_key, today_iso


def _entries(log_dir):
    lines = []
    for path in log_dir.glob("game_log_*.log"):
        lines.extend(path.read_text(encoding="utf-8").splitlines())
    return [json.loads(line.split(" | ", 2)[2]) for line in lines]


def test_structured_entries(tmp_path):
    logger = GameLogger(str(tmp_path), "DEBUG", name="wrathword.test_structured")
    logger.log_use_case("submit_guess", "not_in_word_list", row=2)
    logger.log_game_event("game_won", guesses=3)
    logger.log_warning("load_game", "Discarding corrupt saved game")
    logger.log_error(KeyError("boom"), "save_game")

    entries = _entries(tmp_path)
    assert [e["event_type"] for e in entries] == ["USE_CASE", "GAME_EVENT", "WARNING", "ERROR"]
    assert entries[0]["action"] == "submit_guess"
    assert entries[0]["details"] == {"outcome": "not_in_word_list", "row": 2}
    assert entries[1]["details"] == {"guesses": 3}
    assert entries[3]["details"]["error_type"] == "KeyError"

    for handler in logger.logger.handlers:
        handler.close()


def test_no_log_file_without_directory(tmp_path):
    logger = GameLogger(None, name="wrathword.test_console")
    assert all(not isinstance(h, logging.FileHandler) for h in logger.logger.handlers)


def test_use_cases_log_outcomes(tmp_path, word_list):
    logger = GameLogger(str(tmp_path), "DEBUG", name="wrathword.test_use_cases")
    module = GameModule.create_with_dependencies(word_list=word_list, logger=logger)

    config = GameConfig.create(5, 6, GameMode.DAILY, "2025-01-15")
    session = module.get_start_game_use_case().execute(config).session
    module.get_submit_guess_use_case().execute(session, "CRANE")

    entries = _entries(tmp_path)
    outcomes = [(e["action"], e["details"].get("outcome")) for e in entries if e["event_type"] == "USE_CASE"]
    assert ("start_game", "new_game") in outcomes
    assert ("submit_guess", "accepted") in outcomes
    won = [e for e in entries if e["action"] == "game_won"]
    assert won and won[0]["details"]["answer"] == "CRANE"

    for handler in logger.logger.handlers:
        handler.close()


def test_helpers():
    assert scoped_key("game.state", None) == "game.state"
    assert scoped_key("game.state", "alice") == "alice.game.state"
    assert len(today_iso()) == 10
