import pytest

from wrathword.config import is_valid_length
from wrathword.models import (
    Feedback, GameConfig, GameConfigError, GameMode, TileState
)


def test_tile_state_precedence():
    assert TileState.CORRECT > TileState.PRESENT > TileState.ABSENT
    assert TileState.max(TileState.PRESENT, TileState.CORRECT) is TileState.CORRECT
    assert TileState.max(TileState.PRESENT, TileState.ABSENT) is TileState.PRESENT
    assert TileState.compare(TileState.ABSENT, TileState.ABSENT) == 0


def test_tile_state_parse():
    assert TileState.parse("present") is TileState.PRESENT
    assert TileState.parse(TileState.CORRECT) is TileState.CORRECT
    assert TileState.is_valid("absent") is True
    assert TileState.is_valid("green") is False
    with pytest.raises(ValueError):
        TileState.parse("green")


def test_feedback_queries():
    fb = Feedback.from_states(["correct", "present", "absent", "correct", "absent"])
    assert len(fb) == 5
    assert fb.at(1) is TileState.PRESENT
    assert fb.at(5) is None
    assert fb.at(-1) is None
    assert fb.is_win() is False
    assert fb.count_by_state(TileState.CORRECT) == 2
    assert fb.correct_positions() == [0, 3]
    assert fb.to_wire() == ["correct", "present", "absent", "correct", "absent"]
    assert fb.to_share_emoji() == "\U0001F7E9\U0001F7E8⬛\U0001F7E9⬛"


def test_feedback_copies_input():
    states = [TileState.CORRECT] * 4
    fb = Feedback(states)
    states[0] = TileState.ABSENT
    assert fb.is_win() is True
    assert isinstance(fb.states, tuple)


def test_feedback_rejects_unknown_state():
    with pytest.raises(ValueError):
        Feedback.from_states(["correct", "maybe"])


def test_game_config_seed_and_mode():
    config = GameConfig.create(5, 6, "daily", "2025-01-15")
    assert config.mode is GameMode.DAILY
    assert config.to_seed_string() == "2025-01-15:5:6"
    assert config.is_daily() and not config.is_free_play()

    free = GameConfig.create(5, 6, GameMode.FREE, "2025-01-15")
    assert free.to_seed_string() == config.to_seed_string()
    assert free.is_free_play()


@pytest.mark.parametrize("length,max_rows,seed", [
    (5, 6, "2025-01-15:5:6"),
    (5, 5, "2025-01-15:5:5"),
    (6, 6, "2025-01-15:6:6"),
])
def test_game_config_seed_covers_board(length, max_rows, seed):
    assert GameConfig.create(length, max_rows, GameMode.DAILY, "2025-01-15").to_seed_string() == seed


def test_boards_on_one_date_have_distinct_seeds():
    seeds = {
        GameConfig.create(length, max_rows, GameMode.DAILY, "2025-01-15").to_seed_string()
        for length, max_rows in [(5, 6), (5, 5), (6, 6), (4, 6)]
    }
    assert len(seeds) == 4


def test_game_config_default():
    config = GameConfig.create_default("2025-01-15")
    assert (config.length, config.max_rows, config.mode) == (5, 6, GameMode.DAILY)


@pytest.mark.parametrize("length,max_rows,mode,date_iso", [
    (3, 6, "daily", "2025-01-15"),
    (7, 6, "daily", "2025-01-15"),
    (True, 6, "daily", "2025-01-15"),
    (5, 0, "daily", "2025-01-15"),
    (5, -1, "free", "2025-01-15"),
    (5, 6, "weekly", "2025-01-15"),
    (5, 6, "daily", ""),
    (5, 6, "daily", "   "),
])
def test_game_config_rejects_invalid(length, max_rows, mode, date_iso):
    with pytest.raises(GameConfigError):
        GameConfig.create(length, max_rows, mode, date_iso)


def test_game_config_is_value_error_and_valid_lengths():
    assert issubclass(GameConfigError, ValueError)
    assert GameConfig.is_valid_length(4) and GameConfig.is_valid_length(6)
    assert not GameConfig.is_valid_length(8)
    assert GameConfig.is_valid_length is is_valid_length


def test_game_config_is_immutable():
    config = GameConfig.create_default("2025-01-15")
    with pytest.raises(AttributeError):
        config.length = 6
