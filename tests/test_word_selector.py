import pytest

from wrathword.models import GameConfig, GameMode
from wrathword.repositories import StaticWordList
from wrathword.services import WordSelector, fnv1a_32, mulberry32, seeded_index, select_word

WORDS = [f"W{i:04d}" for i in range(200)]


def test_fnv1a_known_values():
    assert fnv1a_32("") == 2166136261
    assert fnv1a_32("a") == 0xE40C292C
    assert 0 <= fnv1a_32("2025-01-15:5:6") <= 0xFFFFFFFF


def test_mulberry32_is_deterministic_and_in_range():
    first, second = mulberry32(12345), mulberry32(12345)
    values = [first() for _ in range(50)]
    assert values == [second() for _ in range(50)]
    assert all(0 <= v < 1 for v in values)
    assert len(set(values)) > 1


def test_seeded_index_range():
    for seed in ("a", "b", "2025-01-15:5:6", "2025-12-31:6:8"):
        assert 0 <= seeded_index(seed, 7) < 7
    assert seeded_index("anything", 1) == 0
    with pytest.raises(ValueError):
        seeded_index("anything", 0)


def test_same_config_same_word():
    config = GameConfig.create(5, 6, GameMode.DAILY, "2025-01-15")
    assert select_word(config, WORDS) == select_word(config, WORDS)


def test_daily_and_free_share_the_word():
    daily = GameConfig.create(5, 6, GameMode.DAILY, "2025-01-15")
    free = GameConfig.create(5, 6, GameMode.FREE, "2025-01-15")
    assert select_word(daily, WORDS) == select_word(free, WORDS)


def test_words_vary_across_dates():
    picks = {
        select_word(GameConfig.create(5, 6, GameMode.DAILY, f"2025-03-{day:02d}"), WORDS)
        for day in range(1, 31)
    }
    assert len(picks) > 1


def test_single_candidate_and_empty_list():
    config = GameConfig.create(5, 6, GameMode.DAILY, "2025-01-15")
    assert select_word(config, ["CRANE"]) == "CRANE"
    with pytest.raises(ValueError):
        select_word(config, [])


def test_selector_uses_word_list():
    word_list = StaticWordList.from_words({5: WORDS})
    selector = WordSelector(word_list)
    config = GameConfig.create(5, 6, GameMode.DAILY, "2025-01-15")
    assert selector.select_for(config) == select_word(config, WORDS)
    assert selector.select_word(config, ["SLATE"]) == "SLATE"


def test_selector_without_word_list_needs_candidates():
    config = GameConfig.create(5, 6, GameMode.DAILY, "2025-01-15")
    with pytest.raises(ValueError):
        WordSelector().select_word(config)
