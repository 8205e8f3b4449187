import pytest

from wrathword.composition import GameModule
from wrathword.models import GameConfig, GameMode
from wrathword.repositories import (
    InMemoryCompletionRepository, InMemoryGameRepository, InMemoryStatsRepository, StaticWordList
)

TODAY = "2025-01-15"
YESTERDAY = "2025-01-14"

ALLOWED_5 = ["stare", "raise", "crate", "trace", "adieu", "briny", "slate", "hello", "babes", "abbey"]


@pytest.fixture
def word_list():
    # A single answer per length keeps the selected word predictable
    return StaticWordList.from_words(
        answers={4: ["BAKE"], 5: ["CRANE"], 6: ["ANCHOR"]},
        allowed={5: ALLOWED_5},
    )


@pytest.fixture
def game_repository():
    return InMemoryGameRepository()


@pytest.fixture
def completion_repository():
    return InMemoryCompletionRepository()


@pytest.fixture
def stats_repository():
    return InMemoryStatsRepository()


@pytest.fixture
def module(word_list, game_repository, completion_repository, stats_repository):
    return GameModule.create_with_dependencies(
        word_list=word_list,
        game_repository=game_repository,
        completion_repository=completion_repository,
        stats_repository=stats_repository,
    )


@pytest.fixture
def daily_config():
    return GameConfig.create(5, 6, GameMode.DAILY, TODAY)


@pytest.fixture
def free_config():
    return GameConfig.create(5, 6, GameMode.FREE, TODAY)
