"""
Composition Root

Builds the word list, the stores and every service once, then hands
them to the use cases. Nothing here is a module-level singleton; callers
own the GameModule they create.
"""

import os
from typing import Optional

from .config import Config
from .repositories.interfaces import CompletionRepository, GameRepository, StatsRepository, WordList
from .repositories.word_list import StaticWordList
from .repositories.memory_store import (
    InMemoryCompletionRepository, InMemoryGameRepository, InMemoryStatsRepository
)
from .repositories.file_store import (
    JsonFileCompletionRepository, JsonFileGameRepository, JsonFileStatsRepository, JsonFileStore
)
from .repositories.mongo_store import (
    MongoCompletionRepository, MongoGameRepository, MongoStatsRepository, connect_database
)
from .services.guess_evaluator import GuessEvaluator
from .services.hint_provider import HintProvider
from .services.word_selector import WordSelector
from .services.start_game import StartGameUseCase
from .services.submit_guess import SubmitGuessUseCase
from .services.use_hint import UseHintUseCase
from .services.abandon_game import AbandonGameUseCase
from .utils.game_logger import GameLogger, game_logger

STORE_FILE_NAME = 'store.json'
STORAGE_BACKENDS = ('memory', 'file', 'mongo')


class GameModule:
    """Holds one instance of every collaborator and use case."""

    def __init__(self,
                 word_list: WordList,
                 game_repository: GameRepository,
                 completion_repository: CompletionRepository,
                 stats_repository: Optional[StatsRepository] = None,
                 evaluator: Optional[GuessEvaluator] = None,
                 word_selector: Optional[WordSelector] = None,
                 hint_provider: Optional[HintProvider] = None,
                 logger: Optional[GameLogger] = None):
        self.word_list = word_list
        self.game_repository = game_repository
        self.completion_repository = completion_repository
        self.stats_repository = stats_repository or InMemoryStatsRepository()
        self.evaluator = evaluator or GuessEvaluator()
        self.word_selector = word_selector or WordSelector(word_list)
        self.hint_provider = hint_provider or HintProvider()
        self.logger = logger or game_logger

        self.start_game_use_case = StartGameUseCase(
            self.word_list,
            self.game_repository,
            self.completion_repository,
            self.word_selector,
            self.evaluator,
            self.logger,
        )
        self.submit_guess_use_case = SubmitGuessUseCase(
            self.word_list,
            self.game_repository,
            self.completion_repository,
            self.stats_repository,
            self.logger,
        )
        self.use_hint_use_case = UseHintUseCase(
            self.game_repository,
            self.hint_provider,
            self.logger,
        )
        self.abandon_game_use_case = AbandonGameUseCase(
            self.game_repository,
            self.completion_repository,
            self.stats_repository,
            self.logger,
        )

    @classmethod
    def create(cls, config_class=Config) -> "GameModule":
        """
        Build a module with the storage backend named by the configuration.

        Args:
            config_class: Configuration class to read settings from

        Returns:
            A fully wired GameModule

        Raises:
            ValueError: If the backend is unknown or Mongo has no URI
            PyMongoError: If the Mongo server can't be reached
        """
        backend = config_class.STORAGE_BACKEND
        player_id = config_class.PLAYER_ID
        logger = GameLogger(config_class.LOG_DIR, config_class.LOG_LEVEL)

        word_list = StaticWordList(config_class.WORDS_DIR)

        if backend == 'memory':
            game_repository = InMemoryGameRepository()
            completion_repository = InMemoryCompletionRepository()
            stats_repository = InMemoryStatsRepository()
        elif backend == 'file':
            store = JsonFileStore(os.path.join(config_class.STATE_DIR, STORE_FILE_NAME), logger)
            game_repository = JsonFileGameRepository(store, player_id)
            completion_repository = JsonFileCompletionRepository(store, player_id)
            stats_repository = JsonFileStatsRepository(store, player_id)
        elif backend == 'mongo':
            if not config_class.MONGO_URI:
                raise ValueError("MONGO_URI must be set for the mongo storage backend")
            database = connect_database(config_class.MONGO_URI, config_class.MONGO_DB)
            game_repository = MongoGameRepository(database, player_id, logger)
            completion_repository = MongoCompletionRepository(database, player_id)
            stats_repository = MongoStatsRepository(database, player_id, logger)
        else:
            raise ValueError(
                f"Unknown storage backend '{backend}', expected one of {', '.join(STORAGE_BACKENDS)}"
            )

        logger.logger.info(f"Game module created with '{backend}' storage")

        return cls(word_list, game_repository, completion_repository, stats_repository, logger=logger)

    @classmethod
    def create_with_dependencies(cls,
                                 word_list: Optional[WordList] = None,
                                 game_repository: Optional[GameRepository] = None,
                                 completion_repository: Optional[CompletionRepository] = None,
                                 stats_repository: Optional[StatsRepository] = None,
                                 **services) -> "GameModule":
        """
        Build a module from explicit collaborators, filling the gaps with
        in-memory stores and the bundled word list.
        """
        return cls(
            word_list or StaticWordList(),
            game_repository or InMemoryGameRepository(),
            completion_repository or InMemoryCompletionRepository(),
            stats_repository or InMemoryStatsRepository(),
            **services
        )

    def get_word_list(self) -> WordList:
        return self.word_list

    def get_game_repository(self) -> GameRepository:
        return self.game_repository

    def get_completion_repository(self) -> CompletionRepository:
        return self.completion_repository

    def get_stats_repository(self) -> StatsRepository:
        return self.stats_repository

    def get_evaluator(self) -> GuessEvaluator:
        return self.evaluator

    def get_word_selector(self) -> WordSelector:
        return self.word_selector

    def get_hint_provider(self) -> HintProvider:
        return self.hint_provider

    def get_start_game_use_case(self) -> StartGameUseCase:
        return self.start_game_use_case

    def get_submit_guess_use_case(self) -> SubmitGuessUseCase:
        return self.submit_guess_use_case

    def get_use_hint_use_case(self) -> UseHintUseCase:
        return self.use_hint_use_case

    def get_abandon_game_use_case(self) -> AbandonGameUseCase:
        return self.abandon_game_use_case
