"""
Start Game Use Case

Decides what the player sees when opening a board: a brand new puzzle,
their saved game, a choice between a stale daily game and today's puzzle,
or a notice that today's daily is already done.
"""

from typing import Optional

from ..models.game_config import GameConfig
from ..models.game_session import GameSession, GameSessionError
from ..models.persisted_state import PersistedGameState
from ..repositories.interfaces import CompletionRepository, GameRepository, WordList
from ..utils.game_logger import GameLogger, game_logger
from .guess_evaluator import GuessEvaluator
from .results import StartGameOutcome, StartGameResult
from .word_selector import WordSelector


class StartGameUseCase:
    """
    Starts or restores a game session.

    Decision order:
    1. Daily puzzle already completed -> already_completed
    2. No saved game, or saved board (length, rows, mode) differs -> new_game
    3. Saved daily game from another date:
       - without guesses it is replaced silently -> new_game
       - with guesses both games are returned -> stale_game
    4. Otherwise the saved game is replayed -> restored
    """

    def __init__(self,
                 word_list: WordList,
                 game_repository: GameRepository,
                 completion_repository: CompletionRepository,
                 word_selector: WordSelector,
                 evaluator: GuessEvaluator,
                 logger: Optional[GameLogger] = None):
        self.word_list = word_list
        self.game_repository = game_repository
        self.completion_repository = completion_repository
        self.word_selector = word_selector
        self.evaluator = evaluator
        self.logger = logger or game_logger

    def execute(self, config: GameConfig) -> StartGameResult:
        """
        Execute the use case.

        Args:
            config: The requested game configuration

        Returns:
            StartGameResult tagged with what happened
        """
        if config.is_daily() and self.completion_repository.is_daily_completed(
                config.length, config.max_rows, config.date_iso):
            self._log(config, StartGameOutcome.ALREADY_COMPLETED)
            return StartGameResult(outcome=StartGameOutcome.ALREADY_COMPLETED)

        saved = self.game_repository.load()

        if saved is not None and saved.matches(config):
            if config.is_daily() and saved.date_iso != config.date_iso:
                return self._handle_stale_game(saved, config)

            session = self._restore_session(saved)
            if session is not None:
                self._log(config, StartGameOutcome.RESTORED, guesses=session.current_row)
                return StartGameResult(outcome=StartGameOutcome.RESTORED, session=session)

        return self._start_new_game(config)

    def _handle_stale_game(self, saved: PersistedGameState, config: GameConfig) -> StartGameResult:
        if not saved.rows:
            # Nothing played yet, replace it without asking
            return self._start_new_game(config, replaced_date=saved.date_iso)

        stale_session = self._restore_session(saved)
        if stale_session is None:
            return self._start_new_game(config)

        new_session = self._create_session(config)
        self.logger.log_game_event(
            'stale_game_found',
            stale_date=saved.date_iso,
            requested_date=config.date_iso,
            guesses=len(saved.rows),
        )
        self._log(config, StartGameOutcome.STALE_GAME, stale_date=saved.date_iso)
        return StartGameResult(
            outcome=StartGameOutcome.STALE_GAME,
            stale_session=stale_session,
            new_session=new_session,
        )

    def _start_new_game(self, config: GameConfig, **details) -> StartGameResult:
        session = self._create_session(config)
        self.game_repository.save(PersistedGameState.from_session(session))
        self._log(config, StartGameOutcome.NEW_GAME, **details)
        return StartGameResult(outcome=StartGameOutcome.NEW_GAME, session=session)

    def _create_session(self, config: GameConfig) -> GameSession:
        word = self.word_selector.select_word(config, self.word_list.get_answers(config.length))
        return GameSession.create(config, word, self.evaluator)

    def _restore_session(self, saved: PersistedGameState) -> Optional[GameSession]:
        """Replay a saved game; None when the snapshot can't be replayed."""
        try:
            return saved.restore(self.evaluator)
        except (ValueError, GameSessionError) as e:
            self.logger.log_warning('start_game', 'Saved game could not be replayed, starting over',
                                    error=str(e))
            return None

    def _log(self, config: GameConfig, outcome: StartGameOutcome, **details):
        self.logger.log_use_case(
            'start_game', outcome.value,
            mode=config.mode.value, length=config.length,
            max_rows=config.max_rows, date_iso=config.date_iso,
            **details
        )
