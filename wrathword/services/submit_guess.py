"""
Submit Guess Use Case

Validates a typed row, scores it and saves the game. When the game ends
it records the daily completion and the player stats.
"""

from typing import Optional

from ..models.game_session import GameSession, GameStatus
from ..models.persisted_state import PersistedGameState
from ..repositories.interfaces import CompletionRepository, GameRepository, StatsRepository, WordList
from ..utils.game_logger import GameLogger, game_logger
from .results import SubmitGuessError, SubmitGuessResult


class SubmitGuessUseCase:
    """
    Handles submitting a guess.

    Checks run in this order and the first failure is returned:
    game_over, invalid_length, incomplete, not_in_word_list.
    """

    def __init__(self,
                 word_list: WordList,
                 game_repository: GameRepository,
                 completion_repository: CompletionRepository,
                 stats_repository: StatsRepository,
                 logger: Optional[GameLogger] = None):
        self.word_list = word_list
        self.game_repository = game_repository
        self.completion_repository = completion_repository
        self.stats_repository = stats_repository
        self.logger = logger or game_logger

    def _validate(self, session: GameSession, guess: str) -> Optional[SubmitGuessError]:
        expected_length = session.config.length

        if session.is_game_over():
            return SubmitGuessError.GAME_OVER

        if len(guess) != expected_length:
            return SubmitGuessError.INVALID_LENGTH

        # Blank cells mean the row is still being typed
        if any(ch.isspace() for ch in guess):
            return SubmitGuessError.INCOMPLETE

        if not self.word_list.is_valid_guess(guess, expected_length):
            return SubmitGuessError.NOT_IN_WORD_LIST

        return None

    def execute(self, session: GameSession, guess: str) -> SubmitGuessResult:
        """
        Execute the use case.

        Args:
            session: Current game session
            guess: The word to guess

        Returns:
            SubmitGuessResult with the updated session, or the failed check
        """
        error = self._validate(session, guess)
        if error is not None:
            self.logger.log_use_case('submit_guess', error.value,
                                     row=session.current_row, mode=session.config.mode.value)
            return SubmitGuessResult(success=False, error=error)

        new_session = session.submit_guess(guess)
        self.game_repository.save(PersistedGameState.from_session(new_session))

        is_win = new_session.status is GameStatus.WON
        is_loss = new_session.status is GameStatus.LOST

        config = new_session.config
        if new_session.is_game_over():
            if config.is_daily():
                self.completion_repository.mark_daily_completed(config.length, config.max_rows, config.date_iso)
            self.stats_repository.record_game_result(config.length, is_win, new_session.current_row, config.date_iso)
            self.logger.log_game_event(
                'game_won' if is_win else 'game_lost',
                answer=new_session.answer,
                guesses=new_session.current_row,
                max_rows=config.max_rows,
                mode=config.mode.value,
                date_iso=config.date_iso,
                hint_used=new_session.hint_used,
            )

        self.logger.log_use_case('submit_guess', 'accepted',
                                 row=session.current_row, status=new_session.status.value)

        return SubmitGuessResult(
            success=True,
            session=new_session,
            is_win=is_win,
            is_loss=is_loss,
        )
