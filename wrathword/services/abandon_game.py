"""
Abandon Game Use Case

Discards the saved game. An abandoned daily puzzle counts as completed so
it can't be replayed for a better result, and giving up on a game still in
progress counts as a loss in the player stats.
"""

from typing import Optional

from ..models.game_config import GameMode
from ..models.game_session import GameStatus
from ..repositories.interfaces import CompletionRepository, GameRepository, StatsRepository
from ..utils.game_logger import GameLogger, game_logger
from .results import AbandonedGameInfo, AbandonGameResult


class AbandonGameUseCase:

    def __init__(self,
                 game_repository: GameRepository,
                 completion_repository: CompletionRepository,
                 stats_repository: StatsRepository,
                 logger: Optional[GameLogger] = None):
        self.game_repository = game_repository
        self.completion_repository = completion_repository
        self.stats_repository = stats_repository
        self.logger = logger or game_logger

    def execute(self) -> AbandonGameResult:
        """
        Execute the use case. Always succeeds.

        Returns:
            AbandonGameResult describing the discarded game, if there was one
        """
        saved = self.game_repository.load()

        abandoned_game = None
        if saved is not None:
            abandoned_game = AbandonedGameInfo(
                guess_count=len(saved.rows),
                hint_was_used=saved.hint_used,
                mode=saved.mode,
                date_iso=saved.date_iso,
                length=saved.length,
                max_rows=saved.max_rows,
            )

            if saved.mode is GameMode.DAILY:
                self.completion_repository.mark_daily_completed(saved.length, saved.max_rows, saved.date_iso)

            if saved.status is GameStatus.PLAYING:
                self.stats_repository.record_game_result(saved.length, False, len(saved.rows), saved.date_iso)

        self.game_repository.clear()

        if abandoned_game is not None:
            self.logger.log_game_event(
                'game_abandoned',
                guesses=abandoned_game.guess_count,
                hint_used=abandoned_game.hint_was_used,
                mode=abandoned_game.mode.value,
                date_iso=abandoned_game.date_iso,
                length=abandoned_game.length,
                max_rows=abandoned_game.max_rows,
            )
        self.logger.log_use_case('abandon_game', 'abandoned' if abandoned_game else 'nothing_saved')

        return AbandonGameResult(success=True, abandoned_game=abandoned_game)
