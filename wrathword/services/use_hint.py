"""
Use Hint Use Case

Reveals one letter of the answer, at most once per game.
"""

from typing import Optional

from ..models.game_session import GameSession
from ..models.persisted_state import PersistedGameState
from ..repositories.interfaces import GameRepository
from ..utils.game_logger import GameLogger, game_logger
from .hint_provider import HintProvider
from .results import UseHintError, UseHintResult


class UseHintUseCase:

    def __init__(self,
                 game_repository: GameRepository,
                 hint_provider: HintProvider,
                 logger: Optional[GameLogger] = None):
        self.game_repository = game_repository
        self.hint_provider = hint_provider
        self.logger = logger or game_logger

    def _fail(self, session: GameSession, error: UseHintError) -> UseHintResult:
        self.logger.log_use_case('use_hint', error.value, row=session.current_row)
        return UseHintResult(success=False, error=error)

    def execute(self, session: GameSession) -> UseHintResult:
        """
        Execute the use case.

        Args:
            session: Current game session

        Returns:
            UseHintResult with the updated session and the revealed cell,
            or the reason no hint was given
        """
        if session.is_game_over():
            return self._fail(session, UseHintError.GAME_OVER)

        if session.hint_used:
            return self._fail(session, UseHintError.ALREADY_USED)

        hint = self.hint_provider.get_hint(session.answer, session.current_row, session.feedback)
        if not hint.success:
            return self._fail(session, UseHintError.NO_HINT_AVAILABLE)

        new_session = session.use_hint(hint.position, hint.letter)
        self.game_repository.save(PersistedGameState.from_session(new_session))

        self.logger.log_use_case('use_hint', 'revealed',
                                 row=hint.position.row, col=hint.position.col)

        return UseHintResult(
            success=True,
            session=new_session,
            position=hint.position,
            letter=hint.letter,
        )
