"""
Use Case Results

Tagged outcomes returned by the use cases. Expected failures (a word that
isn't in the list, a second hint) are reported here, never raised.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.game_config import GameMode
from ..models.game_session import GameSession, HintCell


class StartGameOutcome(Enum):
    NEW_GAME = "new_game"
    RESTORED = "restored"
    STALE_GAME = "stale_game"
    ALREADY_COMPLETED = "already_completed"


class SubmitGuessError(Enum):
    INVALID_LENGTH = "invalid_length"
    INCOMPLETE = "incomplete"
    NOT_IN_WORD_LIST = "not_in_word_list"
    GAME_OVER = "game_over"


class UseHintError(Enum):
    ALREADY_USED = "already_used"
    GAME_OVER = "game_over"
    NO_HINT_AVAILABLE = "no_hint_available"


@dataclass(frozen=True)
class StartGameResult:
    """
    ``session`` is set for new_game and restored. For stale_game the saved
    game is ``stale_session`` and the unsaved replacement is ``new_session``.
    """
    outcome: StartGameOutcome
    session: Optional[GameSession] = None
    stale_session: Optional[GameSession] = None
    new_session: Optional[GameSession] = None


@dataclass(frozen=True)
class SubmitGuessResult:
    success: bool
    session: Optional[GameSession] = None
    is_win: bool = False
    is_loss: bool = False
    error: Optional[SubmitGuessError] = None


@dataclass(frozen=True)
class UseHintResult:
    success: bool
    session: Optional[GameSession] = None
    position: Optional[HintCell] = None
    letter: Optional[str] = None
    error: Optional[UseHintError] = None


@dataclass(frozen=True)
class AbandonedGameInfo:
    """What was discarded, for the caller's records."""
    guess_count: int
    hint_was_used: bool
    mode: GameMode
    date_iso: str
    length: int
    max_rows: int


@dataclass(frozen=True)
class AbandonGameResult:
    success: bool = True
    abandoned_game: Optional[AbandonedGameInfo] = None
