"""
Game Session Model

The aggregate root for a single game. Sessions are immutable: every
mutator returns a new GameSession and leaves the receiver untouched, so an
old reference (e.g. a stale daily game) stays valid next to a new one.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, Tuple

from .feedback import Feedback
from .game_config import GameConfig
from .tile_state import TileState

if TYPE_CHECKING:
    from ..services.guess_evaluator import GuessEvaluator


class GameStatus(Enum):
    """Session lifecycle state. WON and LOST are terminal."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class HintCell:
    """Board coordinate of a revealed hint letter."""
    row: int
    col: int

    def to_dict(self) -> Dict[str, int]:
        return {'row': self.row, 'col': self.col}


class GameSessionError(RuntimeError):
    """Base class for illegal session transitions."""


class GameOverError(GameSessionError):
    """Raised when a guess or hint is attempted on a finished game."""


class HintAlreadyUsedError(GameSessionError):
    """Raised when a second hint is requested for the same session."""


@dataclass(frozen=True)
class GameSession:
    """Immutable game state: config, answer, guess history, status and hint."""
    config: GameConfig
    answer: str
    guesses: Tuple[str, ...] = ()
    feedback: Tuple[Feedback, ...] = ()
    status: GameStatus = GameStatus.PLAYING
    hint_used: bool = False
    hinted_cell: Optional[HintCell] = None
    hinted_letter: Optional[str] = None
    evaluator: "GuessEvaluator" = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'answer', self.answer.upper())
        if self.evaluator is None:
            from ..services.guess_evaluator import GuessEvaluator
            object.__setattr__(self, 'evaluator', GuessEvaluator())

    @classmethod
    def create(cls, config: GameConfig, answer: str,
               evaluator: Optional["GuessEvaluator"] = None) -> "GameSession":
        """
        Start a fresh session for a puzzle.

        Args:
            config: Validated game configuration
            answer: Target word, stored in upper case
            evaluator: GuessEvaluator used to score guesses (default one if omitted)
        """
        return cls(config=config, answer=answer, evaluator=evaluator)

    @property
    def current_row(self) -> int:
        return len(self.guesses)

    @property
    def remaining_guesses(self) -> int:
        return self.config.max_rows - self.current_row

    def is_game_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    def can_submit_guess(self) -> bool:
        return self.status is GameStatus.PLAYING

    def submit_guess(self, guess: str) -> "GameSession":
        """
        Score a guess and return the session that follows it.

        The guess length and word-list membership are checked by the
        caller; the session only enforces that the game is still running.

        Raises:
            GameOverError: If the game is already won or lost
        """
        if self.is_game_over():
            raise GameOverError("Game is already over")

        normalized_guess = guess.upper()
        new_feedback = self.evaluator.evaluate(self.answer, normalized_guess)

        guesses = self.guesses + (normalized_guess,)
        if new_feedback.is_win():
            status = GameStatus.WON
        elif len(guesses) >= self.config.max_rows:
            status = GameStatus.LOST
        else:
            status = GameStatus.PLAYING

        return replace(
            self,
            guesses=guesses,
            feedback=self.feedback + (new_feedback,),
            status=status,
        )

    def use_hint(self, cell: HintCell, letter: str) -> "GameSession":
        """
        Record a revealed hint. The hint itself is computed by HintProvider.

        Raises:
            GameOverError: If the game is already won or lost
            HintAlreadyUsedError: If this session already used its hint
        """
        if self.is_game_over():
            raise GameOverError("Game is already over")
        if self.hint_used:
            raise HintAlreadyUsedError("Hint already used")

        return replace(self, hint_used=True, hinted_cell=cell, hinted_letter=letter)

    @property
    def keyboard_states(self) -> Dict[str, TileState]:
        """Best state observed for every guessed letter; states never downgrade."""
        states: Dict[str, TileState] = {}
        for guess, fb in zip(self.guesses, self.feedback):
            for letter, state in zip(guess, fb):
                current = states.get(letter)
                states[letter] = state if current is None else TileState.max(current, state)
        return states

    def to_share_string(self) -> str:
        """Score line plus one emoji row per guess."""
        if self.status is GameStatus.WON:
            score_display = f"{len(self.guesses)}/{self.config.max_rows}"
        else:
            score_display = f"X/{self.config.max_rows}"

        emoji_grid = '\n'.join(fb.to_share_emoji() for fb in self.feedback)
        return f"{score_display}\n\n{emoji_grid}"
