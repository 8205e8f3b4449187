"""
Hint Provider

Chooses which letter to reveal: the leftmost column that has never been
marked correct in any previous guess.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Set

from ..models.feedback import Feedback
from ..models.game_session import HintCell
from ..models.tile_state import TileState

NO_POSITIONS_REASON = "All positions are already correct - no positions available for hint"


@dataclass(frozen=True)
class HintResult:
    """Outcome of a hint lookup: a position and letter, or a failure reason."""
    success: bool
    position: Optional[HintCell] = None
    letter: Optional[str] = None
    reason: Optional[str] = None


class HintProvider:
    """Deterministic first-unrevealed-column hint strategy."""

    def get_hint(self, answer: str, current_row: int, feedback: Iterable[Feedback]) -> HintResult:
        """
        Get a hint for the current game state.

        Args:
            answer: Target word
            current_row: Row the hint is shown on (number of guesses so far)
            feedback: Every Feedback received so far

        Returns:
            HintResult with the first column not yet guessed correctly, or a
            failure when every column has been correct at some point
        """
        correct_positions: Set[int] = set()
        for fb in feedback:
            for col, state in enumerate(fb):
                if state is TileState.CORRECT:
                    correct_positions.add(col)

        for col in range(len(answer)):
            if col not in correct_positions:
                return HintResult(
                    success=True,
                    position=HintCell(row=current_row, col=col),
                    letter=answer[col].upper(),
                )

        return HintResult(success=False, reason=NO_POSITIONS_REASON)
