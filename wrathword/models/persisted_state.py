"""
Persisted Game State Model

Flat snapshot of a GameSession, the only document exchanged with a game
state store. ``to_dict`` / ``from_dict`` use the camelCase wire keys shared
with every storage backend.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .feedback import Feedback
from .game_config import GameConfig, GameMode
from .game_session import GameSession, GameStatus, HintCell

if TYPE_CHECKING:
    from ..services.guess_evaluator import GuessEvaluator

_REQUIRED_KEYS = {
    'length': int,
    'maxRows': int,
    'mode': str,
    'dateISO': str,
    'answer': str,
    'rows': list,
    'feedback': list,
    'status': str,
    'hintUsed': bool,
}


@dataclass(frozen=True)
class PersistedGameState:
    """Serialization boundary between a GameSession and a game state store."""
    length: int
    max_rows: int
    mode: GameMode
    date_iso: str
    answer: str
    rows: Tuple[str, ...]
    feedback: Tuple[Feedback, ...]
    status: GameStatus
    hint_used: bool
    hinted_cell: Optional[HintCell] = None
    hinted_letter: Optional[str] = None

    @classmethod
    def from_session(cls, session: GameSession) -> "PersistedGameState":
        config = session.config
        return cls(
            length=config.length,
            max_rows=config.max_rows,
            mode=config.mode,
            date_iso=config.date_iso,
            answer=session.answer,
            rows=session.guesses,
            feedback=session.feedback,
            status=session.status,
            hint_used=session.hint_used,
            hinted_cell=session.hinted_cell,
            hinted_letter=session.hinted_letter,
        )

    def matches(self, config: GameConfig) -> bool:
        """True when length, row budget and mode all match the config."""
        return (
            self.length == config.length
            and self.max_rows == config.max_rows
            and self.mode is config.mode
        )

    def restore(self, evaluator: Optional["GuessEvaluator"] = None) -> GameSession:
        """
        Rebuild the session by replay: hint first, then every guess in order.

        Hints never consume a row, so applying the hint before the guesses
        reproduces the saved session whatever row it was taken on.

        Raises:
            GameConfigError: If the stored config is invalid
            ValueError: If the answer or a guess has the wrong length, or the
                hint fields disagree with hint_used
            GameSessionError: If the stored guesses cannot be replayed
        """
        config = GameConfig.create(self.length, self.max_rows, self.mode, self.date_iso)
        if len(self.answer) != config.length or any(len(row) != config.length for row in self.rows):
            raise ValueError("Saved answer and guesses must match the word length")

        hint_fields = (self.hinted_cell is not None, self.hinted_letter is not None)
        if hint_fields != (self.hint_used, self.hint_used):
            raise ValueError("Saved hint must have both a cell and a letter exactly when hintUsed is set")

        session = GameSession.create(config, self.answer, evaluator)

        if self.hint_used:
            session = session.use_hint(self.hinted_cell, self.hinted_letter)

        for guess in self.rows:
            session = session.submit_guess(guess)

        return session

    def to_dict(self) -> Dict[str, Any]:
        return {
            'length': self.length,
            'maxRows': self.max_rows,
            'mode': self.mode.value,
            'dateISO': self.date_iso,
            'answer': self.answer,
            'rows': list(self.rows),
            'feedback': [fb.to_wire() for fb in self.feedback],
            'status': self.status.value,
            'hintUsed': self.hint_used,
            'hintedCell': self.hinted_cell.to_dict() if self.hinted_cell else None,
            'hintedLetter': self.hinted_letter,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersistedGameState":
        """
        Parse a stored document.

        Raises:
            ValueError: If a required field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError("Saved game state must be an object")

        for key, expected in _REQUIRED_KEYS.items():
            value = data.get(key)
            # bool is an int subclass; don't accept it where a number is expected
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ValueError(f"Saved game state field '{key}' is missing or invalid")

        rows: List[str] = data['rows']
        if not all(isinstance(row, str) for row in rows):
            raise ValueError("Saved game state rows must be strings")

        hinted_cell = None
        cell = data.get('hintedCell')
        if cell is not None:
            if not isinstance(cell, dict) or not isinstance(cell.get('row'), int) or not isinstance(cell.get('col'), int):
                raise ValueError("Saved game state field 'hintedCell' is invalid")
            hinted_cell = HintCell(row=cell['row'], col=cell['col'])

        hinted_letter = data.get('hintedLetter')
        if hinted_letter is not None and not isinstance(hinted_letter, str):
            raise ValueError("Saved game state field 'hintedLetter' is invalid")

        return cls(
            length=data['length'],
            max_rows=data['maxRows'],
            mode=GameMode(data['mode']),
            date_iso=data['dateISO'],
            answer=data['answer'],
            rows=tuple(rows),
            feedback=tuple(Feedback.from_states(fb) for fb in data['feedback']),
            status=GameStatus(data['status']),
            hint_used=data['hintUsed'],
            hinted_cell=hinted_cell,
            hinted_letter=hinted_letter,
        )
