"""
Tile State Model

Evaluation result for a single letter position.

Precedence: correct > present > absent. Keyboard tracking relies on this
order so a letter's state only ever upgrades.
"""

from enum import Enum
from typing import Any


class TileState(Enum):
    """Letter evaluation status, ordered by precedence."""
    ABSENT = "absent"
    PRESENT = "present"
    CORRECT = "correct"

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    def __lt__(self, other: "TileState") -> bool:
        if not isinstance(other, TileState):
            return NotImplemented
        return self.precedence < other.precedence

    def __le__(self, other: "TileState") -> bool:
        if not isinstance(other, TileState):
            return NotImplemented
        return self.precedence <= other.precedence

    def __gt__(self, other: "TileState") -> bool:
        if not isinstance(other, TileState):
            return NotImplemented
        return self.precedence > other.precedence

    def __ge__(self, other: "TileState") -> bool:
        if not isinstance(other, TileState):
            return NotImplemented
        return self.precedence >= other.precedence

    @staticmethod
    def compare(a: "TileState", b: "TileState") -> int:
        """Positive if a outranks b, negative if b outranks a, zero if equal."""
        return a.precedence - b.precedence

    @staticmethod
    def max(a: "TileState", b: "TileState") -> "TileState":
        """Return the higher precedence state."""
        return a if TileState.compare(a, b) >= 0 else b

    @staticmethod
    def is_valid(value: Any) -> bool:
        """Check if a value is a TileState or one of its wire strings."""
        if isinstance(value, TileState):
            return True
        return isinstance(value, str) and value in _BY_VALUE

    @staticmethod
    def parse(value: Any) -> "TileState":
        """
        Convert a wire string (or a TileState) to a TileState.

        Raises:
            ValueError: If the value is not a known state
        """
        if isinstance(value, TileState):
            return value
        if isinstance(value, str) and value in _BY_VALUE:
            return _BY_VALUE[value]
        raise ValueError(f"Invalid tile state: {value!r}")


_PRECEDENCE = {
    TileState.ABSENT: 0,
    TileState.PRESENT: 1,
    TileState.CORRECT: 2,
}

_BY_VALUE = {state.value: state for state in TileState}
