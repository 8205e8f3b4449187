"""
Feedback Model

The evaluation result for a complete guess: one TileState per position.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .tile_state import TileState

EMOJI_MAP = {
    TileState.CORRECT: '\U0001F7E9',
    TileState.PRESENT: '\U0001F7E8',
    TileState.ABSENT: '⬛',
}


@dataclass(frozen=True)
class Feedback:
    """Immutable per-position evaluation of a guess."""
    states: Tuple[TileState, ...]

    def __post_init__(self):
        # Copy in so a caller's list can't alias our state
        object.__setattr__(self, 'states', tuple(self.states))

    @classmethod
    def from_states(cls, states: Iterable[Union[TileState, str]]) -> "Feedback":
        """
        Build a Feedback from tile states or their wire strings.

        Raises:
            ValueError: If any entry is not a valid tile state
        """
        return cls(tuple(TileState.parse(s) for s in states))

    def __len__(self) -> int:
        return len(self.states)

    def __iter__(self):
        return iter(self.states)

    def at(self, index: int) -> Optional[TileState]:
        """State at a position, or None when out of range."""
        if index < 0 or index >= len(self.states):
            return None
        return self.states[index]

    def is_win(self) -> bool:
        """True when every position is correct."""
        return all(state is TileState.CORRECT for state in self.states)

    def count_by_state(self, state: TileState) -> int:
        return sum(1 for s in self.states if s is state)

    def correct_positions(self) -> List[int]:
        return [i for i, s in enumerate(self.states) if s is TileState.CORRECT]

    def to_share_emoji(self) -> str:
        """Render as a row of coloured squares for sharing."""
        return ''.join(EMOJI_MAP[state] for state in self.states)

    def to_wire(self) -> List[str]:
        return [state.value for state in self.states]
