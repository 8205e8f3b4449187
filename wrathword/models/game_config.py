"""
Game Configuration Model

Everything needed to start a game: word length, row budget, mode and the
puzzle date. Also produces the seed string used for word selection.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..config.game_settings import VALID_LENGTHS, DEFAULT_LENGTH, DEFAULT_MAX_ROWS, is_valid_length


class GameMode(Enum):
    """Daily puzzle (one per date, tracked) or free play (untracked)."""
    DAILY = "daily"
    FREE = "free"


class GameConfigError(ValueError):
    """Raised when a GameConfig is built from invalid parameters."""


@dataclass(frozen=True)
class GameConfig:
    """Immutable, validated game configuration."""
    length: int
    max_rows: int
    mode: GameMode
    date_iso: str

    VALID_LENGTHS = VALID_LENGTHS

    def __post_init__(self):
        if isinstance(self.length, bool) or self.length not in VALID_LENGTHS:
            raise GameConfigError(
                f"Invalid word length: {self.length}. Must be one of {', '.join(map(str, VALID_LENGTHS))}"
            )

        if isinstance(self.max_rows, bool) or not isinstance(self.max_rows, int) or self.max_rows <= 0:
            raise GameConfigError("max_rows must be a positive integer")

        if not isinstance(self.mode, GameMode):
            raise GameConfigError(f"Invalid game mode: {self.mode}. Must be 'daily' or 'free'")

        if not isinstance(self.date_iso, str) or not self.date_iso.strip():
            raise GameConfigError("date_iso is required")

    @classmethod
    def create(cls, length: int, max_rows: int, mode: Union[GameMode, str], date_iso: str) -> "GameConfig":
        """
        Create a validated GameConfig.

        Args:
            length: Word length (4, 5 or 6)
            max_rows: Number of guess rows, must be positive
            mode: GameMode or its string value ("daily" / "free")
            date_iso: Puzzle date, e.g. "2025-01-15"

        Raises:
            GameConfigError: If any parameter is invalid
        """
        if isinstance(mode, str):
            try:
                mode = GameMode(mode)
            except ValueError:
                raise GameConfigError(f"Invalid game mode: {mode}. Must be 'daily' or 'free'")
        return cls(length=length, max_rows=max_rows, mode=mode, date_iso=date_iso)

    @classmethod
    def create_default(cls, date_iso: str) -> "GameConfig":
        """Daily game with the default length and row budget."""
        return cls.create(DEFAULT_LENGTH, DEFAULT_MAX_ROWS, GameMode.DAILY, date_iso)

    is_valid_length = staticmethod(is_valid_length)

    def to_seed_string(self) -> str:
        """
        Seed for deterministic word selection: "dateISO:length:maxRows".

        Mode is left out so daily and free play share a word for the same
        board; max_rows is kept so boards with different row budgets get
        different puzzles.
        """
        return f"{self.date_iso}:{self.length}:{self.max_rows}"

    def is_daily(self) -> bool:
        return self.mode is GameMode.DAILY

    def is_free_play(self) -> bool:
        return self.mode is GameMode.FREE
