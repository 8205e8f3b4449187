"""
Player Statistics Model

Per word length record of finished games: played, won, current and best
win streak, and how many guesses each win took.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Dict, Iterable, Optional


def _day_gap(earlier_iso: str, later_iso: str) -> Optional[int]:
    """Whole days between two ISO dates, or None if either can't be parsed."""
    try:
        return (date.fromisoformat(later_iso) - date.fromisoformat(earlier_iso)).days
    except ValueError:
        return None


@dataclass(frozen=True)
class LengthStats:
    """Statistics for one word length. ``record`` returns an updated copy."""
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    max_streak: int = 0
    last_played_date: Optional[str] = None
    guess_distribution: Dict[int, int] = field(default_factory=dict)

    def record(self, won: bool, guesses: int, date_iso: str) -> "LengthStats":
        """
        Count one finished game.

        A win extends the streak when played the day after the last game,
        keeps it on the same day and restarts it at 1 otherwise. A loss
        resets the streak to 0. Only wins enter the guess distribution.

        Args:
            won: Whether the game was won
            guesses: Rows used
            date_iso: Puzzle date of the game
        """
        distribution = dict(self.guess_distribution)
        current_streak = 0

        if won:
            distribution[guesses] = distribution.get(guesses, 0) + 1

            gap = None if self.last_played_date is None else _day_gap(self.last_played_date, date_iso)
            if gap == 0:
                current_streak = max(self.current_streak, 1)
            elif gap == 1:
                current_streak = self.current_streak + 1
            else:
                current_streak = 1

        return replace(
            self,
            games_played=self.games_played + 1,
            games_won=self.games_won + (1 if won else 0),
            current_streak=current_streak,
            max_streak=max(self.max_streak, current_streak),
            last_played_date=date_iso,
            guess_distribution=distribution,
        )

    @property
    def win_rate(self) -> int:
        """Whole-number win percentage (0 when nothing was played)."""
        if self.games_played == 0:
            return 0
        return round(self.games_won / self.games_played * 100)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'gamesPlayed': self.games_played,
            'gamesWon': self.games_won,
            'currentStreak': self.current_streak,
            'maxStreak': self.max_streak,
            'lastPlayedDate': self.last_played_date,
            # JSON and BSON object keys must be strings
            'guessDistribution': {str(k): v for k, v in sorted(self.guess_distribution.items())},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LengthStats":
        """
        Parse a stored document.

        Raises:
            ValueError: If a field has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError("Stored stats must be an object")

        counters = {}
        for key in ('gamesPlayed', 'gamesWon', 'currentStreak', 'maxStreak'):
            value = data.get(key, 0)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"Stored stats field '{key}' is invalid")
            counters[key] = value

        last_played = data.get('lastPlayedDate')
        if last_played is not None and not isinstance(last_played, str):
            raise ValueError("Stored stats field 'lastPlayedDate' is invalid")

        raw_distribution = data.get('guessDistribution') or {}
        if not isinstance(raw_distribution, dict):
            raise ValueError("Stored stats field 'guessDistribution' is invalid")
        try:
            distribution = {int(k): int(v) for k, v in raw_distribution.items()}
        except (TypeError, ValueError):
            raise ValueError("Stored stats field 'guessDistribution' is invalid")

        return cls(
            games_played=counters['gamesPlayed'],
            games_won=counters['gamesWon'],
            current_streak=counters['currentStreak'],
            max_streak=counters['maxStreak'],
            last_played_date=last_played,
            guess_distribution=distribution,
        )


@dataclass(frozen=True)
class TotalStats:
    """Statistics summed over every word length."""
    played: int
    won: int
    win_rate: int
    current_streak: int
    max_streak: int

    @classmethod
    def from_lengths(cls, stats: Iterable[LengthStats]) -> "TotalStats":
        """
        Sum played and won, keep the best streak, and take the current
        streak from the most recently played length.
        """
        played = won = max_streak = current_streak = 0
        latest: Optional[str] = None

        for length_stats in stats:
            played += length_stats.games_played
            won += length_stats.games_won
            max_streak = max(max_streak, length_stats.max_streak)
            # ISO dates order correctly as strings
            if length_stats.last_played_date and (latest is None or length_stats.last_played_date > latest):
                latest = length_stats.last_played_date
                current_streak = length_stats.current_streak

        win_rate = round(won / played * 100) if played else 0
        return cls(played=played, won=won, win_rate=win_rate,
                   current_streak=current_streak, max_streak=max_streak)
