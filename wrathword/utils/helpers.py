"""
Helper Functions

Contains utility functions used throughout the application.
"""

from datetime import date
from typing import Optional


def today_iso(today: Optional[date] = None) -> str:
    """Calendar date used for the daily puzzle, as YYYY-MM-DD."""
    return (today or date.today()).isoformat()


def scoped_key(base_key: str, player_id: Optional[str] = None) -> str:
    """Prefix a storage key with the player id so players don't share state."""
    return f"{player_id}.{base_key}" if player_id else base_key


def daily_completion_key(length: int, max_rows: int, date_iso: str) -> str:
    return f"daily.{length}x{max_rows}.{date_iso}.completed"


def completed_dates_key(length: int) -> str:
    return f"daily.{length}.completedDates"


def stats_key(length: int) -> str:
    return f"stats.{length}"
