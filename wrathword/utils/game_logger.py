"""
Game Logger Module for WrathWord

This module provides structured logging for use-case outcomes, game events
and errors. Every entry is a JSON document so logs can be parsed later.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config


class GameLogger:
    """
    Centralized logging system for the game engine.

    Features:
    - Use-case outcome tracking (start, guess, hint, abandon)
    - Game event logging (wins, losses, stale games)
    - JSON structured logs for easy parsing
    - Optional daily log file next to the console handler
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = 'INFO', name: str = 'wrathword'):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = self._setup_logger(name, level)

    def _setup_logger(self, name: str, level: str) -> logging.Logger:
        """Setup the game logger with console and optional file handlers."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_use_case(self, action: str, outcome: str, **kwargs):
        """
        Log the outcome of a use case.

        Args:
            action: Use case name (e.g., 'start_game', 'submit_guess')
            outcome: Result tag (e.g., 'new_game', 'not_in_word_list')
            **kwargs: Additional details to log (never the answer)
        """
        details = {'outcome': outcome, **kwargs}
        self.logger.info(self._create_log_entry('USE_CASE', action, details))

    def log_game_event(self, event: str, **kwargs):
        """
        Log game-specific events (wins, losses, stale games, etc.).

        Args:
            event: Type of game event (e.g., 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        self.logger.info(self._create_log_entry('GAME_EVENT', event, dict(kwargs)))

    def log_warning(self, action: str, message: str, **kwargs):
        """Log a recoverable problem, such as a corrupt saved game."""
        details = {'message': message, **kwargs}
        self.logger.warning(self._create_log_entry('WARNING', action, details))

    def log_error(self, error: Exception, action: str, **kwargs):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            **kwargs: Additional details to log
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            **kwargs
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
