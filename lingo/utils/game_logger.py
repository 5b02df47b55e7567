"""
Game Logger Module for Lingo

This module provides structured logging for player actions and game events.
The console only receives warnings and errors so the curses screen stays
intact while a game is running.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the terminal game.

    Features:
    - Player action tracking (submitted guesses, aborts)
    - Game event logging (start, scored guesses, wins, losses)
    - JSON structured log lines for easy parsing

    Nothing touches the filesystem until configure() is called; before that
    records propagate to the root logger.
    """

    LOGGER_NAME = 'lingo_game'

    def __init__(self):
        self.logger = logging.getLogger(self.LOGGER_NAME)
        self.log_file: Optional[Path] = None

    def configure(self, log_dir: str = "logs", level: str = "INFO", to_file: bool = True) -> logging.Logger:
        """Setup the game logger with file and console handlers."""
        logger = self.logger
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        if to_file:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            # Create log file with date
            self.log_file = log_path / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        console_handler.addFilter(lambda record: getattr(record, 'console', True))
        logger.addHandler(console_handler)

        logger.propagate = False
        return logger

    def _create_log_entry(self, event_type: str, action: str, details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_user_action(self, action: str, **kwargs):
        """
        Log player actions.

        Args:
            action: Type of action (e.g., 'submit_guess', 'abort')
            **kwargs: Additional details to log
        """
        self.logger.info(self._create_log_entry('USER_ACTION', action, kwargs))

    def log_game_event(self, event: str, **kwargs):
        """
        Log game-specific events (start, wins, losses, etc.).

        Args:
            event: Type of game event (e.g., 'game_started', 'game_won')
            **kwargs: Additional game details
        """
        self.logger.info(self._create_log_entry('GAME_EVENT', event, kwargs))

    def log_error(self, error: Exception, action: str, console: bool = True, **kwargs):
        """
        Log errors with context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            console: False when the caller reports the error to the player itself
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            **kwargs
        }
        self.logger.error(self._create_log_entry('ERROR', action, details), extra={'console': console})


# Global logger instance
game_logger = GameLogger()
