"""
Utilities Package

Contains helper functions and the game logger.
"""

from .helpers import normalize_word, is_typeable, pattern_string
from .game_logger import game_logger, GameLogger

__all__ = ['normalize_word', 'is_typeable', 'pattern_string', 'game_logger', 'GameLogger']
