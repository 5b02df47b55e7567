"""
Helper Functions

Contains word utilities used throughout the game.
"""

from ..config.game_settings import TYPEABLE_LETTERS


def normalize_word(word: str) -> str:
    """Normalize a word: trim + lowercase."""
    return word.strip().lower()


def is_typeable(word: str) -> bool:
    """True if every character of `word` can be typed as a lowercase letter."""
    return bool(word) and all(char in TYPEABLE_LETTERS for char in word)


def pattern_string(row) -> str:
    """Compact one-character-per-cell rendering of a scored row, for logs."""
    symbols = {'EXACT': 'O', 'MISPLACED': '?', 'ABSENT': '_', 'TYPED': '.', 'EMPTY': ' '}
    return ''.join(symbols[cell.status.value] for cell in row)
