"""
Keyboard Input

Maps raw curses keycodes to the actions the game understands.
"""

import curses
from enum import Enum
from typing import Optional, Tuple

from ..config.game_settings import TYPEABLE_LETTERS

ESCAPE = 27

SUBMIT_KEYS = frozenset((curses.KEY_ENTER, ord('\n'), ord('\r')))
DELETE_KEYS = frozenset((curses.KEY_BACKSPACE, curses.KEY_DC, 127, 8))
LETTER_KEYS = frozenset(ord(char) for char in TYPEABLE_LETTERS)


class KeyAction(Enum):
    LETTER = "LETTER"
    DELETE = "DELETE"
    SUBMIT = "SUBMIT"
    QUIT = "QUIT"
    IGNORE = "IGNORE"


def translate_key(key: int) -> Tuple[KeyAction, Optional[str]]:
    """Return the action for a keycode and, for letters, the typed character."""
    if key == ESCAPE:
        return KeyAction.QUIT, None
    if key in SUBMIT_KEYS:
        return KeyAction.SUBMIT, None
    if key in DELETE_KEYS:
        return KeyAction.DELETE, None
    if key in LETTER_KEYS:
        return KeyAction.LETTER, chr(key)
    return KeyAction.IGNORE, None
