"""
Terminal Package

Curses front end: keyboard translation, board rendering and the game loop.
"""

from .keys import KeyAction, translate_key
from .renderer import BoardRenderer, init_colors
from .session import handle_key, play, run_terminal_game

__all__ = ['KeyAction', 'translate_key', 'BoardRenderer', 'init_colors', 'handle_key', 'play', 'run_terminal_game']
