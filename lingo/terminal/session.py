"""
Terminal Session

Owns the curses screen for the length of one game: sets the terminal up,
runs the blocking read-key/render loop and always restores the terminal,
including when the loop exits through an exception.
"""

import curses
from typing import Optional

from ..models.game import GameResult
from ..services.game_service import GameService
from ..utils.game_logger import game_logger
from .keys import KeyAction, translate_key
from .renderer import BoardRenderer, init_colors


def handle_key(game: GameService, key: int) -> bool:
    """
    Apply one keypress to the game.

    Returns:
        bool: False when the player asked to quit, True otherwise
    """
    action, char = translate_key(key)
    if action is KeyAction.QUIT:
        game.abort()
        return False

    # A message is shown until the next keypress
    game.clear_message()

    if action is KeyAction.LETTER:
        game.type_letter(char)
    elif action is KeyAction.DELETE:
        game.delete_letter()
    elif action is KeyAction.SUBMIT:
        game.submit()
    return True


def play(screen, game: GameService, renderer: BoardRenderer) -> Optional[GameResult]:
    """
    Run the input/render loop until the game ends or the player quits.

    Returns:
        The GameResult, or None if the player quit with escape
    """
    while not game.is_over:
        renderer.draw(screen, game.snapshot())
        if not handle_key(game, screen.getch()):
            return None

    # Show the final board and wait for any key
    renderer.draw(screen, game.snapshot())
    screen.getch()
    return game.result


def setup_terminal(screen, escdelay_ms: int = 25):
    """Raw mode, no echo, keypad keys, hidden cursor; returns the letter styles."""
    curses.raw()
    curses.noecho()
    screen.keypad(True)
    try:
        curses.curs_set(0)
    except curses.error:
        game_logger.logger.debug("Terminal does not support hiding the cursor")
    if hasattr(curses, 'set_escdelay'):
        curses.set_escdelay(escdelay_ms)
    return init_colors()


def _run(screen, game: GameService, escdelay_ms: int) -> Optional[GameResult]:
    styles = setup_terminal(screen, escdelay_ms)
    renderer = BoardRenderer(game.word_length, game.max_guesses, styles)
    return play(screen, game, renderer)


def run_terminal_game(game: GameService, escdelay_ms: int = 25) -> Optional[GameResult]:
    """Play `game` on the terminal; curses.wrapper restores the terminal on every exit path."""
    return curses.wrapper(_run, game, escdelay_ms)
