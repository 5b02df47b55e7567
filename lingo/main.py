"""
Lingo - Main Entry Point

Loads the configuration and dictionary, then hands the game to the curses
front end. Configuration and dictionary problems stop the program before the
terminal is touched.
"""

import sys

from lingo import create_game
from lingo.config import Config, get_config
from lingo.services.dictionary_service import DictionaryError
from lingo.terminal.session import run_terminal_game
from lingo.utils.game_logger import game_logger


def _fatal(error: Exception, action: str, config_class=Config, **kwargs) -> int:
    """Record a startup error in the log file, report it once on stderr and return the exit status."""
    if not game_logger.logger.handlers:
        game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL, config_class.LOG_TO_FILE)
    game_logger.log_error(error, action, console=False, **kwargs)
    print(f"Error: {error}", file=sys.stderr)
    return 1


def main() -> int:
    try:
        config_class = get_config()
    except ValueError as e:
        return _fatal(e, 'load_config')

    try:
        game = create_game(config_class)
    except DictionaryError as e:
        return _fatal(e, 'load_dictionary', config_class, source=config_class.WORD_LIST_PATH or 'embedded')

    result = run_terminal_game(game, config_class.ESCDELAY_MS)
    if result is None:
        game_logger.log_game_event('game_aborted', attempts=game.attempts_used)
    return 0


if __name__ == "__main__":
    sys.exit(main())
