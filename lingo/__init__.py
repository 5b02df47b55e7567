"""
Lingo Terminal Game Package

A terminal word-guessing game: find the hidden word in a fixed number of
attempts using per-letter feedback.
"""

import random
from typing import Optional

from .config import Config
from .services.dictionary_service import load_dictionary
from .services.game_service import GameService
from .utils.game_logger import game_logger

__version__ = "1.0.0"


def create_game(config_class=Config, rng: Optional[random.Random] = None, target: Optional[str] = None) -> GameService:
    """
    Factory for a ready-to-play game.

    Args:
        config_class: Configuration class to use
        rng: Random source for picking the target
        target: Force the target word instead of picking one

    Returns:
        GameService with its dictionary loaded and target chosen

    Raises:
        DictionaryError: If the word list is unreadable, empty or has duplicates
    """
    game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL, config_class.LOG_TO_FILE)

    dictionary = load_dictionary(
        config_class.WORD_LIST_PATH,
        word_length=config_class.WORD_LENGTH,
        restrict_alphabet=config_class.RESTRICT_ALPHABET
    )

    return GameService(
        dictionary,
        max_guesses=config_class.MAX_GUESSES,
        target=target,
        rng=rng,
        show_suggestions=config_class.SHOW_SUGGESTIONS,
        suggestion_limit=3 + 2 * config_class.MAX_GUESSES
    )
