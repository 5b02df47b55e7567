"""
Services Package

Contains the dictionary loader and the game engine.
"""

from .dictionary_service import (
    DictionaryError, DictionarySourceError, DuplicateWordError, EmptyDictionaryError,
    load_dictionary, parse_words, read_word_source
)
from .game_service import (
    GameOverError, GameService, GuessError, GuessLengthError, NotInDictionaryError,
    pick_target, score_guess
)

__all__ = [
    'DictionaryError', 'DictionarySourceError', 'DuplicateWordError', 'EmptyDictionaryError',
    'load_dictionary', 'parse_words', 'read_word_source',
    'GameOverError', 'GameService', 'GuessError', 'GuessLengthError', 'NotInDictionaryError',
    'pick_target', 'score_guess'
]
