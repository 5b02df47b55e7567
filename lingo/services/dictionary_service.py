"""
Dictionary Service

Turns a newline-delimited word list into a Dictionary. Every failure here is
fatal: a game cannot start from bad reference data.
"""

from typing import List, Optional

from ..config.game_settings import EMBEDDED_WORD_LIST, WORD_LENGTH
from ..models.dictionary import Dictionary
from ..utils.game_logger import game_logger
from ..utils.helpers import is_typeable, normalize_word


class DictionaryError(ValueError):
    """Base class for word list problems that prevent a game from starting."""


class DictionarySourceError(DictionaryError):
    """The word list could not be read."""


class EmptyDictionaryError(DictionaryError):
    """No usable words remain after filtering."""


class DuplicateWordError(DictionaryError):
    """The word list contains the same fixed-length word more than once."""

    def __init__(self, duplicates: List[str]):
        self.duplicates = duplicates
        super().__init__(f"Word list contains duplicates: {', '.join(duplicates)}")


def read_word_source(path: Optional[str] = None) -> str:
    """
    Read the raw word list text.

    Args:
        path: File to read; the embedded word list when None

    Returns:
        str: Raw file contents

    Raises:
        DictionarySourceError: If the file is missing, unreadable or not UTF-8
    """
    source = path or EMBEDDED_WORD_LIST
    try:
        with open(source, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DictionarySourceError(f"Cannot read word list {source}: {e}") from e


def find_duplicates(sorted_words: List[str]) -> List[str]:
    """Words that appear more than once; `sorted_words` must be sorted."""
    duplicates = []
    for previous, current in zip(sorted_words, sorted_words[1:]):
        if previous == current and (not duplicates or duplicates[-1] != current):
            duplicates.append(current)
    return duplicates


def parse_words(text: str, word_length: int = WORD_LENGTH, restrict_alphabet: bool = True) -> Dictionary:
    """
    Build a Dictionary from newline-delimited text.

    Lines are stripped of surrounding whitespace; only words of exactly
    `word_length` characters are kept. With `restrict_alphabet` only those
    made of the letters a-z survive (which drops capitalized proper nouns and
    place names); without it every word is lowercased instead, so that each
    one can still be typed and guessed.

    Raises:
        DuplicateWordError: If a kept word occurs more than once
        EmptyDictionaryError: If no word is kept
    """
    words = [line.strip() for line in text.splitlines()]
    words = [word for word in words if len(word) == word_length]
    if restrict_alphabet:
        words = [word for word in words if is_typeable(word)]
    else:
        words = [normalize_word(word) for word in words]

    words.sort()

    # Sorted, so duplicates are neighbours
    duplicates = find_duplicates(words)
    if duplicates:
        raise DuplicateWordError(duplicates)

    if not words:
        raise EmptyDictionaryError(f"Word list has no usable words of length {word_length}")

    return Dictionary(words, word_length)


def load_dictionary(path: Optional[str] = None,
                    word_length: int = WORD_LENGTH,
                    restrict_alphabet: bool = True) -> Dictionary:
    """Read, filter and validate a word list, logging the resulting alphabet."""
    dictionary = parse_words(read_word_source(path), word_length, restrict_alphabet)
    game_logger.log_game_event(
        'dictionary_loaded',
        source=path or 'embedded',
        words=len(dictionary),
        word_length=word_length,
        alphabet=''.join(dictionary.alphabet)
    )
    return dictionary
