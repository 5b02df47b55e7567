"""
Game Rules Module

Fixed rules of a Lingo game. These are the values the board is laid out for;
runtime overrides go through app_config.Config.
"""

import os
from typing import Final

WORD_LENGTH: Final[int] = 5
"""
Number of letters in every dictionary word, target and board row.
"""

MAX_GUESSES: Final[int] = 5
"""
Number of committed guesses allowed before the game is lost.
"""

SUGGESTION_LIMIT: Final[int] = 3 + 2 * MAX_GUESSES
"""
Maximum number of prefix suggestions shown beside the board. This is the
number of text rows the board occupies below its title.
"""

TYPEABLE_LETTERS: Final[str] = "abcdefghijklmnopqrstuvwxyz"

EMBEDDED_WORD_LIST: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'word-list.txt'
)
"""
Word list shipped with the package, used when no WORD_LIST_PATH is configured.
"""

# Messages shown below the board
WIN_MESSAGE: Final[str] = "You win! Press any key to quit"
LOSS_MESSAGE: Final[str] = "The word was {target}! Press any key to quit."
NOT_IN_DICTIONARY_MESSAGE: Final[str] = "The word {guess} is not in the dictionary"
