"""
Dictionary Data Model

The set of words a game is played with.
"""

from bisect import bisect_left
from typing import Iterable, List, Optional, Tuple


class Dictionary:
    """
    Sorted, duplicate-free collection of fixed-length words.

    Build instances through services.dictionary_service.load_dictionary, which
    enforces the uniqueness and length checks; the constructor only sorts.
    """

    def __init__(self, words: Iterable[str], word_length: int):
        self.word_length = word_length
        self._words: Tuple[str, ...] = tuple(sorted(words))
        self._lookup = frozenset(self._words)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def alphabet(self) -> List[str]:
        """Sorted list of every letter used by the dictionary."""
        return sorted({char for word in self._words for char in word})

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self.word_length == other.word_length and self._words == other._words

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words of length {self.word_length})"

    def suggestions(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """Words starting with `prefix`, in dictionary order, at most `limit` of them."""
        start = bisect_left(self._words, prefix)
        matches = []
        for word in self._words[start:]:
            if not word.startswith(prefix):
                break
            if limit is not None and len(matches) >= limit:
                break
            matches.append(word)
        return matches
