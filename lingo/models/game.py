"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class LetterStatus(Enum):
    """State of a single board cell."""
    EMPTY = "EMPTY"          # nothing typed here yet
    TYPED = "TYPED"          # typed but not scored yet
    ABSENT = "ABSENT"        # scored, letter is not in the target
    MISPLACED = "MISPLACED"  # scored, letter is in the target at another index
    EXACT = "EXACT"          # scored, letter matches the target at this index

    @property
    def is_scored(self) -> bool:
        return self in (LetterStatus.ABSENT, LetterStatus.MISPLACED, LetterStatus.EXACT)


@dataclass(frozen=True)
class Letter:
    """A board cell: a status plus the character it carries (None when empty)."""
    status: LetterStatus
    char: Optional[str] = None

    def __post_init__(self):
        if self.status is LetterStatus.EMPTY:
            if self.char is not None:
                raise ValueError("An empty cell cannot carry a character")
        elif not self.char or len(self.char) != 1:
            raise ValueError(f"{self.status.value} cell needs exactly one character")

    @classmethod
    def empty(cls) -> "Letter":
        return cls(LetterStatus.EMPTY)

    @classmethod
    def typed(cls, char: str) -> "Letter":
        return cls(LetterStatus.TYPED, char)

    @classmethod
    def absent(cls, char: str) -> "Letter":
        return cls(LetterStatus.ABSENT, char)

    @classmethod
    def misplaced(cls, char: str) -> "Letter":
        return cls(LetterStatus.MISPLACED, char)

    @classmethod
    def exact(cls, char: str) -> "Letter":
        return cls(LetterStatus.EXACT, char)


Row = List[Letter]


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_over(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class GameResult:
    """Terminal outcome of a game with the message shown to the player."""
    status: GameStatus
    message: str
    target: str
    attempts_used: int

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON


class Board:
    """
    Committed guesses of a game, one scored row per attempt.

    The board never holds more than `max_guesses` rows; rows beyond the
    committed ones are reported as empty (or as the live preview row).
    """

    def __init__(self, word_length: int, max_guesses: int):
        if word_length < 1 or max_guesses < 1:
            raise ValueError("Board dimensions must be positive")
        self.word_length = word_length
        self.max_guesses = max_guesses
        self._rows: List[Row] = []

    @property
    def committed_rows(self) -> List[Row]:
        return [list(row) for row in self._rows]

    @property
    def is_full(self) -> bool:
        return len(self._rows) >= self.max_guesses

    def __len__(self) -> int:
        return len(self._rows)

    def commit(self, row: Row) -> None:
        """Append a scored row to the board."""
        if self.is_full:
            raise IndexError(f"Board already holds {self.max_guesses} guesses")
        if len(row) != self.word_length:
            raise ValueError(f"Row must have {self.word_length} cells, got {len(row)}")
        if not all(cell.status.is_scored for cell in row):
            raise ValueError("Only scored rows can be committed")
        self._rows.append(list(row))

    def empty_row(self) -> Row:
        return [Letter.empty() for _ in range(self.word_length)]

    def display_rows(self, preview: Optional[Row] = None) -> List[Row]:
        """
        Full grid for rendering: committed rows, then the preview row (if the
        board is not full), then empty rows up to max_guesses.
        """
        rows = self.committed_rows
        if preview is not None and not self.is_full:
            rows.append(list(preview))
        while len(rows) < self.max_guesses:
            rows.append(self.empty_row())
        return rows


@dataclass
class BoardView:
    """Everything the renderer needs to draw one frame."""
    rows: List[Row]
    message: Optional[str] = None
    suggestions: List[str] = field(default_factory=list)
    status: GameStatus = GameStatus.IN_PROGRESS
