"""
Game Service

Contains the core game logic: target selection, guess validation and
scoring, and the win/loss state machine of a single Lingo game.
"""

import random
from typing import List, Optional

from ..config.game_settings import (
    LOSS_MESSAGE, MAX_GUESSES, NOT_IN_DICTIONARY_MESSAGE, SUGGESTION_LIMIT, WIN_MESSAGE
)
from ..models.dictionary import Dictionary
from ..models.game import Board, BoardView, GameResult, GameStatus, Letter, Row
from ..utils.game_logger import game_logger
from ..utils.helpers import normalize_word, pattern_string
from .dictionary_service import EmptyDictionaryError


class GuessError(ValueError):
    """A guess that cannot be applied to the game."""


class NotInDictionaryError(GuessError):
    """The guess is not a dictionary word. Recoverable: the attempt is not used."""

    def __init__(self, guess: str):
        self.guess = guess
        super().__init__(NOT_IN_DICTIONARY_MESSAGE.format(guess=guess))


class GuessLengthError(GuessError):
    """The guess does not have the game's word length."""


class GameOverError(GuessError):
    """A guess was committed after the game ended."""


def pick_target(dictionary: Dictionary, rng: Optional[random.Random] = None) -> str:
    """
    Select the target word uniformly at random.

    Raises:
        EmptyDictionaryError: If the dictionary has no words
    """
    if not len(dictionary):
        raise EmptyDictionaryError("Cannot pick a target from an empty dictionary")
    return (rng or random).choice(dictionary.words)


def score_guess(candidate: str, target: str) -> Row:
    """
    Score every letter of `candidate` against `target`.

    A letter is EXACT when it matches the target at the same index, MISPLACED
    when the target contains it anywhere else, ABSENT otherwise. Letter counts
    are not tracked: with target "lever", both unmatched e's of "eerie" are
    MISPLACED even though only one e of the target is left over.
    """
    if len(candidate) != len(target):
        raise ValueError("Guess length must match the target length.")

    row: Row = []
    for index, char in enumerate(candidate):
        if target[index] == char:
            row.append(Letter.exact(char))
        elif char in target:
            row.append(Letter.misplaced(char))
        else:
            row.append(Letter.absent(char))
    return row


class GameService:
    """
    One game of Lingo.

    This class handles:
    - Target selection and secret storage
    - Editing of the in-progress guess (typing, deleting, submitting)
    - Guess validation and evaluation
    - Win/loss detection and the final message
    """

    def __init__(self,
                 dictionary: Dictionary,
                 max_guesses: int = MAX_GUESSES,
                 target: Optional[str] = None,
                 rng: Optional[random.Random] = None,
                 show_suggestions: bool = True,
                 suggestion_limit: int = SUGGESTION_LIMIT):
        self.dictionary = dictionary
        self.word_length = dictionary.word_length
        self.max_guesses = max_guesses

        if target is None:
            target = pick_target(dictionary, rng)
        target = normalize_word(target)
        if len(target) != self.word_length:
            raise ValueError(f"Target '{target}' is not {self.word_length} letters long")
        self._target = target

        self.board = Board(self.word_length, max_guesses)
        self.attempts_used = 0
        self.current_guess = ''
        self.message: Optional[str] = None
        self.status = GameStatus.IN_PROGRESS
        self.result: Optional[GameResult] = None

        self.show_suggestions = show_suggestions
        self.suggestion_limit = suggestion_limit

        game_logger.log_game_event(
            'game_started', word_length=self.word_length, max_guesses=max_guesses,
            dictionary_size=len(dictionary)
        )

    @property
    def target(self) -> str:
        return self._target

    @property
    def is_over(self) -> bool:
        return self.status.is_over

    # ---------------- Guess evaluation ---------------- #

    def validate_guess(self, candidate: str) -> str:
        """
        Check that a complete guess may be played.

        Returns:
            str: The normalized guess

        Raises:
            GuessLengthError: If the guess is not word_length letters
            NotInDictionaryError: If the guess is not a dictionary word
        """
        guess = normalize_word(candidate)
        if len(guess) != self.word_length:
            raise GuessLengthError(f"Guess must be exactly {self.word_length} letters")
        if guess not in self.dictionary:
            raise NotInDictionaryError(guess)
        return guess

    def commit_guess(self, candidate: str) -> GameStatus:
        """
        Score a guess, append it to the board and update the game status.

        A winning guess on the last attempt is a win, not a loss.

        Raises:
            GameOverError: If the game has already ended
            GuessLengthError: If the guess is not word_length letters
        """
        if self.is_over:
            raise GameOverError("Game is already over")

        guess = normalize_word(candidate)
        if len(guess) != self.word_length:
            raise GuessLengthError(f"Guess must be exactly {self.word_length} letters")

        row = score_guess(guess, self._target)
        self.board.commit(row)
        self.attempts_used += 1

        game_logger.log_game_event('guess_scored', attempt=self.attempts_used, pattern=pattern_string(row))

        if guess == self._target.lower():
            self._finish(GameStatus.WON, WIN_MESSAGE)
        elif self.attempts_used >= self.max_guesses:
            self._finish(GameStatus.LOST, LOSS_MESSAGE.format(target=self._target))

        return self.status

    def submit_guess(self, candidate: str) -> GameStatus:
        """
        Validate and commit a guess.

        A guess that is not in the dictionary does not use an attempt; it sets
        the message for the next frame and clears the typed letters instead.
        """
        try:
            guess = self.validate_guess(candidate)
        except NotInDictionaryError as e:
            game_logger.log_user_action('guess_rejected', guess=e.guess, attempt=self.attempts_used + 1)
            self.message = str(e)
            self.current_guess = ''
            return self.status

        game_logger.log_user_action('submit_guess', guess=guess, attempt=self.attempts_used + 1)
        return self.commit_guess(guess)

    def _finish(self, status: GameStatus, message: str) -> None:
        self.status = status
        self.message = message
        self.current_guess = ''
        self.result = GameResult(status, message, self._target, self.attempts_used)
        event = 'game_won' if status is GameStatus.WON else 'game_lost'
        game_logger.log_game_event(event, attempts=self.attempts_used, target=self._target)

    # ---------------- Typing ---------------- #

    def type_letter(self, char: str) -> bool:
        """Append a letter to the current guess if there is room. Returns True if added."""
        if self.is_over or len(self.current_guess) >= self.word_length:
            return False
        self.current_guess += char
        return True

    def delete_letter(self) -> bool:
        """Remove the last typed letter, if any. Returns True if removed."""
        if self.is_over or not self.current_guess:
            return False
        self.current_guess = self.current_guess[:-1]
        return True

    def submit(self) -> GameStatus:
        """Submit the current guess; an incomplete guess is ignored."""
        if self.is_over or len(self.current_guess) != self.word_length:
            return self.status
        guess, self.current_guess = self.current_guess, ''
        return self.submit_guess(guess)

    def clear_message(self) -> None:
        if not self.is_over:
            self.message = None

    def abort(self) -> None:
        game_logger.log_user_action('abort', attempts=self.attempts_used, status=self.status.value)

    # ---------------- Rendering support ---------------- #

    def live_preview(self, partial: str) -> Row:
        """Row for an uncommitted guess: typed letters followed by empty cells."""
        if len(partial) > self.word_length:
            raise GuessLengthError(f"Guess cannot exceed {self.word_length} letters")
        row = [Letter.typed(char) for char in partial]
        row.extend(Letter.empty() for _ in range(self.word_length - len(partial)))
        return row

    def suggestions(self) -> List[str]:
        if not self.show_suggestions or self.is_over:
            return []
        return self.dictionary.suggestions(self.current_guess, self.suggestion_limit)

    def snapshot(self) -> BoardView:
        """Current frame: committed rows, the live row and the message."""
        preview = None if self.is_over else self.live_preview(self.current_guess)
        return BoardView(
            rows=self.board.display_rows(preview),
            message=self.message,
            suggestions=self.suggestions(),
            status=self.status
        )
