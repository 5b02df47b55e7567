"""
Board Renderer

Draws the bordered Lingo grid, the suggestion column and the message line
with curses:

    +-------------------+
    |       LINGO       |
    +---+---+---+---+---+
    | A | P | P | L | E |
    +---+---+---+---+---+
    |   |   |   |   |   |
    +---+---+---+---+---+

The message is centered two rows below the grid.
"""

import curses
from typing import Dict, List, Optional, Tuple

from ..models.game import BoardView, Letter, LetterStatus

TITLE = "LINGO"

# Color pair ids
COLOR_PAIR_CORRECT = 1
COLOR_PAIR_WRONG_PLACE = 2


def init_colors() -> Dict[LetterStatus, int]:
    """Initialize curses color pairs and return the attribute for each scored status."""
    styles = {LetterStatus.ABSENT: curses.A_BOLD}
    if not curses.has_colors():
        styles[LetterStatus.MISPLACED] = curses.A_BOLD | curses.A_UNDERLINE
        styles[LetterStatus.EXACT] = curses.A_BOLD | curses.A_REVERSE
        return styles

    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_PAIR_CORRECT, curses.COLOR_GREEN, curses.COLOR_BLACK)
    curses.init_pair(COLOR_PAIR_WRONG_PLACE, curses.COLOR_YELLOW, curses.COLOR_BLACK)
    styles[LetterStatus.MISPLACED] = curses.A_BOLD | curses.color_pair(COLOR_PAIR_WRONG_PLACE)
    styles[LetterStatus.EXACT] = curses.A_BOLD | curses.color_pair(COLOR_PAIR_CORRECT)
    return styles


def cell_char(letter: Letter) -> str:
    return letter.char.upper() if letter.char else ' '


class BoardRenderer:
    """Lays out and draws a BoardView on a curses window."""

    def __init__(self, word_length: int, max_guesses: int, styles: Optional[Dict[LetterStatus, int]] = None):
        self.word_length = word_length
        self.max_guesses = max_guesses
        self.styles = styles or {}

    @property
    def width(self) -> int:
        return 1 + 4 * self.word_length

    @property
    def height(self) -> int:
        return 3 + 2 * self.max_guesses

    def cell_position(self, row: int, column: int) -> Tuple[int, int]:
        """(y, x) of a cell's character relative to the top-left corner of the grid."""
        return 3 + 2 * row, 2 + 4 * column

    def frame_lines(self, view: BoardView) -> List[str]:
        """Plain-text grid for `view`, one string per screen line."""
        separator = '+---' * self.word_length + '+'

        title = [' '] * self.width
        title[0] = title[-1] = '|'
        start = (self.width - len(TITLE)) // 2
        title[start:start + len(TITLE)] = TITLE

        lines = ['+' + '-' * (self.width - 2) + '+', ''.join(title), separator]
        for row in view.rows:
            lines.append('|' + '|'.join(f' {cell_char(letter)} ' for letter in row) + '|')
            lines.append(separator)
        return lines

    def draw(self, screen, view: BoardView) -> None:
        """Clear the screen and draw one frame centered on it."""
        screen.clear()
        max_y, max_x = screen.getmaxyx()
        win_x = max(0, (max_x - self.width) // 2)
        win_y = max(0, (max_y - self.height) // 2)

        for offset, line in enumerate(self.frame_lines(view)):
            self._put(screen, win_y + offset, win_x, line)

        # Repaint scored letters with their status attribute
        for row_index, row in enumerate(view.rows):
            for column, letter in enumerate(row):
                attribute = self.styles.get(letter.status, 0)
                if attribute:
                    y, x = self.cell_position(row_index, column)
                    self._put(screen, win_y + y, win_x + x, cell_char(letter), attribute)

        for index, word in enumerate(view.suggestions):
            self._put(screen, win_y + index, win_x + self.width + 1, word)

        if view.message:
            self._put(screen, win_y + self.height + 1, max(0, (max_x - len(view.message)) // 2), view.message)

        screen.refresh()

    def _put(self, screen, y: int, x: int, text: str, attribute: int = 0) -> None:
        max_y, max_x = screen.getmaxyx()
        if y >= max_y or x >= max_x:
            return
        try:
            screen.addstr(y, x, text[:max_x - x], attribute)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen; the text is drawn anyway
            pass
