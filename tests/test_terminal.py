import curses

import pytest

from lingo.models.game import BoardView, GameStatus, Letter, LetterStatus
from lingo.terminal.keys import KeyAction, translate_key
from lingo.terminal.renderer import BoardRenderer
from lingo.terminal.session import handle_key, play

ENTER = ord("\n")
ESC = 27
BACKSPACE = curses.KEY_BACKSPACE


def keys_for(word):
    return [ord(char) for char in word]


@pytest.mark.parametrize("key, expected", [
    (ord("a"), (KeyAction.LETTER, "a")),
    (ord("z"), (KeyAction.LETTER, "z")),
    (ord("A"), (KeyAction.IGNORE, None)),
    (ord("1"), (KeyAction.IGNORE, None)),
    (ESC, (KeyAction.QUIT, None)),
    (ENTER, (KeyAction.SUBMIT, None)),
    (curses.KEY_ENTER, (KeyAction.SUBMIT, None)),
    (BACKSPACE, (KeyAction.DELETE, None)),
    (curses.KEY_DC, (KeyAction.DELETE, None)),
    (127, (KeyAction.DELETE, None)),
])
def test_translate_key(key, expected):
    assert translate_key(key) == expected


def test_escape_quits(make_game):
    game = make_game()
    assert handle_key(game, ESC) is False
    assert game.status is GameStatus.IN_PROGRESS


def test_keypress_clears_message(make_game):
    game = make_game()
    for key in keys_for("zzzzz") + [ENTER]:
        handle_key(game, key)
    assert game.message is not None
    handle_key(game, ord("1"))
    assert game.message is None


def test_play_until_win(make_game, fake_screen):
    game = make_game()
    screen = fake_screen(
        keys_for("zzzzz") + [ENTER]
        + keys_for("beachh") + [BACKSPACE, ord("h"), ENTER]
        + keys_for("apple") + [ENTER]
        + [ord("q")]
    )
    result = play(screen, game, BoardRenderer(5, game.max_guesses))
    assert result.won
    assert result.attempts_used == 2
    assert screen.keys == []


def test_play_until_loss(make_game, fake_screen):
    game = make_game(target="chair", max_guesses=2)
    screen = fake_screen(keys_for("apple") + [ENTER] + keys_for("beach") + [ENTER, ord("x")])
    result = play(screen, game, BoardRenderer(5, 2))
    assert result.status is GameStatus.LOST
    assert "chair" in result.message
    assert any(result.message in text for _, _, text, _ in screen.writes)


def test_play_escape_returns_none(make_game, fake_screen):
    game = make_game()
    screen = fake_screen(keys_for("app") + [ESC, ord("x")])
    assert play(screen, game, BoardRenderer(5, game.max_guesses)) is None
    assert screen.keys == [ord("x")]


def test_frame_lines():
    renderer = BoardRenderer(5, 2)
    view = BoardView(rows=[
        [Letter.exact(c) for c in "apple"],
        [Letter.typed("b"), Letter.typed("e")] + [Letter.empty()] * 3,
    ])
    assert renderer.frame_lines(view) == [
        "+-------------------+",
        "|       LINGO       |",
        "+---+---+---+---+---+",
        "| A | P | P | L | E |",
        "+---+---+---+---+---+",
        "| B | E |   |   |   |",
        "+---+---+---+---+---+",
    ]
    assert len(renderer.frame_lines(view)) == renderer.height


def test_cell_positions_match_frame():
    renderer = BoardRenderer(5, 2)
    view = BoardView(rows=[[Letter.exact(c) for c in "apple"], [Letter.empty()] * 5])
    lines = renderer.frame_lines(view)
    for column, char in enumerate("APPLE"):
        y, x = renderer.cell_position(0, column)
        assert lines[y][x] == char


def test_draw_centers_grid_and_styles_scored_letters(fake_screen):
    styles = {LetterStatus.EXACT: 100, LetterStatus.MISPLACED: 200, LetterStatus.ABSENT: 300}
    renderer = BoardRenderer(5, 2, styles)
    view = BoardView(
        rows=[[Letter.exact("a"), Letter.misplaced("e"), Letter.absent("b"), Letter.typed("c"), Letter.empty()],
              [Letter.empty()] * 5],
        message="hello",
        suggestions=["apple", "beach"],
    )
    screen = fake_screen(size=(24, 81))
    renderer.draw(screen, view)

    win_x, win_y = (81 - 21) // 2, (24 - 7) // 2
    assert (win_y, win_x, "+-------------------+", 0) in screen.writes
    styled = {(text, attribute) for _, _, text, attribute in screen.writes if attribute}
    assert styled == {("A", 100), ("E", 200), ("B", 300)}
    assert (win_y, win_x + 22, "apple", 0) in screen.writes
    assert (win_y + 8, (81 - 5) // 2, "hello", 0) in screen.writes
    assert screen.refreshes == 1


def test_draw_clips_to_small_screen(fake_screen):
    renderer = BoardRenderer(5, 5)
    screen = fake_screen(size=(5, 10))
    renderer.draw(screen, BoardView(rows=[[Letter.empty()] * 5] * 5))
    assert all(y < 5 and x + len(text) <= 10 for y, x, text, _ in screen.writes)
