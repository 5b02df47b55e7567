import logging
import random

import pytest

from lingo.models.dictionary import Dictionary
from lingo.services.game_service import GameService
from lingo.utils.game_logger import GameLogger


@pytest.fixture(autouse=True)
def reset_game_logger():
    """Undo GameLogger.configure() so records reach caplog in every test."""
    yield
    logger = logging.getLogger(GameLogger.LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def small_dictionary():
    return Dictionary(["apple", "beach", "chair"], 5)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_game(small_dictionary):
    def _make(target="apple", dictionary=None, **kwargs):
        return GameService(dictionary or small_dictionary, target=target, **kwargs)
    return _make


class FakeScreen:
    """Stands in for a curses window: records drawing and replays keys."""

    def __init__(self, keys=(), size=(24, 80)):
        self.keys = list(keys)
        self.size = size
        self.writes = []
        self.clears = 0
        self.refreshes = 0

    def getmaxyx(self):
        return self.size

    def getch(self):
        return self.keys.pop(0)

    def addstr(self, y, x, text, attribute=0):
        self.writes.append((y, x, text, attribute))

    def clear(self):
        self.clears += 1
        self.writes = []

    def refresh(self):
        self.refreshes += 1

    def text_at(self, y):
        return [text for row, _, text, _ in self.writes if row == y]


@pytest.fixture
def fake_screen():
    return FakeScreen
