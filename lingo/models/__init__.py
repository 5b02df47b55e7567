"""
Data Models Package

Contains all data models used throughout the game.
"""

from .dictionary import Dictionary
from .game import Board, BoardView, GameResult, GameStatus, Letter, LetterStatus, Row

__all__ = ['Board', 'BoardView', 'Dictionary', 'GameResult', 'GameStatus', 'Letter', 'LetterStatus', 'Row']
