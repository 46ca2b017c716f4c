"""
Game package initialization
"""

from .board import Board, GameState
from .cell import Annotation, Cell
from .controller import RevealController, RevealResult
from .errors import InvalidConfiguration, MinesweeperError, OutOfBounds

__all__ = [
    'Annotation',
    'Board',
    'Cell',
    'GameState',
    'InvalidConfiguration',
    'MinesweeperError',
    'OutOfBounds',
    'RevealController',
    'RevealResult',
]
