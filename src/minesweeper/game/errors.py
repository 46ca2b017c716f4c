"""
Minesweeper Game - Exceptions
Errors raised by the board model and the reveal controller
"""


class MinesweeperError(Exception):
    """Base class for all minesweeper errors"""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board dimensions or mine count rejected before a game could start"""


class OutOfBounds(MinesweeperError, IndexError):
    """A coordinate outside the grid was passed to the board"""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(
            f"Cell ({row}, {col}) is outside the {rows}x{cols} board"
        )
        self.row = row
        self.col = col
