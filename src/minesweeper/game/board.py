"""
Minesweeper Game - Board Model
Owns the grid of cells, mine placement and adjacency queries
"""

import logging
import random
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidConfiguration, MinesweeperError, OutOfBounds

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


class GameState(Enum):
    """Enumeration for different game states"""
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


# 8-connected neighbourhood offsets
NEIGHBOR_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def validate_dimensions(rows, cols, mines) -> None:
    """Raise InvalidConfiguration unless 0 < mines < rows * cols on a non-empty grid"""
    for name, value in (('rows', rows), ('cols', cols), ('mines', mines)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    if rows <= 0 or cols <= 0:
        raise InvalidConfiguration("Board dimensions must be positive")
    if mines <= 0:
        raise InvalidConfiguration("A board needs at least one mine")
    if mines >= rows * cols:
        raise InvalidConfiguration(
            f"Too many mines for a {rows}x{cols} board (max {rows * cols - 1})"
        )


class Board:
    """
    Fixed-size minesweeper grid

    Shape and mine layout are fixed at construction. Cell state, the active
    flag and the remaining safe tile count change as the game is played.
    """

    def __init__(self, rows: int, cols: int, mine_count: int,
                 rng: Optional[random.Random] = None):
        validate_dimensions(rows, cols, mine_count)
        self._setup(rows, cols, mine_count)
        self._place_random_mines(rng if rng is not None else random.Random())
        self._calculate_adjacent_mines()
        logger.debug("Created %dx%d board with %d mines", rows, cols, mine_count)

    @classmethod
    def from_mines(cls, rows: int, cols: int, mines: Iterable[Coordinate]) -> 'Board':
        """Build a board with an explicit mine layout"""
        mines = list(mines)
        validate_dimensions(rows, cols, len(mines))
        board = cls.__new__(cls)
        board._setup(rows, cols, len(mines))
        for row, col in mines:
            if not board.in_bounds(row, col):
                raise OutOfBounds(row, col, rows, cols)
            if board._grid[row][col].is_mine:
                raise InvalidConfiguration(f"Duplicate mine at ({row}, {col})")
            board._lay_mine(row, col)
        board._calculate_adjacent_mines()
        return board

    def _setup(self, rows: int, cols: int, mine_count: int):
        self.rows = rows
        self.cols = cols
        self.mine_count = mine_count
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(cols)] for _ in range(rows)
        ]
        self._mine_locations: List[Coordinate] = []
        self._active = True
        self._remaining = rows * cols - mine_count
        self.detonated: Optional[Coordinate] = None

    def _place_random_mines(self, rng: random.Random):
        """Sample coordinates uniformly, retrying on collision"""
        while len(self._mine_locations) < self.mine_count:
            row = rng.randrange(self.rows)
            col = rng.randrange(self.cols)
            if not self._grid[row][col].is_mine:
                self._lay_mine(row, col)

    def _lay_mine(self, row: int, col: int):
        self._grid[row][col].is_mine = True
        self._mine_locations.append((row, col))

    def _calculate_adjacent_mines(self):
        """Precompute neighbour mine counts; the layout never changes afterwards"""
        mask = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col in self._mine_locations:
            mask[row, col] = 1
        padded = np.pad(mask, 1)
        counts = np.zeros((self.rows, self.cols), dtype=np.int8)
        for dr, dc in NEIGHBOR_OFFSETS:
            counts += padded[1 + dr:1 + dr + self.rows, 1 + dc:1 + dc + self.cols]
        counts.setflags(write=False)
        self._adjacent = counts

    # Queries

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds"""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_bounds(self, row: int, col: int):
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)

    def cell_at(self, row: int, col: int) -> Cell:
        """Get the cell at the specified position"""
        self._check_bounds(row, col)
        return self._grid[row][col]

    def neighbors(self, row: int, col: int) -> List[Coordinate]:
        """In-bounds coordinates of the 8 surrounding cells"""
        self._check_bounds(row, col)
        return [
            (row + dr, col + dc) for dr, dc in NEIGHBOR_OFFSETS
            if self.in_bounds(row + dr, col + dc)
        ]

    def adjacent_mine_count(self, row: int, col: int) -> int:
        """Number of mines around (row, col), the cell itself excluded"""
        self._check_bounds(row, col)
        return int(self._adjacent[row, col])

    def adjacent_flag_count(self, row: int, col: int) -> int:
        """Number of flagged cells around (row, col)"""
        return sum(
            1 for nr, nc in self.neighbors(row, col)
            if self._grid[nr][nc].is_flagged
        )

    def adjacency_grid(self) -> np.ndarray:
        """Read-only array of every cell's adjacent mine count"""
        return self._adjacent

    def mine_locations(self) -> FrozenSet[Coordinate]:
        return frozenset(self._mine_locations)

    def __iter__(self) -> Iterator[Tuple[int, int, Cell]]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col, self._grid[row][col]

    # Game state bookkeeping

    @property
    def active(self) -> bool:
        return self._active

    def is_active(self) -> bool:
        return self._active

    def set_active(self, active: bool):
        self._active = active

    @property
    def state(self) -> GameState:
        if self.detonated is not None:
            return GameState.LOST
        if self._remaining == 0:
            return GameState.WON
        return GameState.ACTIVE

    @property
    def remaining_safe_tiles(self) -> int:
        return self._remaining

    def decrement_remaining(self) -> int:
        """Count one more safe cell as revealed"""
        if self._remaining <= 0:
            raise MinesweeperError("No safe tiles left to reveal")
        self._remaining -= 1
        return self._remaining

    def __repr__(self) -> str:
        return (f"Board(rows={self.rows}, cols={self.cols}, "
                f"mine_count={self.mine_count}, remaining={self._remaining}, "
                f"active={self._active})")
