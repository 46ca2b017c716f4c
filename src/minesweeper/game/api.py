"""
Minesweeper Game API
Plain functions the presentation layer calls; no rendering dependencies
"""

import logging
import random
from typing import FrozenSet, Optional, Tuple

from ..config import PRESETS
from .board import Board, Coordinate, GameState, validate_dimensions
from .cell import Annotation
from .controller import RevealController, RevealResult
from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)


def new_game(rows: int, cols: int, mines: int,
             rng: Optional[random.Random] = None) -> Board:
    """Start a game on a fresh board; raises InvalidConfiguration"""
    board = Board(rows, cols, mines, rng)
    logger.info("New game: %dx%d with %d mines", rows, cols, mines)
    return board


def new_preset_game(name: str, rng: Optional[random.Random] = None) -> Board:
    """Start a game using one of the named difficulty presets"""
    preset = PRESETS.get(name.lower())
    if preset is None:
        raise InvalidConfiguration(
            f"Unknown difficulty {name!r}, expected one of {', '.join(PRESETS)}"
        )
    return new_game(preset.rows, preset.cols, preset.mines, rng)


def reveal(board: Board, row: int, col: int) -> RevealResult:
    return RevealController(board).handle_reveal(row, col)


def toggle_flag(board: Board, row: int, col: int) -> Annotation:
    return RevealController(board).handle_flag_toggle(row, col)


def chord(board: Board, row: int, col: int) -> RevealResult:
    return RevealController(board).handle_chord(row, col)


def game_state(board: Board) -> GameState:
    return board.state


def mine_locations(board: Board) -> FrozenSet[Coordinate]:
    return board.mine_locations()


def parse_custom_config(rows_text: str, cols_text: str,
                        mines_text: str) -> Tuple[int, int, int]:
    """
    Validate the custom game form

    Args:
        rows_text: Raw text of the rows field
        cols_text: Raw text of the columns field
        mines_text: Raw text of the mines field

    Returns:
        (rows, cols, mines) as integers

    Raises:
        InvalidConfiguration: with a message suitable for showing the player
    """
    try:
        rows, cols, mines = (int(text.strip()) for text in (rows_text, cols_text, mines_text))
    except ValueError:
        raise InvalidConfiguration(
            "Please enter valid numbers for size and mines."
        ) from None
    validate_dimensions(rows, cols, mines)
    return rows, cols, mines
