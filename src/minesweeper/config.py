"""
Minesweeper Configuration
Difficulty presets, window layout constants and logging setup
"""

import logging
from dataclasses import dataclass
from typing import Dict

# Window layout
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600

V_PADDING = 100  # Room above and below the grid for the status and menu rows
H_PADDING = 0

USABLE_WIDTH = WINDOW_WIDTH - H_PADDING
USABLE_HEIGHT = WINDOW_HEIGHT - V_PADDING

TITLE = "Minesweeper"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Difficulty:
    """A named board size"""
    name: str
    rows: int
    cols: int
    mines: int

    @property
    def label(self) -> str:
        """Button text, e.g. 'Easy (9x9)'"""
        return f"{self.name.capitalize()} ({self.rows}x{self.cols})"


PRESETS: Dict[str, Difficulty] = {
    'easy': Difficulty('easy', 9, 9, 10),
    'medium': Difficulty('medium', 16, 16, 40),
    'hard': Difficulty('hard', 16, 30, 99),
}


def tile_size(rows: int, cols: int) -> int:
    """Edge length in pixels of a square tile so the grid fits the usable area"""
    return max(1, min(USABLE_WIDTH // cols, USABLE_HEIGHT // rows))


def configure_logging(level: str = "WARNING"):
    """Configure root logging for the command line entry point"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
