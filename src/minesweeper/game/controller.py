"""
Minesweeper Game - Reveal Controller
Applies the game rules to a board: reveals, flood fill, flags and chords
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple

from .board import Board, GameState
from .cell import Annotation

logger = logging.getLogger(__name__)

RevealedTile = Tuple[int, int, int]  # (row, col, adjacent mine count)


@dataclass(frozen=True)
class RevealResult:
    """Outcome of a reveal or chord, used by the UI to re-render tiles"""
    state_changed: bool
    state: GameState
    newly_revealed: FrozenSet[RevealedTile] = field(default_factory=frozenset)

    @classmethod
    def unchanged(cls, state: GameState) -> 'RevealResult':
        return cls(False, state)

    @property
    def coordinates(self) -> FrozenSet[Tuple[int, int]]:
        return frozenset((row, col) for row, col, _ in self.newly_revealed)


class RevealController:
    """
    Game rules for a single board

    The board starts ACTIVE and moves to WON or LOST exactly once; after that
    every action is ignored.
    """

    def __init__(self, board: Board):
        self.board = board

    @property
    def state(self) -> GameState:
        return self.board.state

    def handle_reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell and apply the consequences

        Ignored when the game is over or the cell is revealed, flagged or
        question-marked. A mine loses the game; a cell with no adjacent mines
        clears its whole zero region and the numbers bordering it.
        """
        board = self.board
        cell = board.cell_at(row, col)
        if not board.active or not cell.is_hidden:
            return RevealResult.unchanged(board.state)

        if cell.is_mine:
            cell.reveal()
            return self._lose(row, col)

        revealed = self._flood_fill(row, col)
        logger.debug("Reveal at (%d, %d) opened %d cells, %d safe tiles left",
                     row, col, len(revealed), board.remaining_safe_tiles)

        if board.remaining_safe_tiles == 0:
            board.set_active(False)
            logger.info("Game won on a %dx%d board", board.rows, board.cols)

        return RevealResult(True, board.state, frozenset(revealed))

    def _flood_fill(self, row: int, col: int) -> List[RevealedTile]:
        """Reveal outward from (row, col) using a work-list of flat indices"""
        board = self.board
        cols = board.cols
        revealed = []
        pending = deque([row * cols + col])

        while pending:
            r, c = divmod(pending.popleft(), cols)
            cell = board.cell_at(r, c)
            # Already revealed or annotated, possibly queued twice
            if not cell.reveal():
                continue
            board.decrement_remaining()
            count = board.adjacent_mine_count(r, c)
            revealed.append((r, c, count))

            if count == 0:
                for nr, nc in board.neighbors(r, c):
                    if board.cell_at(nr, nc).is_hidden:
                        pending.append(nr * cols + nc)

        return revealed

    def _lose(self, row: int, col: int) -> RevealResult:
        board = self.board
        board.detonated = (row, col)
        board.set_active(False)
        logger.info("Mine hit at (%d, %d), game lost", row, col)
        mines = frozenset(
            (r, c, board.adjacent_mine_count(r, c))
            for r, c in board.mine_locations()
        )
        return RevealResult(True, GameState.LOST, mines)

    def handle_flag_toggle(self, row: int, col: int) -> Annotation:
        """Cycle a hidden cell through flagged, question-marked and clear"""
        board = self.board
        cell = board.cell_at(row, col)
        if not board.active or cell.is_revealed:
            return cell.annotation
        annotation = cell.cycle_annotation()
        logger.debug("Cell (%d, %d) annotation is now %s", row, col, annotation.value)
        return annotation

    def handle_chord(self, row: int, col: int) -> RevealResult:
        """
        Reveal every unannotated neighbour of a satisfied number

        Only acts on a revealed numbered cell whose flagged neighbours match
        its adjacent mine count. A misplaced flag can lose the game here.
        """
        board = self.board
        cell = board.cell_at(row, col)
        if not board.active or not cell.is_revealed or cell.is_mine:
            return RevealResult.unchanged(board.state)

        count = board.adjacent_mine_count(row, col)
        if count == 0 or board.adjacent_flag_count(row, col) != count:
            return RevealResult.unchanged(board.state)

        revealed = set()
        changed = False
        for nr, nc in board.neighbors(row, col):
            result = self.handle_reveal(nr, nc)
            changed = changed or result.state_changed
            revealed |= result.newly_revealed
            if not board.active:
                break

        return RevealResult(changed, board.state, frozenset(revealed))
