"""
Minesweeper Game - Cell
A single grid position: mine flag, reveal state and player annotation
"""

from enum import Enum


class Annotation(Enum):
    """Player annotations on a hidden cell, in toggle order"""
    NONE = "none"
    FLAGGED = "flagged"
    QUESTIONED = "questioned"

    def next(self) -> 'Annotation':
        """Next annotation in the flag -> question mark -> clear cycle"""
        return _CYCLE[self]


_CYCLE = {
    Annotation.NONE: Annotation.FLAGGED,
    Annotation.FLAGGED: Annotation.QUESTIONED,
    Annotation.QUESTIONED: Annotation.NONE,
}


class Cell:
    """Represents a single cell on the minesweeper board"""

    __slots__ = ('is_mine', 'is_revealed', 'annotation')

    def __init__(self, is_mine: bool = False):
        self.is_mine = is_mine
        self.is_revealed = False
        self.annotation = Annotation.NONE

    def reveal(self) -> bool:
        """
        Reveal this cell

        Returns False if the cell was already revealed or carries an
        annotation, True if it transitioned to revealed.
        """
        if self.is_revealed or self.annotation is not Annotation.NONE:
            return False
        self.is_revealed = True
        return True

    def cycle_annotation(self) -> Annotation:
        """Advance the annotation cycle; revealed cells keep no annotation"""
        if not self.is_revealed:
            self.annotation = self.annotation.next()
        return self.annotation

    @property
    def is_flagged(self) -> bool:
        return self.annotation is Annotation.FLAGGED

    @property
    def is_questioned(self) -> bool:
        return self.annotation is Annotation.QUESTIONED

    @property
    def is_hidden(self) -> bool:
        """Unrevealed and unannotated, i.e. open to a reveal"""
        return not self.is_revealed and self.annotation is Annotation.NONE

    def __repr__(self) -> str:
        return (f"Cell(is_mine={self.is_mine}, is_revealed={self.is_revealed}, "
                f"annotation={self.annotation.value})")
