"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their content
(empty/number/mine) and visibility (hidden/revealed/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellContent(Enum):
    """What a cell holds underneath."""

    EMPTY = auto()
    NUMBER = auto()
    MINE = auto()


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        content: Empty, number or mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Meaningless for mines.
        state: Current visual state (hidden, revealed, or flagged).
    """

    content: CellContent = CellContent.EMPTY
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def set_adjacent_mines(self, count: int) -> None:
        """Store the neighbor mine count. Setup only, not validated."""
        self.adjacent_mines = count

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    @property
    def is_mine(self) -> bool:
        return self.content == CellContent.MINE

    @property
    def is_number(self) -> bool:
        return self.content == CellContent.NUMBER

    @property
    def is_empty(self) -> bool:
        return self.content == CellContent.EMPTY

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
