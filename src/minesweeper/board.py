"""
Board module for Minesweeper game.

Implements the game grid: mine placement, adjacency numbers,
coordinate validation and explicit cell accessors.
"""
import logging
import random
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellContent
from .exceptions import InvalidCoordinateError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        columns: Number of columns (board width).
        rows: Number of rows (board height).
        mines: Total mines to place.
    """

    columns: int = 9
    rows: int = 9
    mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.columns < 1 or self.rows < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.columns * self.rows - 1
        if self.mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def default_mine_count(columns: int, rows: int) -> int:
    """One mine per eight cells, at least one, never filling the board."""
    cells = columns * rows
    return min(max(1, cells // 8), cells - 1)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    The board is fully set up on construction: mines are placed and
    every cell's number is computed before the first move. Cells are
    only handed out as copies; state changes go through the explicit
    mutation methods.

    Attributes:
        config: Board dimensions and mine count.
        rng: Random source used for mine placement.
        mine_positions: Optional fixed (column, row) mine layout. When
            given it replaces random placement and must hold exactly
            ``config.mines`` distinct coordinates.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    mine_positions: Optional[Iterable[Position]] = field(
        default=None, repr=False
    )
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _mines: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Build the grid, then place mines and number the cells."""
        self._init_grid()
        self._place_mines()
        self._calculate_adjacent_mines()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells, indexed [row][column]."""
        self._grid = [
            [Cell() for _ in range(self.config.columns)]
            for _ in range(self.config.rows)
        ]

    def _place_mines(self) -> None:
        """Convert ``config.mines`` distinct cells to mines."""
        if self.mine_positions is not None:
            mine_positions = self._check_mine_positions(self.mine_positions)
        else:
            mine_positions = self.rng.sample(
                self._all_positions(), self.config.mines
            )
        for column, row in mine_positions:
            self._grid[row][column].content = CellContent.MINE
        self._mines = len(mine_positions)
        logger.debug(
            "Placed %d mines on %dx%d board",
            self._mines, self.config.columns, self.config.rows,
        )

    def _check_mine_positions(
        self, positions: Iterable[Position]
    ) -> List[Position]:
        """Validate a fixed mine layout."""
        unique: List[Position] = []
        seen = set()
        for column, row in positions:
            if not self.is_valid_coordinate(column, row):
                raise ValueError(
                    f"Mine position ({column}, {row}) is outside the board"
                )
            if (column, row) not in seen:
                seen.add((column, row))
                unique.append((column, row))
        if len(unique) != self.config.mines:
            raise ValueError(
                f"Expected {self.config.mines} distinct mine positions, "
                f"got {len(unique)}"
            )
        return unique

    def _all_positions(self) -> List[Position]:
        return [
            (column, row)
            for row in range(self.config.rows)
            for column in range(self.config.columns)
        ]

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts and content for all cells."""
        for row in range(self.config.rows):
            for column in range(self.config.columns):
                cell = self._grid[row][column]
                if cell.is_mine:
                    cell.set_adjacent_mines(0)
                    continue
                count = self._count_adjacent_mines(column, row)
                cell.set_adjacent_mines(count)
                cell.content = (
                    CellContent.NUMBER if count > 0 else CellContent.EMPTY
                )

    def _count_adjacent_mines(self, column: int, row: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_column, neighbor_row in self.neighbors(column, row):
            if self._grid[neighbor_row][neighbor_column].is_mine:
                count += 1
        return count

    # ========================================================================
    # Coordinates
    # ========================================================================

    def is_valid_coordinate(self, column: int, row: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= column < self.config.columns and 0 <= row < self.config.rows

    def neighbors(self, column: int, row: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            column: Column index of center cell.
            row: Row index of center cell.

        Returns:
            List of (column, row) tuples for the in-bounds Moore
            neighborhood, center excluded.
        """
        result = []
        for delta_row in (-1, 0, 1):
            for delta_column in (-1, 0, 1):
                if delta_row == 0 and delta_column == 0:
                    continue
                new_column = column + delta_column
                new_row = row + delta_row
                if self.is_valid_coordinate(new_column, new_row):
                    result.append((new_column, new_row))
        return result

    def _cell_at(self, column: int, row: int) -> Cell:
        if not self.is_valid_coordinate(column, row):
            raise InvalidCoordinateError(column, row)
        return self._grid[row][column]

    # ========================================================================
    # Read Accessors
    # ========================================================================

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def mines(self) -> int:
        """Number of mine cells currently on the grid."""
        return self._mines

    @property
    def cell_count(self) -> int:
        return self.config.cell_count

    @property
    def safe_cell_count(self) -> int:
        return self.cell_count - self._mines

    def get_cell(self, column: int, row: int) -> Cell:
        """Return a copy of the cell; changing it does not touch the board."""
        return replace(self._cell_at(column, row))

    def get_cell_content(self, column: int, row: int) -> CellContent:
        return self._cell_at(column, row).content

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (column, row, cell copy) for every cell, row by row."""
        for row in range(self.config.rows):
            for column in range(self.config.columns):
                yield column, row, replace(self._grid[row][column])

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (rows, columns) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.columns), dtype=np.int8)
        for row in range(self.config.rows):
            for column in range(self.config.columns):
                obs[row, column] = self._grid[row][column].to_observation()
        return obs

    # ========================================================================
    # Mutation
    # ========================================================================

    def reveal_cell(self, column: int, row: int) -> bool:
        """Reveal a single hidden cell. No propagation happens here."""
        return self._cell_at(column, row).reveal()

    def toggle_flag(self, column: int, row: int) -> bool:
        """Flag or unflag a cell; revealed cells are left alone."""
        return self._cell_at(column, row).toggle_flag()

    def set_cell_content(
        self, column: int, row: int, content: CellContent
    ) -> None:
        """
        Put or remove a mine, then renumber the whole board.

        Numbers are derived from mine positions, so only EMPTY and MINE
        may be written. The board's mine count follows the grid.

        Raises:
            ValueError: If content is NUMBER or the board would be
                filled with mines.
        """
        if content == CellContent.NUMBER:
            raise ValueError("Number content is computed, not assigned")
        cell = self._cell_at(column, row)
        if cell.is_mine == (content == CellContent.MINE):
            return
        delta = 1 if content == CellContent.MINE else -1
        if self._mines + delta >= self.cell_count:
            raise ValueError(f"Too many mines (max {self.cell_count - 1})")
        cell.content = content
        self._mines += delta
        self._calculate_adjacent_mines()
