"""
Game module for Minesweeper.

Turns player moves into board changes: flagging, flood-fill reveal
and the Playing -> Won/Lost state machine.
"""
import logging
import random
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig, Position
from .cell import Cell
from .exceptions import GameOverError, InvalidCoordinateError

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game. Values are the host-facing codes."""

    PLAYING = 0
    WON = 1
    LOST = 2


class Action(Enum):
    """Moves a player can make on a cell."""

    REVEAL = "R"
    FLAG = "F"


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single Minesweeper game.

    Owns its board exclusively. Readers get cell copies, and every
    change goes through apply_move so the win/loss state always
    reflects the grid. Once the game is won or lost it stays that way
    and further moves raise GameOverError.
    """

    def __init__(
        self,
        columns: int,
        rows: int,
        mines: int,
        *,
        rng: Optional[random.Random] = None,
        mine_positions: Optional[Iterable[Position]] = None,
    ) -> None:
        """
        Create a game and set up its board.

        Args:
            columns: Board width.
            rows: Board height.
            mines: Number of mines, 0 <= mines < columns * rows.
            rng: Random source for mine placement.
            mine_positions: Fixed (column, row) mine layout.

        Raises:
            ValueError: If the dimensions or mine count are invalid.
        """
        config = BoardConfig(columns, rows, mines)
        self._board = Board(
            config,
            rng=rng or random.Random(),
            mine_positions=mine_positions,
        )
        self._state = GameState.PLAYING

    @classmethod
    def from_config(
        cls,
        config: BoardConfig,
        *,
        rng: Optional[random.Random] = None,
        mine_positions: Optional[Iterable[Position]] = None,
    ) -> "Game":
        return cls(
            config.columns,
            config.rows,
            config.mines,
            rng=rng,
            mine_positions=mine_positions,
        )

    # ========================================================================
    # Moves (High-level)
    # ========================================================================

    def apply_move(self, column: int, row: int, action: Action) -> bool:
        """
        Apply one player move.

        Flagging toggles the flag on a non-revealed cell. Revealing
        flood-fills from the cell; a mine under the target loses the
        game, uncovering the last safe cell wins it.

        Args:
            column: Column index.
            row: Row index.
            action: Action.REVEAL or Action.FLAG, or its code "R"/"F".

        Returns:
            True if any cell changed, False for a no-op move.

        Raises:
            ValueError: If action is not a known Action.
            GameOverError: If the game already ended.
            InvalidCoordinateError: If the coordinate is off the board.
        """
        action = Action(action)
        if self._state != GameState.PLAYING:
            raise GameOverError(self._state)
        if not self._board.is_valid_coordinate(column, row):
            raise InvalidCoordinateError(column, row)

        if action == Action.FLAG:
            changed = self._board.toggle_flag(column, row)
            logger.debug("Flag (%d, %d): changed=%s", column, row, changed)
            return changed

        revealed = self._reveal_and_propagate(column, row)
        logger.debug("Reveal (%d, %d): %d cells", column, row, revealed)

        target = self._board.get_cell(column, row)
        if target.is_mine and target.is_revealed:
            self._state = GameState.LOST
            logger.info("Mine hit at (%d, %d), game lost", column, row)
            return True

        self.check_win_condition()
        return revealed > 0

    def _reveal_and_propagate(self, column: int, row: int) -> int:
        """
        Flood-fill reveal starting at a cell.

        Uses an explicit stack so large open areas do not hit the
        recursion limit. Flagged and revealed cells are skipped; only
        empty cells spread to their neighbors.

        Returns:
            Number of cells revealed.
        """
        revealed = 0
        stack = [(column, row)]
        while stack:
            current_column, current_row = stack.pop()
            if not self._board.is_valid_coordinate(current_column, current_row):
                continue
            if not self._board.reveal_cell(current_column, current_row):
                # already revealed or flagged
                continue
            revealed += 1

            cell = self._board.get_cell(current_column, current_row)
            if not cell.is_empty:
                continue
            for neighbor in self._board.neighbors(current_column, current_row):
                neighbor_cell = self._board.get_cell(*neighbor)
                if neighbor_cell.is_hidden:
                    stack.append(neighbor)
        return revealed

    def check_win_condition(self) -> bool:
        """
        Move to WON if every safe cell is revealed.

        Safe to call at any time; it never fires after a loss.

        Returns:
            True if the game is won.
        """
        if self._state == GameState.PLAYING:
            if self.revealed_safe_count == self._board.safe_cell_count:
                self._state = GameState.WON
                logger.info("All safe cells revealed, game won")
        return self._state == GameState.WON

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._state == GameState.LOST

    @property
    def columns(self) -> int:
        return self._board.columns

    @property
    def rows(self) -> int:
        return self._board.rows

    @property
    def mines(self) -> int:
        return self._board.mines

    @property
    def flag_count(self) -> int:
        """Number of flagged cells."""
        return sum(1 for _, _, cell in self._board.iter_cells() if cell.is_flagged)

    @property
    def revealed_safe_count(self) -> int:
        """Number of revealed cells that are not mines."""
        return sum(
            1
            for _, _, cell in self._board.iter_cells()
            if cell.is_revealed and not cell.is_mine
        )

    def is_valid_coordinate(self, column: int, row: int) -> bool:
        return self._board.is_valid_coordinate(column, row)

    def get_cell(self, column: int, row: int) -> Cell:
        """Copy of the cell at a position."""
        return self._board.get_cell(column, row)

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        return self._board.iter_cells()

    def get_observation(self) -> np.ndarray:
        return self._board.get_observation()
