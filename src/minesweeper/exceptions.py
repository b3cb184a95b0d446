"""
Exceptions raised by the Minesweeper engine.

Invalid board parameters raise the built-in ValueError. Everything
else the engine refuses derives from MinesweeperError.
"""
from typing import Any


class MinesweeperError(Exception):
    """Base class for engine errors."""


class InvalidCoordinateError(MinesweeperError, IndexError):
    """A (column, row) pair outside the board was used."""

    def __init__(self, column: int, row: int) -> None:
        super().__init__(f"Coordinate ({column}, {row}) is outside the board")
        self.column = column
        self.row = row


class GameOverError(MinesweeperError):
    """A move was applied to a game that already ended."""

    def __init__(self, state: Any) -> None:
        super().__init__(f"Game is over ({state.name})")
        self.state = state


class InvalidInputError(MinesweeperError, ValueError):
    """Player text could not be parsed."""
