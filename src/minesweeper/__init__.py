"""
Minesweeper game package.

Provides the core game engine (cells, board, game state machine) and
the thin layers around it: input parsing, terminal rendering, host
sessions and a gymnasium environment.
"""
from .cell import Cell, CellContent, CellState
from .board import (
    Board,
    BoardConfig,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
    default_mine_count,
)
from .game import Action, Game, GameState
from .exceptions import (
    GameOverError,
    InvalidCoordinateError,
    InvalidInputError,
    MinesweeperError,
)
from .parser import Move, parse_board_size, parse_move
from .render import render_board
from .session import GameSession, MoveResult
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellContent",
    "CellState",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "default_mine_count",
    "Action",
    "Game",
    "GameState",
    "GameOverError",
    "InvalidCoordinateError",
    "InvalidInputError",
    "MinesweeperError",
    "Move",
    "parse_board_size",
    "parse_move",
    "render_board",
    "GameSession",
    "MoveResult",
    "MinesweeperEnv",
]
