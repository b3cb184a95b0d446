"""
Game session for host layers.

A GameSession holds at most one running game and turns raw player
text into moves. Hosts (the CLI, a web bridge) keep their own session
object, so any number of games can run side by side.
"""
import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from .board import Position, default_mine_count
from .exceptions import InvalidInputError
from .game import Game, GameState
from .parser import format_coordinate, parse_move
from .render import render_board

logger = logging.getLogger(__name__)

INVALID_FORMAT_MESSAGE = "Invalid format! Valid examples: A1, B3 F, C4 R"
NO_GAME_MESSAGE = "Initialize the game first"
GAME_OVER_MESSAGE = "The game is over"
LOST_MESSAGE = "You lost the game!"
WON_MESSAGE = "You won the game!"


@dataclass
class MoveResult:
    """
    Outcome of submitting player text.

    Attributes:
        accepted: Whether the text became a move on the board.
        message: Text to show the player, empty when there is nothing
            to say.
        state: Game state after the move, None without a game.
    """

    accepted: bool
    message: str = ""
    state: Optional[GameState] = None


class GameSession:
    """Holds one game at a time and exposes status for host layers."""

    def __init__(self) -> None:
        self.game: Optional[Game] = None

    def new_game(
        self,
        columns: int,
        rows: int,
        mines: Optional[int] = None,
        rng: Optional[random.Random] = None,
        mine_positions: Optional[Iterable[Position]] = None,
    ) -> Game:
        """
        Start a fresh game, replacing any current one.

        Args:
            columns: Board width.
            rows: Board height.
            mines: Mine count; one per eight cells when omitted.
            rng: Random source for mine placement.
            mine_positions: Fixed (column, row) mine layout.

        Raises:
            ValueError: If the board parameters are invalid.
        """
        if mines is None:
            mines = default_mine_count(columns, rows)
        self.game = Game(
            columns, rows, mines, rng=rng, mine_positions=mine_positions
        )
        logger.info("New game: %dx%d with %d mines", columns, rows, mines)
        return self.game

    def submit(self, text: str) -> MoveResult:
        """
        Parse and apply one line of player input.

        Never raises for bad player text; problems come back as the
        result message.
        """
        if self.game is None:
            return MoveResult(False, NO_GAME_MESSAGE)
        game = self.game
        if not game.is_playing:
            return MoveResult(False, GAME_OVER_MESSAGE, game.state)

        try:
            move = parse_move(text)
        except InvalidInputError:
            logger.debug("Rejected input %r", text)
            return MoveResult(False, INVALID_FORMAT_MESSAGE, game.state)

        if not game.is_valid_coordinate(move.column, move.row):
            label = format_coordinate(move.column, move.row)
            return MoveResult(
                False, f"Coordinate {label} is outside the board", game.state
            )

        game.apply_move(move.column, move.row, move.action)
        game.check_win_condition()

        message = ""
        if game.is_lost:
            message = LOST_MESSAGE
        elif game.is_won:
            message = WON_MESSAGE
        return MoveResult(True, message, game.state)

    def render(self, color: bool = True) -> str:
        if self.game is None:
            return ""
        return render_board(self.game, color)

    # ========================================================================
    # Status Accessors
    # ========================================================================

    @property
    def columns(self) -> int:
        return self.game.columns if self.game else 0

    @property
    def rows(self) -> int:
        return self.game.rows if self.game else 0

    @property
    def mines_total(self) -> int:
        return self.game.mines if self.game else 0

    @property
    def flags(self) -> int:
        return self.game.flag_count if self.game else 0

    @property
    def revealed(self) -> int:
        return self.game.revealed_safe_count if self.game else 0

    @property
    def state_code(self) -> int:
        """0 playing, 1 won, 2 lost, -1 when no game exists."""
        return self.game.state.value if self.game else -1

    def status(self) -> Dict[str, Any]:
        return {
            "columns": self.columns,
            "rows": self.rows,
            "mines_total": self.mines_total,
            "flags": self.flags,
            "revealed": self.revealed,
            "state": self.state_code,
        }
