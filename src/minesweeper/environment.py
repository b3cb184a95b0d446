"""
Gymnasium environment wrapper for Minesweeper.

Exposes a Game through the standard reset/step interface so agents
and scripted players can drive it.
"""
import logging
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .game import Action, Game
from .render import render_board

logger = logging.getLogger(__name__)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of shape (rows, columns) where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * columns * rows.
        Action i < cells reveals cell i, action i >= cells flags cell
        i - cells. Cell index k is at (column=k % columns, row=k // columns).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for a move that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self._cells = self.config.cell_count
        self.game = Game.from_config(self.config)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.columns),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(int(self.np_random.integers(0, 2**32)))
        self.game = Game.from_config(self.config, rng=rng)
        self._steps = 0
        return self.game.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index, see the class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        column, row, move = self.decode_action(action)
        self._steps += 1

        reward = self._apply(column, row, move)
        observation = self.game.get_observation()
        terminated = not self.game.is_playing

        if terminated:
            logger.debug(
                "Episode finished after %d steps: %s",
                self._steps, self.game.state.name,
            )
        return observation, reward, terminated, False, self._get_info()

    def decode_action(self, action: int) -> Tuple[int, int, Action]:
        """Convert a flat action index to (column, row, Action)."""
        move = Action.REVEAL
        if action >= self._cells:
            move = Action.FLAG
            action -= self._cells
        row, column = divmod(int(action), self.config.columns)
        return column, row, move

    def _apply(self, column: int, row: int, move: Action) -> float:
        """Play the move and score it."""
        if not self.game.is_playing:
            return -0.1
        changed = self.game.apply_move(column, row, move)
        if not changed:
            return -0.1
        if move == Action.FLAG:
            return 0.0
        if self.game.is_won:
            return 10.0
        if self.game.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "steps": self._steps,
            "revealed": self.game.revealed_safe_count,
            "flags": self.game.flag_count,
            "total_safe": self._cells - self.game.mines,
            "game_state": self.game.state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.game, color=False)
        if self.render_mode == "human":
            print(render_board(self.game))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action. Hidden cells can be
            revealed or flagged, flagged cells only unflagged.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.game.is_playing:
            return mask
        for column, row, cell in self.game.iter_cells():
            index = row * self.config.columns + column
            if cell.is_hidden:
                mask[index] = True
            if not cell.is_revealed:
                mask[self._cells + index] = True
        return mask
