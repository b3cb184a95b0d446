"""
Unit tests for the gymnasium environment.
"""
import numpy as np
import pytest
from minesweeper import Action, BoardConfig, MinesweeperEnv


@pytest.fixture
def env() -> MinesweeperEnv:
    return MinesweeperEnv(BoardConfig(6, 4, 4), render_mode="ansi")


def first_safe_action(env: MinesweeperEnv) -> int:
    for column, row, cell in env.game.iter_cells():
        if not cell.is_mine:
            return row * env.config.columns + column
    raise AssertionError("no safe cell")


def first_mine_action(env: MinesweeperEnv) -> int:
    for column, row, cell in env.game.iter_cells():
        if cell.is_mine:
            return row * env.config.columns + column
    raise AssertionError("no mine")


class TestSpaces:

    def test_observation_space_shape(self, env: MinesweeperEnv) -> None:
        assert env.observation_space.shape == (4, 6)

    def test_action_space_covers_reveal_and_flag(
        self, env: MinesweeperEnv
    ) -> None:
        assert env.action_space.n == 48

    @pytest.mark.parametrize(
        "action, expected",
        [
            (0, (0, 0, Action.REVEAL)),
            (7, (1, 1, Action.REVEAL)),
            (23, (5, 3, Action.REVEAL)),
            (24, (0, 0, Action.FLAG)),
            (31, (1, 1, Action.FLAG)),
        ],
    )
    def test_decode_action(self, env: MinesweeperEnv, action: int, expected) -> None:
        assert env.decode_action(action) == expected


class TestResetAndStep:

    def test_reset_returns_hidden_observation(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset(seed=0)
        assert obs.shape == (4, 6)
        assert np.all(obs == -1)
        assert info["game_state"] == "PLAYING"
        assert info["total_safe"] == 20

    def test_seeded_reset_is_reproducible(self, env: MinesweeperEnv) -> None:
        env.reset(seed=5)
        first = [cell.is_mine for *_, cell in env.game.iter_cells()]
        env.reset(seed=5)
        second = [cell.is_mine for *_, cell in env.game.iter_cells()]
        assert first == second

    def test_safe_reveal_rewards(self, env: MinesweeperEnv) -> None:
        env.reset(seed=1)
        obs, reward, terminated, truncated, info = env.step(first_safe_action(env))
        assert reward in (1.0, 10.0)
        assert truncated is False
        assert info["revealed"] >= 1
        assert terminated == (reward == 10.0)

    def test_mine_reveal_terminates(self, env: MinesweeperEnv) -> None:
        env.reset(seed=2)
        obs, reward, terminated, _, info = env.step(first_mine_action(env))
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"
        assert 9 in obs

    def test_flag_action(self, env: MinesweeperEnv) -> None:
        env.reset(seed=3)
        obs, reward, _, _, info = env.step(24)
        assert reward == 0.0
        assert obs[0, 0] == -2
        assert info["flags"] == 1

    def test_noop_move_is_penalised(self, env: MinesweeperEnv) -> None:
        env.reset(seed=4)
        env.step(24)
        _, reward, _, _, _ = env.step(0)
        assert reward == -0.1

    def test_step_after_game_over(self, env: MinesweeperEnv) -> None:
        env.reset(seed=2)
        env.step(first_mine_action(env))
        _, reward, terminated, _, _ = env.step(first_safe_action(env))
        assert reward == -0.1
        assert terminated is True


class TestMaskAndRender:

    def test_mask_on_fresh_board(self, env: MinesweeperEnv) -> None:
        env.reset(seed=0)
        assert env.get_action_mask().all()

    def test_mask_after_flag(self, env: MinesweeperEnv) -> None:
        env.reset(seed=0)
        env.step(24)
        mask = env.get_action_mask()
        assert not mask[0]
        assert mask[24]

    def test_mask_empty_after_game_over(self, env: MinesweeperEnv) -> None:
        env.reset(seed=2)
        env.step(first_mine_action(env))
        assert not env.get_action_mask().any()

    def test_ansi_render(self, env: MinesweeperEnv) -> None:
        env.reset(seed=0)
        text = env.render()
        assert " 4 |" in text
        assert "\033[" not in text
