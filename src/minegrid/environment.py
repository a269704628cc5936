"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface so scripted or learned players can
drive the board engine.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, BoardEngine, GameState, get_config


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size rows * cols.
        Action i corresponds to cell at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        difficulty: str = "easy",
        render_mode: Optional[str] = None,
        config: Optional[BoardConfig] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            difficulty: Preset label ("easy", "medium", "hard").
            render_mode: How to render the environment.
            config: Custom board; overrides the difficulty preset.
        """
        super().__init__()

        self.difficulty = difficulty
        self.config = config or get_config(difficulty)
        self.render_mode = render_mode
        self.board = BoardEngine(self.config)

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(self.config.num_cells)

        self._steps = 0
        self._total_safe_cells = self.config.num_cells - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new episode on a freshly built board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(2**31))
        self.board = BoardEngine(self.config, rng=random.Random(board_seed))
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.board.get_observation()
        terminated = self.board.game_state in (GameState.WON, GameState.LOST)

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.config.cols)

    def _calculate_reward(self, row: int, col: int) -> float:
        """Reveal a cell and score the result."""
        if not self.board.is_valid_position(row, col):
            return -0.1
        if not self.board.cell(row, col).is_hidden:
            return -0.1

        if self.board.reveal(row, col):
            return -10.0
        if self.board.check_win_condition():
            return 10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_count,
            "total_safe": self._total_safe_cells,
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.hidden_positions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.board.to_text()
        if self.render_mode == "human":
            print(self.board.to_text())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.hidden_positions():
            mask[row * self.config.cols + col] = True
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    difficulty: str = "easy",
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel play.

    Args:
        n_envs: Number of parallel environments.
        difficulty: Preset label for every environment.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(difficulty=difficulty)

    return gym.vector.AsyncVectorEnv([make_env for _ in range(n_envs)])
