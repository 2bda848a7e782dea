"""
Gymnasium environment wrapper for the minefield game.

Provides a standard RL interface over Game.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, DEFAULT_CONFIG
from .render import render_board, status_text
from .state import Game


# ============================================================================
# Minefield Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for the minefield game.

    Observation:
        2D array where:
        - -1 = closed cell
        - 0-8 = opened cell with adjacent mine count
        - 9 = opened mine

    Actions:
        Discrete action space of size size * size.
        Action i is the cell at flat index i.

    Rewards:
        - +1 for opening a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an invalid action (already opened)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 10x10 with 20 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or DEFAULT_CONFIG
        self.render_mode = render_mode
        self.game = Game(self.config, source=self._draw_index)

        self.observation_space = spaces.Box(
            low=-1,
            high=9,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0
        self._total_safe_cells = self.config.total_cells - self.config.num_mines

    def _draw_index(self, total_cells: int) -> int:
        """Index source backed by the environment's seeded generator."""
        return int(self.np_random.integers(total_cells))

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.game.reset()
        self._steps = 0

        return self.game.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to open.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        reward = self._calculate_reward(int(action))

        observation = self.game.get_observation()
        terminated = not self.game.is_in_progress
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _calculate_reward(self, action: int) -> float:
        """Apply the action and score the outcome."""
        if self.game.board[action].is_opened:
            return -0.1

        self.game.select(action)

        if self.game.is_won:
            return 10.0
        if self.game.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "opened": self.game.opened_count,
            "total_safe": self._total_safe_cells,
            "game_state": self.game.state.name,
            "valid_actions": len(self.game.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_board(self.game.board)
        label = status_text(self.game.state)
        if label:
            text = f"{text}\n{label}"

        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        mask[self.game.get_valid_actions()] = True
        return mask
