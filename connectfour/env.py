"""
env.py - Gymnasium environment for Connect Four

ConnectFourEnv drives one ConnectFourGame per episode through the
Gymnasium reset/step interface. It holds no rules of its own.
"""

from typing import Dict, Optional, Tuple, Union

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.utils import ROWS, COLS, GameResult
from connectfour.game.player import Player
from connectfour.game.rules import ConnectFourGame
from connectfour.interfaces.renderer import render_board_text


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both players act through the same environment: each step plays the
    given column for whoever's turn it is. Rewards are from player one's
    point of view.
    """

    metadata = {'render_modes': ['ascii', 'human', 'rgb_array'], 'render_fps': 4}

    CELL_PIXELS = 50
    SLOT_COLORS = {
        0: (0, 0, 0),        # Empty
        1: (255, 0, 0),      # Player one
        2: (255, 255, 0),    # Player two
    }

    def __init__(self, player_one: Optional[Player] = None,
                 player_two: Optional[Player] = None,
                 render_mode: Optional[str] = None):
        """
        Initialize the Connect Four environment.

        Args:
            player_one: First player (defaults to a red player)
            player_two: Second player (defaults to a yellow player)
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        player_one = player_one or Player("Player 1", "Red")
        player_two = player_two or Player("Player 2", "Yellow")
        if player_one.color == player_two.color:
            raise ValueError("Players need distinct colors to tell their disks apart")
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(COLS)

        # 6x7 board with 3 possible values (0 empty, 1, 2 for the slots)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )

        self.game = ConnectFourGame(player_one, player_two)
        self.render_mode = render_mode
        self.last_move: Optional[Tuple[int, int]] = None

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to initial state.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.game.start_game()
        self.last_move = None

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play a column for the player to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        result = self.game.play(action)

        if not result.accepted:
            debug.warning(f"Invalid action {action}: {result.reason.name}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.last_move = (result.row, result.column)

        reward = self.reward_step
        terminated = result.game_over
        outcome = self.game.get_result()
        if outcome == GameResult.PLAYER_ONE_WIN:
            reward = self.reward_win
        elif outcome == GameResult.PLAYER_TWO_WIN:
            reward = self.reward_lose
        elif outcome == GameResult.DRAW:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Episode finished: {outcome.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        """
        Render the current state of the environment.

        Returns:
            Rendered frame depending on render_mode
        """
        if self.render_mode is None:
            return None

        if self.render_mode == "ascii":
            return self._render_text()

        if self.render_mode == "human":
            print(self._render_text())
            return None

        return self._render_rgb()

    def _render_text(self) -> str:
        return render_board_text(self.game.get_board_snapshot())

    def _render_rgb(self) -> np.ndarray:
        size = self.CELL_PIXELS
        frame = np.zeros((ROWS * size, COLS * size, 3), dtype=np.uint8)
        frame[:, :] = [0, 0, 128]  # Dark blue board

        # Disk mask for one cell, reused for every position
        y, x = np.ogrid[:size, :size]
        center = size // 2
        disk = (x - center) ** 2 + (y - center) ** 2 <= (size * 2 // 5) ** 2

        observation = self._get_observation()
        for row in range(ROWS):
            for col in range(COLS):
                cell = frame[row * size:(row + 1) * size, col * size:(col + 1) * size]
                cell[disk] = self.SLOT_COLORS[int(observation[row, col])]
        return frame

    def _get_observation(self) -> np.ndarray:
        """Board as slot numbers: 0 empty, 1 player one, 2 player two."""
        observation = np.zeros((ROWS, COLS), dtype=np.int8)
        grid = self.game.board.grid
        for slot, player in self.game.players.items():
            observation[grid == player.color] = slot.value
        return observation

    def _get_info(self) -> Dict:
        valid_moves = self.game.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.game.get_current_slot().value,
            'game_result': self.game.get_result().name,
            'moves_made': len(self.game.moves),
            'winning_line': self.game.get_winning_line(),
            'last_move': self.last_move,
        }

    def close(self):
        """Nothing to release."""
        pass
