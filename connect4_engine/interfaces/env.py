"""
env.py - Gymnasium environment for playing Connect Four against the engine

The agent controls one color; every agent move is answered by the engine's
computer opponent at the configured quality.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4_engine.ai.selector import get_computer_move
from connect4_engine.debug import debug
from connect4_engine.game.board import count_pieces, legal_columns
from connect4_engine.game.rules import GameState, create_initial_state, place_piece
from connect4_engine.utils import COLS, ROWS, Color, Quality


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observations are the (COLS, ROWS) board, row 0 at the bottom, with 0 for
    empty, 1 for red and 2 for yellow.
    """

    metadata = {'render_modes': []}

    def __init__(self, agent_color: Color = Color.RED,
                 opponent_quality: Quality = Quality.MEDIUM):
        """
        Initialize the environment.

        Args:
            agent_color: Color played by the agent
            opponent_quality: Quality passed to get_computer_move for replies
        """
        debug.debug(f"Initializing ConnectFourEnv (agent={agent_color}, "
                    f"opponent={Quality(opponent_quality).value})", "env")

        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(low=0, high=2, shape=(COLS, ROWS), dtype=np.int8)

        self.agent_color = agent_color
        self.opponent_quality = Quality(opponent_quality)
        self.state: GameState = create_initial_state()
        self.last_opponent_move: Optional[int] = None

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        If the agent plays yellow, the opponent's opening move is already on
        the board in the returned observation.
        """
        super().reset(seed=seed)

        self.state = create_initial_state()
        self.last_opponent_move = None
        if self.state.current_player != self.agent_color:
            self._opponent_move()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play the agent's column, then the opponent's reply.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        if self.state.is_game_over:
            raise RuntimeError("step() called on a finished game; call reset()")

        action = int(action)
        next_state = place_piece(self.state, action)
        if next_state is self.state:
            debug.warning(f"Invalid action: column {action} is full", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.state = next_state
        self.last_opponent_move = None
        if not self.state.is_game_over:
            self._opponent_move()

        reward = self.reward_step
        terminated = self.state.is_game_over
        if terminated:
            if self.state.winner == self.agent_color:
                reward = self.reward_win
            elif self.state.winner is not None:
                reward = self.reward_lose
            else:
                reward = self.reward_draw
            debug.info(f"Game over: winner={self.state.winner}, reward={reward}", "env")

        return self._get_observation(), reward, terminated, False, self._get_info()

    def _opponent_move(self) -> None:
        column = get_computer_move(self.state, self.opponent_quality, rng=self.np_random)
        debug.debug(f"Opponent plays column {column}", "env")
        self.state = place_piece(self.state, column)
        self.last_opponent_move = column

    def _get_observation(self) -> np.ndarray:
        return np.array(self.state.board, dtype=np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            'valid_moves': legal_columns(self.state.board),
            'current_player': self.state.current_player.label,
            'winner': self.state.winner.label if self.state.winner else None,
            'is_game_over': self.state.is_game_over,
            'opponent_move': self.last_opponent_move,
            'moves_made': count_pieces(self.state.board),
        }
