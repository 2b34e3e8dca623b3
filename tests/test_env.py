import numpy as np
import pytest

from connect4_engine.errors import InvalidColumnError
from connect4_engine.interfaces.env import ConnectFourEnv
from connect4_engine.utils import Color, Quality


class TestConnectFourEnv:
    def test_reset_as_red(self):
        env = ConnectFourEnv()
        observation, info = env.reset(seed=0)
        assert observation.shape == (7, 6)
        assert env.observation_space.contains(observation)
        assert not observation.any()
        assert info['valid_moves'] == list(range(7))
        assert info['current_player'] == 'red'
        assert info['opponent_move'] is None
        assert info['moves_made'] == 0

    def test_reset_as_yellow_lets_the_opponent_open(self):
        env = ConnectFourEnv(agent_color=Color.YELLOW, opponent_quality=Quality.BAD)
        observation, info = env.reset(seed=3)
        assert np.count_nonzero(observation) == 1
        assert observation[info['opponent_move'], 0] == Color.RED.value
        assert info['current_player'] == 'yellow'

    def test_step_plays_agent_and_opponent(self):
        env = ConnectFourEnv(opponent_quality="bad")
        env.reset(seed=1)
        observation, reward, terminated, truncated, info = env.step(3)
        assert observation[3, 0] == Color.RED.value
        assert np.count_nonzero(observation) == 2
        assert reward == env.reward_step
        assert not terminated and not truncated
        assert info['current_player'] == 'red'
        assert info['moves_made'] == 2

    def test_full_column_is_rejected(self, play):
        env = ConnectFourEnv()
        env.reset(seed=0)
        env.state = play([0] * 6)
        before = env.state
        observation, reward, terminated, truncated, info = env.step(0)
        assert reward == env.reward_invalid_move
        assert truncated and not terminated
        assert info['invalid_move'] is True
        assert env.state is before

    def test_out_of_range_action(self):
        env = ConnectFourEnv()
        env.reset(seed=0)
        with pytest.raises(InvalidColumnError):
            env.step(7)

    def test_agent_win(self, play):
        env = ConnectFourEnv()
        env.reset(seed=0)
        env.state = play([3, 0, 3, 0, 3, 1])
        _, reward, terminated, _, info = env.step(3)
        assert terminated
        assert reward == env.reward_win
        assert info['winner'] == 'red'
        assert info['opponent_move'] is None

    def test_agent_loss(self, play):
        env = ConnectFourEnv(opponent_quality="medium")
        env.reset(seed=0)
        # Yellow has three stacked in column 6; red ignores it
        env.state = play([0, 6, 1, 6, 0, 6])
        _, reward, terminated, _, info = env.step(5)
        assert terminated
        assert reward == env.reward_lose
        assert info['winner'] == 'yellow'
        assert info['opponent_move'] == 6

    def test_full_game_terminates(self):
        env = ConnectFourEnv(opponent_quality=Quality.BAD)
        _, info = env.reset(seed=42)
        rng = np.random.default_rng(42)
        terminated = False
        for _ in range(21):
            action = int(rng.choice(info['valid_moves']))
            _, reward, terminated, truncated, info = env.step(action)
            assert not truncated
            if terminated:
                break
        assert terminated
        assert reward in (env.reward_win, env.reward_lose, env.reward_draw)

    def test_step_after_game_over(self, play):
        env = ConnectFourEnv()
        env.reset(seed=0)
        env.state = play([3, 0, 3, 0, 3, 0, 3])
        with pytest.raises(RuntimeError):
            env.step(1)
