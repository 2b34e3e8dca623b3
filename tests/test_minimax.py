import numpy as np
import pytest

from connect4_engine.ai.minimax import MinimaxPlayer, evaluate_board, score_windows
from connect4_engine.errors import NoLegalMoveError
from connect4_engine.game.board import create_board, drop_piece
from connect4_engine.game.rules import create_initial_state
from connect4_engine.utils import Color, WINDOWS, center_order


def drop_all(moves):
    board = create_board()
    for column, color in moves:
        board, _ = drop_piece(board, column, color)
    return board


class TestEvaluation:
    def test_empty_board_scores_zero(self):
        assert evaluate_board(create_board(), Color.RED) == 0
        assert evaluate_board(create_board(), Color.YELLOW) == 0

    def test_center_bonus(self):
        board = drop_all([(3, Color.RED)])
        assert evaluate_board(board, Color.RED) == 6
        # The center bonus only counts the evaluating player's pieces
        assert evaluate_board(board, Color.YELLOW) == 0

    def test_opponent_threat_outweighs_own(self):
        board = drop_all([(0, Color.RED), (1, Color.RED), (2, Color.RED)])
        # One open three (+100) and one open two (+10)
        assert evaluate_board(board, Color.RED) == 110
        # The same shape seen from the other side costs 1000 + 10
        assert evaluate_board(board, Color.YELLOW) == -1010

    def test_four_in_a_row(self):
        board = drop_all([(6, Color.YELLOW)] * 4)
        scores = score_windows(board, Color.YELLOW)
        assert scores.max() == 100000
        assert score_windows(board, Color.RED).min() == -100000

    def test_mixed_windows_score_zero(self):
        board = drop_all([(0, Color.RED), (1, Color.YELLOW), (2, Color.RED), (3, Color.RED)])
        scores = score_windows(board, Color.RED)
        first = WINDOWS.index([(0, 0), (1, 0), (2, 0), (3, 0)])
        assert scores[first] == 0

    def test_window_count(self):
        assert len(WINDOWS) == 69
        assert score_windows(create_board(), Color.RED).shape == (69,)


class TestCenterOrder:
    def test_full_order(self):
        assert center_order(list(range(7))) == [3, 2, 4, 1, 5, 0, 6]

    def test_partial(self):
        assert center_order([0, 1, 6]) == [1, 0, 6]


class TestMinimaxPlayer:
    def test_blocks_the_only_losing_threat(self, play):
        # Red has 0, 1, 2 on the bottom row; yellow must take column 3
        state = play([0, 6, 1, 6, 2])
        assert state.current_player == Color.YELLOW
        assert MinimaxPlayer().get_move(state) == 3

    def test_takes_the_win(self, play):
        # Both sides have three stacked; red to move wins in column 3
        state = play([3, 0, 3, 0, 3, 0])
        assert MinimaxPlayer().get_move(state) == 3

    def test_blocks_off_center(self, play):
        # Yellow has three stacked in column 6 and red must cover it
        state = play([3, 6, 3, 6, 0, 6])
        assert state.current_player == Color.RED
        assert MinimaxPlayer().get_move(state) == 6

    def test_empty_board_is_deterministic(self):
        player = MinimaxPlayer()
        first = player.get_move(create_initial_state())
        assert 0 <= first < 7
        assert player.nodes_evaluated > 0
        assert MinimaxPlayer().get_move(create_initial_state()) == first

    def test_depth_one_uses_static_evaluation(self):
        player = MinimaxPlayer(depth=1)
        assert player.get_move(create_initial_state()) == 3
        assert player.nodes_evaluated == 7

    def test_pruning_visits_fewer_nodes_than_full_tree(self):
        player = MinimaxPlayer(depth=4)
        player.get_move(create_initial_state())
        assert player.nodes_evaluated < 7 + 7 ** 2 + 7 ** 3 + 7 ** 4

    def test_invalid_depth(self):
        with pytest.raises(ValueError):
            MinimaxPlayer(depth=0)

    def test_finished_game(self, drawn_state, play):
        with pytest.raises(NoLegalMoveError):
            MinimaxPlayer().get_move(drawn_state)
        with pytest.raises(NoLegalMoveError):
            MinimaxPlayer().get_move(play([3, 0, 3, 0, 3, 0, 3]))

    def test_search_leaves_state_untouched(self, play):
        state = play([3, 4])
        before = np.array(state.board)
        MinimaxPlayer().get_move(state)
        assert np.array_equal(state.board, before)
        assert state.current_player == Color.RED
