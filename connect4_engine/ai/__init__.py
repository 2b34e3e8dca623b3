"""
connect4_engine.ai - Computer opponent for Connect Four

This package provides move selection at three qualities, the minimax search
behind the strongest one, and its static evaluation.
"""

from connect4_engine.ai.minimax import MinimaxPlayer, evaluate_board, score_windows
from connect4_engine.ai.selector import (get_computer_move, find_winning_column,
                                         random_column, make_rng)

__all__ = ['MinimaxPlayer', 'evaluate_board', 'score_windows', 'get_computer_move',
           'find_winning_column', 'random_column', 'make_rng']
