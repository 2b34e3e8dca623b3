"""
connect4_engine.game - Board and game state for Connect Four

This package contains the immutable board representation, win and draw
detection, and the GameState transition function.
"""

from connect4_engine.game.board import (Board, create_board, check_winner, is_board_full,
                                        legal_columns, lowest_empty_row, get_winning_line)
from connect4_engine.game.rules import (GameState, create_initial_state, place_piece,
                                        is_game_over, get_winner, get_current_player)

__all__ = ['Board', 'GameState', 'create_board', 'create_initial_state', 'place_piece',
           'check_winner', 'is_board_full', 'legal_columns', 'lowest_empty_row',
           'get_winning_line', 'is_game_over', 'get_winner', 'get_current_player']
