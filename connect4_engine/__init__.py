"""
connect4_engine - Connect Four game engine with a computer opponent

This package provides an immutable board and game state, win and draw
detection, and a computer opponent that plays randomly, one move ahead, or
with a minimax search with alpha-beta pruning.
"""

from connect4_engine.ai import get_computer_move
from connect4_engine.errors import (ConnectFourError, InvalidColumnError, InvalidStateError,
                                    NoLegalMoveError)
from connect4_engine.game import (GameState, check_winner, create_board, create_initial_state,
                                  is_board_full, place_piece)
from connect4_engine.utils import Color, Quality

# Version number
__version__ = '0.1.0'

__all__ = ['Color', 'Quality', 'GameState', 'create_board', 'create_initial_state',
           'place_piece', 'check_winner', 'is_board_full', 'get_computer_move',
           'ConnectFourError', 'InvalidColumnError', 'InvalidStateError', 'NoLegalMoveError']
