"""
minimax.py - Minimax algorithm with alpha-beta pruning for Connect Four

This module provides a MinimaxPlayer class that searches a fixed number of
plies ahead and a static evaluation used when the search stops.

The heuristic evaluation:
1. Rewards pieces in the center column
2. Scores every 4-cell window by how close either side is to filling it
3. Weighs the opponent's three-in-a-row ten times heavier than our own,
   so the search prefers blocking over building
"""

import math

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.errors import NoLegalMoveError
from connect4_engine.game.board import Board, legal_columns
from connect4_engine.game.rules import GameState, place_piece
from connect4_engine.utils import (CENTER_COLUMN, CONNECT_N, SEARCH_DEPTH, CENTER_WEIGHT,
                                   SCORE_OWN_FOUR, SCORE_OWN_THREE, SCORE_OWN_TWO,
                                   SCORE_OPP_FOUR, SCORE_OPP_THREE, SCORE_OPP_TWO,
                                   Color, board_windows, center_order)


def score_windows(board: Board, player: Color) -> np.ndarray:
    """
    Score every 4-cell window on the board for a player.

    Windows holding pieces of both colors score 0.

    Args:
        board: The board to score
        player: The player whose point of view is used

    Returns:
        Integer array with one score per window
    """
    windows = board_windows(board)
    own = np.count_nonzero(windows == player.value, axis=1)
    opp = np.count_nonzero(windows == player.other().value, axis=1)
    empty = CONNECT_N - own - opp

    conditions = [
        own == 4,
        (own == 3) & (empty == 1),
        (own == 2) & (empty == 2),
        opp == 4,
        (opp == 3) & (empty == 1),
        (opp == 2) & (empty == 2),
    ]
    choices = [SCORE_OWN_FOUR, SCORE_OWN_THREE, SCORE_OWN_TWO,
               SCORE_OPP_FOUR, SCORE_OPP_THREE, SCORE_OPP_TWO]
    return np.select(conditions, choices, default=0)


def evaluate_board(board: Board, player: Color) -> int:
    """
    Static evaluation of a position.

    Args:
        board: The board to evaluate
        player: The player we're evaluating for

    Returns:
        Center bonus plus the sum of all window scores; positive favours player
    """
    center = int(np.count_nonzero(board[CENTER_COLUMN] == player.value)) * CENTER_WEIGHT
    return center + int(score_windows(board, player).sum())


class MinimaxPlayer:
    """
    Chooses moves with a depth-limited minimax search and alpha-beta pruning.

    The root move counts as the first ply, so depth=5 looks at the move being
    chosen and four replies after it.
    """

    def __init__(self, depth: int = SEARCH_DEPTH):
        """
        Initialize the minimax player.

        Args:
            depth: Number of plies searched, including the move being chosen
        """
        if depth < 1:
            raise ValueError("Search depth must be at least 1")
        self.depth = depth
        self.nodes_evaluated = 0  # For performance tracking

    def get_move(self, state: GameState) -> int:
        """
        Get the best column for the player to move.

        Args:
            state: Position to search from

        Returns:
            The column with the highest minimax score; the first one in
            center-first order wins ties

        Raises:
            NoLegalMoveError: If the game is over or the board is full
        """
        columns = center_order(legal_columns(state.board))
        if state.is_game_over or not columns:
            raise NoLegalMoveError("No legal move to search from a finished game")

        self.nodes_evaluated = 0
        player = state.current_player

        best_score = -math.inf
        best_column = columns[0]
        alpha = -math.inf
        beta = math.inf

        debug.start_timer("minimax")
        for column in columns:
            child = place_piece(state, column)
            score = self._minimax(child, self.depth - 1, alpha, beta, False, player)
            debug.trace(f"Column {column} scores {score}", "ai")

            if score > best_score:
                best_score = score
                best_column = column

            alpha = max(alpha, score)

        elapsed = debug.end_timer("minimax", "ai")
        debug.debug(f"{player} picks column {best_column} (score {best_score}, "
                    f"{self.nodes_evaluated} nodes, {elapsed:.3f}s)", "ai")
        return best_column

    def _minimax(self, state: GameState, depth: int, alpha: float, beta: float,
                 is_maximizing: bool, player: Color) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            state: Current position
            depth: Remaining search depth
            alpha: Best score the maximizer can guarantee so far
            beta: Best score the minimizer can guarantee so far
            is_maximizing: True if player is to move in this position
            player: The player the search is run for

        Returns:
            The evaluation score for this position
        """
        self.nodes_evaluated += 1

        if depth == 0 or state.is_game_over:
            return evaluate_board(state.board, player)

        columns = center_order(legal_columns(state.board))

        if is_maximizing:
            max_score = -math.inf
            for column in columns:
                score = self._minimax(place_piece(state, column), depth - 1,
                                      alpha, beta, False, player)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
            return max_score

        min_score = math.inf
        for column in columns:
            score = self._minimax(place_piece(state, column), depth - 1,
                                  alpha, beta, True, player)
            min_score = min(min_score, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return min_score


if __name__ == "__main__":
    from connect4_engine.debug import DebugLevel
    from connect4_engine.game.rules import create_initial_state

    debug.configure(level=DebugLevel.DEBUG)

    # Red has three on the bottom row; yellow must block column 3
    state = create_initial_state()
    for column in [0, 0, 1, 1, 2]:
        state = place_piece(state, column)

    player = MinimaxPlayer()
    move = player.get_move(state)
    print(f"Best move: column {move} (should be 3 to block)")
    print(f"Nodes evaluated: {player.nodes_evaluated}")
