"""
selector.py - Computer move selection for Connect Four

get_computer_move picks a column for the player to move at one of three
qualities:

- bad: uniformly random legal column
- medium: win now if possible, otherwise block the opponent's immediate win,
  otherwise random
- best: minimax search with alpha-beta pruning (see minimax.py)

Randomness comes from an injected numpy Generator so games can be replayed
from a seed.
"""

from dataclasses import replace
from typing import List, Optional, Union

import numpy as np

from connect4_engine.ai.minimax import MinimaxPlayer
from connect4_engine.debug import debug
from connect4_engine.errors import NoLegalMoveError
from connect4_engine.game.board import legal_columns
from connect4_engine.game.rules import GameState, place_piece
from connect4_engine.utils import Color, Quality, SEARCH_DEPTH

RandomSource = Union[None, int, np.random.Generator]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Turn a seed, a Generator or None into a Generator."""
    return np.random.default_rng(rng)


def random_column(columns: List[int], rng: np.random.Generator) -> int:
    """
    Pick a column uniformly at random.

    Raises:
        NoLegalMoveError: If there are no columns to choose from
    """
    if not columns:
        raise NoLegalMoveError("No valid columns available")
    return int(rng.choice(columns))


def find_winning_column(state: GameState, player: Color) -> Optional[int]:
    """
    Find the first column (ascending) where player would complete four in a row.

    The state is tried as if player were to move, whatever its current_player.
    A finished game has no winning column.
    """
    if state.is_game_over:
        return None
    hypothetical = replace(state, current_player=player)
    for column in legal_columns(state.board):
        if place_piece(hypothetical, column).winner == player:
            return column
    return None


def get_computer_move(state: GameState, quality: Union[Quality, str],
                      rng: RandomSource = None) -> int:
    """
    Choose a column for the player to move.

    Args:
        state: Current game state
        quality: "bad", "medium" or "best" (or the matching Quality member);
            anything else falls back to a random move
        rng: Generator or seed used for random choices

    Returns:
        A legal column index

    Raises:
        NoLegalMoveError: If the game is over or no column is playable
    """
    columns = legal_columns(state.board)
    if state.is_game_over or not columns:
        debug.warning("Computer move requested for a finished game", "ai")
        raise NoLegalMoveError("No legal move: the game is over",
                               {"is_game_over": state.is_game_over, "columns": columns})

    generator = make_rng(rng)

    try:
        quality = Quality(quality)
    except ValueError:
        debug.warning(f"Unknown quality {quality!r}, playing randomly", "ai")
        return random_column(columns, generator)

    if quality == Quality.MEDIUM:
        player = state.current_player
        column = find_winning_column(state, player)
        if column is not None:
            debug.debug(f"{player} wins in column {column}", "ai")
            return column

        column = find_winning_column(state, player.other())
        if column is not None:
            debug.debug(f"{player} blocks column {column}", "ai")
            return column

    elif quality == Quality.BEST:
        return MinimaxPlayer(depth=SEARCH_DEPTH).get_move(state)

    return random_column(columns, generator)
