"""
rules.py - Game state and the transition function for Connect Four

GameState is an immutable value. place_piece never modifies the state it is
given; it returns a new state, or the same state when the move has no effect
(full column or finished game).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.errors import InvalidStateError
from connect4_engine.game.board import (Board, create_board, drop_piece, check_winner,
                                        is_board_full, validate_column, freeze_board)
from connect4_engine.utils import COLS, ROWS, EMPTY, Color


@dataclass(frozen=True, eq=False)
class GameState:
    """Snapshot of a game: the board, whose turn it is, and the outcome."""
    board: Board = field(default_factory=create_board)
    current_player: Color = Color.RED
    winner: Optional[Color] = None
    is_game_over: bool = False

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return (self.current_player == other.current_player
                and self.winner == other.winner
                and self.is_game_over == other.is_game_over
                and np.array_equal(self.board, other.board))

    def __hash__(self):
        return hash((self.board.tobytes(), self.current_player, self.winner, self.is_game_over))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the state to plain data.

        The board is a list of COLS columns, each a bottom-to-top list of ROWS
        cells holding "red", "yellow" or None.
        """
        return {
            "board": [[Color(int(cell)).label if cell != EMPTY else None for cell in column]
                      for column in self.board],
            "currentPlayer": self.current_player.label,
            "winner": self.winner.label if self.winner else None,
            "isGameOver": bool(self.is_game_over),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GameState':
        """
        Build a state from the output of to_dict.

        Raises:
            InvalidStateError: If the data does not have the expected shape
        """
        if not isinstance(data, dict):
            raise InvalidStateError("Game state must be a mapping")

        missing = {"board", "currentPlayer", "winner", "isGameOver"} - set(data)
        if missing:
            raise InvalidStateError(f"Game state is missing {sorted(missing)}",
                                    {"missing": sorted(missing)})

        columns = data["board"]
        if not isinstance(columns, list) or len(columns) != COLS:
            raise InvalidStateError(f"Board must be a list of {COLS} columns")

        grid = np.full((COLS, ROWS), EMPTY, dtype=np.int8)
        for c, column in enumerate(columns):
            if not isinstance(column, list) or len(column) != ROWS:
                raise InvalidStateError(f"Column {c} must be a list of {ROWS} cells",
                                        {"column": c})
            for r, cell in enumerate(column):
                if cell is not None:
                    grid[c, r] = _parse_color(cell, f"board[{c}][{r}]").value

        winner = data["winner"]
        if not isinstance(data["isGameOver"], bool):
            raise InvalidStateError("isGameOver must be a boolean")

        return cls(
            board=freeze_board(grid),
            current_player=_parse_color(data["currentPlayer"], "currentPlayer"),
            winner=_parse_color(winner, "winner") if winner is not None else None,
            is_game_over=data["isGameOver"],
        )


def _parse_color(value: Any, where: str) -> Color:
    if isinstance(value, str):
        try:
            return Color.from_label(value)
        except KeyError:
            pass
    raise InvalidStateError(f"Unknown color {value!r} in {where}", {"field": where})


def create_initial_state() -> GameState:
    """Create a fresh game: empty board, red to move."""
    debug.debug("Creating initial game state", "rules")
    return GameState(board=create_board(), current_player=Color.RED,
                     winner=None, is_game_over=False)


def place_piece(state: GameState, column: int) -> GameState:
    """
    Drop the current player's piece into a column.

    Args:
        state: The state to move from
        column: Column index in [0, COLS)

    Returns:
        The resulting state. The input state itself is returned when the
        column is full or the game is already over.

    Raises:
        InvalidColumnError: If the column is outside the board
    """
    column = validate_column(column)

    if state.is_game_over:
        debug.debug(f"Ignoring move in column {column}: game is over", "rules")
        return state

    player = state.current_player
    board, row = drop_piece(state.board, column, player)
    if row is None:
        return state

    winner = player if check_winner(board, player) else None
    game_over = winner is not None or is_board_full(board)

    if winner is not None:
        debug.debug(f"{player} wins with a piece at ({column}, {row})", "rules")
    elif game_over:
        debug.debug("Game ends in a draw", "rules")

    return GameState(board=board, current_player=player.other(),
                     winner=winner, is_game_over=game_over)


def is_game_over(state: GameState) -> bool:
    return state.is_game_over


def get_winner(state: GameState) -> Optional[Color]:
    return state.winner


def get_current_player(state: GameState) -> Color:
    return state.current_player


if __name__ == "__main__":
    state = create_initial_state()
    for column in [3, 0, 3, 0, 3, 0, 3]:
        state = place_piece(state, column)
        print(f"Played {column}: next={state.current_player}, "
              f"winner={state.winner}, over={state.is_game_over}")
