"""
board.py - Board representation and win detection for Connect Four

A board is a read-only numpy array of shape (COLS, ROWS) indexed as
board[column, row], with row 0 at the bottom. Empty cells hold EMPTY and
filled cells hold the owning Color's value. Functions here never modify the
board they are given; drop_piece returns a fresh array.
"""

from typing import List, Optional, Tuple

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.errors import InvalidColumnError
from connect4_engine.utils import (COLS, ROWS, EMPTY, WINDOWS, Color,
                                   board_windows)

Board = np.ndarray


def freeze_board(grid: np.ndarray) -> Board:
    grid.flags.writeable = False
    return grid


def create_board() -> Board:
    """Create an empty 7x6 board."""
    return freeze_board(np.full((COLS, ROWS), EMPTY, dtype=np.int8))


def validate_column(column) -> int:
    """
    Check that a column index lies on the board.

    Args:
        column: Column index supplied by a caller

    Returns:
        The column as a plain int

    Raises:
        InvalidColumnError: If the column is not an integer in [0, COLS)
    """
    if isinstance(column, (bool, np.bool_)) or not isinstance(column, (int, np.integer)):
        debug.warning(f"Rejected non-integer column {column!r}", "board")
        raise InvalidColumnError(f"Column must be an integer, got {column!r}",
                                 {"column": column})
    if not 0 <= column < COLS:
        debug.warning(f"Rejected column {column} out of bounds", "board")
        raise InvalidColumnError(f"Column {column} is outside 0..{COLS - 1}",
                                 {"column": int(column)})
    return int(column)


def lowest_empty_row(board: Board, column: int) -> Optional[int]:
    """
    Find the row a piece dropped into a column would land on.

    Returns:
        The row index, or None if the column is full

    Raises:
        InvalidColumnError: If the column is outside the board
    """
    column = validate_column(column)
    empty_rows = np.flatnonzero(board[column] == EMPTY)
    if empty_rows.size == 0:
        return None
    return int(empty_rows[0])


def legal_columns(board: Board) -> List[int]:
    """Columns whose top cell is still empty, in ascending order."""
    return [int(c) for c in np.flatnonzero(board[:, ROWS - 1] == EMPTY)]


def is_board_full(board: Board) -> bool:
    """True iff no cell on the board is empty."""
    return not bool((board == EMPTY).any())


def drop_piece(board: Board, column: int, color: Color) -> Tuple[Board, Optional[int]]:
    """
    Drop a piece into a column.

    Args:
        board: The current board (left untouched)
        column: Target column
        color: Owner of the new piece

    Returns:
        (new_board, row) where row is the landing row, or (board, None)
        when the column is full

    Raises:
        InvalidColumnError: If the column is outside the board
    """
    row = lowest_empty_row(board, column)
    if row is None:
        debug.debug(f"Column {column} is full", "board")
        return board, None

    grid = board.copy()
    grid[column, row] = color.value
    debug.trace(f"Placed {color} at ({column}, {row})", "board")
    return freeze_board(grid), row


def check_winner(board: Board, player: Optional[Color] = None) -> bool:
    """
    Check the board for a line of four.

    Args:
        board: The board to inspect
        player: Color to test; None accepts a line of either color

    Returns:
        True if the player (or anyone, when player is None) has four in a row
    """
    windows = board_windows(board)
    if player is None:
        first = windows[:, :1]
        return bool(((windows == first) & (first != EMPTY)).all(axis=1).any())
    return bool((windows == player.value).all(axis=1).any())


def get_winning_line(board: Board, player: Color) -> List[Tuple[int, int]]:
    """
    Get the cells of the first completed line for a player.

    Returns:
        List of (column, row) positions, or an empty list if there is no line
    """
    owned = (board_windows(board) == player.value).all(axis=1)
    hits = np.flatnonzero(owned)
    if hits.size == 0:
        return []
    return list(WINDOWS[hits[0]])


def count_pieces(board: Board) -> int:
    """Number of occupied cells."""
    return int(np.count_nonzero(board != EMPTY))


if __name__ == "__main__":
    board = create_board()
    for column, color in [(3, Color.RED), (3, Color.YELLOW), (4, Color.RED),
                          (5, Color.RED), (6, Color.RED)]:
        board, row = drop_piece(board, column, color)
        print(f"{color} -> column {column}, row {row}")

    print(f"Red wins: {check_winner(board, Color.RED)}")
    print(f"Winning line: {get_winning_line(board, Color.RED)}")
    print(f"Legal columns: {legal_columns(board)}")
