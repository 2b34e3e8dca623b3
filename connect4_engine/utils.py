"""
utils.py - Constants, enumerations and board geometry for the Connect Four engine

This module provides the grid dimensions, the player and difficulty enumerations,
and the precomputed 4-cell windows used by both win detection and evaluation.
"""

from enum import Enum, auto
from typing import List, Tuple

import numpy as np

# Game constants
COLS = 7
ROWS = 6
CONNECT_N = 4  # Number of pieces in a row to win
CENTER_COLUMN = COLS // 2

# Cell value for an empty slot; filled cells hold Color.value
EMPTY = 0

# Search configuration
SEARCH_DEPTH = 5

# Evaluation weights
CENTER_WEIGHT = 6
SCORE_OWN_FOUR = 100000
SCORE_OWN_THREE = 100
SCORE_OWN_TWO = 10
SCORE_OPP_FOUR = -100000
SCORE_OPP_THREE = -1000
SCORE_OPP_TWO = -10


class Color(Enum):
    """Enumeration of the two players (and the pieces they own)."""
    RED = 1     # Moves first
    YELLOW = 2

    def other(self) -> 'Color':
        """Get the opposing color."""
        return Color.YELLOW if self == Color.RED else Color.RED

    @property
    def label(self) -> str:
        """Lowercase name used in transport dicts and CLI output."""
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> 'Color':
        return cls[label.upper()]

    def __str__(self):
        return self.label


class Quality(Enum):
    """Difficulty of the computer opponent."""
    BAD = "bad"
    MEDIUM = "medium"
    BEST = "best"


class Direction(Enum):
    """Enumeration representing the four line axes."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()    # Bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Top-left to bottom-right


# Direction vectors (column, row) for each axis, row 0 being the bottom
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (1, 0),
    Direction.VERTICAL: (0, 1),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (1, -1),
}


def is_valid_position(column: int, row: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        column: Column index
        row: Row index (0 = bottom)

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= column < COLS and 0 <= row < ROWS


def center_order(columns: List[int]) -> List[int]:
    """
    Order columns by distance from the center, center first.

    Equal distances keep their ascending order, so the full board yields
    3, 2, 4, 1, 5, 0, 6.
    """
    return sorted(columns, key=lambda c: abs(c - CENTER_COLUMN))


def _build_windows() -> List[List[Tuple[int, int]]]:
    windows = []
    for column in range(COLS):
        for row in range(ROWS):
            for dc, dr in DIRECTION_VECTORS.values():
                end_column = column + (CONNECT_N - 1) * dc
                end_row = row + (CONNECT_N - 1) * dr
                if not is_valid_position(end_column, end_row):
                    continue
                windows.append([(column + i * dc, row + i * dr) for i in range(CONNECT_N)])
    return windows


# Every run of CONNECT_N consecutive cells on the board (69 on a 7x6 grid),
# kept as index arrays so a board can be sliced into shape (n_windows, CONNECT_N)
WINDOWS = _build_windows()
WINDOW_COLUMNS = np.array([[c for c, _ in window] for window in WINDOWS], dtype=np.intp)
WINDOW_ROWS = np.array([[r for _, r in window] for window in WINDOWS], dtype=np.intp)


def board_windows(board: np.ndarray) -> np.ndarray:
    """
    Gather the cell values of every window.

    Args:
        board: Grid of shape (COLS, ROWS)

    Returns:
        Array of shape (len(WINDOWS), CONNECT_N)
    """
    return board[WINDOW_COLUMNS, WINDOW_ROWS]
