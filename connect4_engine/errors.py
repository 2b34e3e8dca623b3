"""
errors.py - Exceptions raised by the Connect Four engine
"""

from typing import Any, Dict, Optional


class ConnectFourError(Exception):
    """Base exception for engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class InvalidColumnError(ConnectFourError, ValueError):
    """Raised when a column index is outside the board, or names a full column in a replay."""
    pass


class NoLegalMoveError(ConnectFourError, RuntimeError):
    """Raised when a move is requested or replayed on a finished game."""
    pass


class InvalidStateError(ConnectFourError, ValueError):
    """Raised when a transport dict does not describe a game state."""
    pass
