"""
Errors raised by the TicTacToe engine.
"""


class TicTacToeError(Exception):
    """Base class for all engine errors."""


class InvalidMove(TicTacToeError):
    """
    A marker was placed on an occupied cell, off the board,
    or after the game was already over.

    The board is left untouched, so the caller can simply ask again.
    """

    def __init__(self, row: int, col: int, reason: str):
        self.row = row
        self.col = col
        self.reason = reason
        super().__init__(f"Invalid move at ({row}, {col}): {reason}")


class NoLegalMoves(TicTacToeError):
    """The AI was asked for a move on a finished or full board."""
