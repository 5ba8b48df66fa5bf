"""
Player and cell types for the TicTacToe engine.
"""

from enum import Enum
from typing import Optional


class Player(Enum):
    """The two players in the game."""
    O = 0
    X = 1

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.X if self == Player.O else Player.O


class Cell(Enum):
    """
    What can sit in a single board cell.

    EMPTY is its own value so it is never mixed up with player 0's marker.
    """
    EMPTY = "empty"
    O = "O"
    X = "X"

    @classmethod
    def from_player(cls, player: Player) -> "Cell":
        """Get the marker a player places."""
        return cls.X if player == Player.X else cls.O

    @property
    def player(self) -> Optional[Player]:
        """The player owning this marker, or None for an empty cell."""
        if self == Cell.EMPTY:
            return None
        return Player.X if self == Cell.X else Player.O
