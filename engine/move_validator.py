"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass
from .cells import Cell

if TYPE_CHECKING:
    from .board_state import BoardState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        state: "BoardState",
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            state: Current board state.
            row: Row to place the marker.
            col: Column to place the marker.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if state.is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if row/col are in valid range
        size = state.size
        if not (0 <= row < size and 0 <= col < size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{size - 1}."
            )

        # Check if cell is empty
        cell = state.grid[row][col]
        if cell != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {cell.value}"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)
