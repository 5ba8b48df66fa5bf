"""
Win checker for the TicTacToe engine.
Finds winning lines on a board grid.
"""

from typing import Optional, List, Tuple
from .cells import Cell
from .config import GameConfig


Coord = Tuple[int, int]
Line = Tuple[Coord, ...]


def build_winning_lines(size: int) -> Tuple[Line, ...]:
    """
    Build every winning line for a size x size grid.

    Order is fixed: rows (top to bottom), columns (left to right),
    then the main diagonal and the anti-diagonal.

    Args:
        size: Number of rows/columns on the board.

    Returns:
        Tuple of 2 * size + 2 lines, each a tuple of (row, col).
    """
    rows = [tuple((r, c) for c in range(size)) for r in range(size)]
    cols = [tuple((r, c) for r in range(size)) for c in range(size)]
    diagonal = tuple((i, i) for i in range(size))
    anti_diagonal = tuple((i, size - 1 - i) for i in range(size))
    return tuple(rows + cols + [diagonal, anti_diagonal])


# Computed once, shared read-only by every board and search
WINNING_LINES = build_winning_lines(GameConfig.GRID_SIZE)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: every cell of a line holds the same marker
    (horizontally, vertically, or diagonally)
    """

    def __init__(self, lines: Tuple[Line, ...] = WINNING_LINES):
        self.lines = lines

    def find_winning_line(
        self,
        grid: List[List[Cell]]
    ) -> Optional[Tuple[Cell, Line]]:
        """
        Find the first winning line on the grid.

        Args:
            grid: The board grid.

        Returns:
            (winning marker, line) for the first line found, or None.
        """
        for line in self.lines:
            winner = self._check_line(grid, line)
            if winner is not None:
                return winner, line

        return None

    def check_winner(self, grid: List[List[Cell]]) -> Cell:
        """Get the winning marker, or Cell.EMPTY if nobody has won."""
        found = self.find_winning_line(grid)
        return found[0] if found else Cell.EMPTY

    def _check_line(
        self,
        grid: List[List[Cell]],
        line: Line
    ) -> Optional[Cell]:
        """
        Check if a single line has a winner.

        Returns:
            The marker if all cells of the line match, None otherwise.
        """
        first_row, first_col = line[0]
        first = grid[first_row][first_col]
        if first == Cell.EMPTY:
            return None  # Empty cell, no winner on this line

        for row, col in line[1:]:
            if grid[row][col] != first:
                return None

        return first
