"""
Board state for the TicTacToe engine.
Tracks the grid, whose turn it is, and whether the game has ended.
"""

from functools import lru_cache
from typing import Optional, List, Sequence, Tuple, Union
from dataclasses import dataclass, field

from .cells import Cell, Player
from .config import GameConfig
from .errors import InvalidMove
from .move_validator import MoveValidator
from .win_checker import WINNING_LINES, WinChecker, Coord, Line, build_winning_lines


# Shared, stateless helper
_validator = MoveValidator()

# Accepted spellings when building a grid from literals
_CELL_ALIASES = {
    None: Cell.EMPTY,
    " ": Cell.EMPTY,
    "_": Cell.EMPTY,
    "": Cell.EMPTY,
    "O": Cell.O,
    "X": Cell.X,
}


@lru_cache(maxsize=None)
def _win_checker_for(size: int) -> WinChecker:
    """One checker per board size; lines are built once and never change."""
    if size == GameConfig.GRID_SIZE:
        return WinChecker(WINNING_LINES)
    return WinChecker(build_winning_lines(size))


def _to_cell(token: Union[Cell, str, None]) -> Cell:
    if isinstance(token, Cell):
        return token
    try:
        return _CELL_ALIASES[token]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown cell value: {token!r}") from None


@dataclass
class BoardState:
    """
    A snapshot of the TicTacToe game.

    Tracks:
    - The NxN grid of markers
    - Whose turn it is
    - The last marker placed
    - How many moves are left (0 once someone wins)
    - The winner and the line they won with

    Grid size, starting player and display symbols come from `config`.
    place() is the only way to advance a state. Search works on clone()s
    so the live game is never disturbed.
    """

    # Empty config.GRID_SIZE grid when not given
    grid: Optional[List[List[Cell]]] = None

    # Player to move next (config.STARTING_PLAYER when not given)
    turn: Optional[Player] = None

    # (row, col) of the most recent marker
    last_move: Optional[Coord] = None

    # Empty cells still playable (counted from the grid when not given)
    moves_remaining: Optional[int] = None

    # Game result
    winner: Cell = Cell.EMPTY
    winning_line: Optional[Line] = None

    config: object = field(default=GameConfig, repr=False, compare=False)

    def __post_init__(self):
        if self.grid is None:
            size = self.config.GRID_SIZE
            self.grid = [[Cell.EMPTY for _ in range(size)] for _ in range(size)]
        if self.turn is None:
            self.turn = Player(self.config.STARTING_PLAYER)
        if self.moves_remaining is None:
            self.moves_remaining = self.size ** 2 - self.count_markers()

    @classmethod
    def from_grid(
        cls,
        rows: Sequence[Sequence[Union[Cell, str, None]]],
        turn: Player,
        config=GameConfig
    ) -> "BoardState":
        """
        Build a consistent state from a literal grid.

        Cells may be Cell values or 'X', 'O', and None/' '/'_' for empty.
        moves_remaining is recounted and the terminal check is run,
        so the usual invariants hold.

        Args:
            rows: The grid, row by row.
            turn: The player to move next.
            config: Game settings carried by the new state.

        Returns:
            A new BoardState.

        Raises:
            ValueError: A cell is not one of the accepted spellings.
        """
        grid = [[_to_cell(cell) for cell in row] for row in rows]

        state = cls(grid=grid, turn=turn, config=config)
        state.detect_terminal()
        return state

    @property
    def size(self) -> int:
        return len(self.grid)

    @property
    def is_terminal(self) -> bool:
        """The game is over (someone won or the board is full)."""
        return self.winner != Cell.EMPTY or self.moves_remaining == 0

    @property
    def is_draw(self) -> bool:
        return self.winner == Cell.EMPTY and self.moves_remaining == 0

    def reset(self):
        """Reset to a fresh game: all cells empty, starting player to move."""
        size = self.config.GRID_SIZE
        self.grid = [[Cell.EMPTY for _ in range(size)] for _ in range(size)]
        self.turn = Player(self.config.STARTING_PLAYER)
        self.last_move = None
        self.moves_remaining = size * size
        self.winner = Cell.EMPTY
        self.winning_line = None

    def place(self, row: int, col: int):
        """
        Place the current player's marker at the given position.

        Args:
            row: Row index.
            col: Column index.

        Raises:
            InvalidMove: The cell is taken, off the board, or the game is
                over. The state is not changed.
        """
        result = _validator.validate_move(self, row, col)
        if not result.is_valid:
            raise InvalidMove(row, col, result.error_message)

        self.grid[row][col] = Cell.from_player(self.turn)
        self.last_move = (row, col)
        self.moves_remaining -= 1
        self.turn = self.turn.opposite()
        self.detect_terminal()

    def detect_terminal(self) -> Cell:
        """
        Scan the winning lines and record a winner if there is one.

        On a win the remaining moves are forced to 0 so nothing
        searches past the end of the game.

        Returns:
            The winner, or Cell.EMPTY (no winner yet, or a draw).
        """
        if self.winner != Cell.EMPTY:
            return self.winner

        found = _win_checker_for(self.size).find_winning_line(self.grid)
        if found is not None:
            self.winner, self.winning_line = found
            self.moves_remaining = 0

        return self.winner

    def legal_moves(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells, scanned row by row.

        Returns:
            List of (row, col) tuples. Empty once the game is over.
        """
        if self.is_terminal:
            return []

        moves = []
        for row in range(self.size):
            for col in range(self.size):
                if self.grid[row][col] == Cell.EMPTY:
                    moves.append((row, col))
        return moves

    def count_markers(self) -> int:
        """Number of non-empty cells on the grid."""
        return sum(1 for row in self.grid for cell in row if cell != Cell.EMPTY)

    def clone(self) -> "BoardState":
        """Create a fully independent copy of the state."""
        return BoardState(
            grid=[list(row) for row in self.grid],
            turn=self.turn,
            last_move=self.last_move,
            moves_remaining=self.moves_remaining,
            winner=self.winner,
            winning_line=self.winning_line,
            config=self.config
        )

    def print_board(self):
        """Print the board to console."""
        symbols = self.config.SYMBOLS
        size = self.size

        print("\n    " + "   ".join(str(col) for col in range(size)))
        for row in range(size):
            cells = " | ".join(symbols[cell.value] for cell in self.grid[row])
            print(f"{row}   {cells}")
            if row < size - 1:
                print("   " + "+".join(["---"] * size))

        # Print game info
        if self.winner != Cell.EMPTY:
            print(f"\n{self.winner.value} WINS!")
        elif self.is_draw:
            print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.turn.name}")


# Quick test
if __name__ == "__main__":
    print("Testing BoardState...")

    game = BoardState()

    # O: (1,1), (0,2), (2,0) completes the anti-diagonal
    moves = [(1, 1), (0, 0), (0, 2), (2, 2), (2, 0)]

    for row, col in moves:
        print(f"\n{game.turn.name} moves to ({row}, {col})")
        game.place(row, col)
        game.print_board()

    assert game.winner == Cell.O
    assert game.winning_line == ((0, 2), (1, 1), (2, 0))
    print("\nBoardState test done!")
