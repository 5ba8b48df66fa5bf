"""
AI player for the TicTacToe engine.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

from typing import Optional, Tuple, List
from .board_state import BoardState
from .cells import Cell, Player
from .config import GameConfig
from .errors import NoLegalMoves


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    Search is exhaustive to the end of the game and deterministic:
    among equally good moves the first one in row-major order wins.
    """

    def __init__(self, player: Player = Player.X, config=GameConfig):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI thinks for (default: X)
            config: Settings for score bounds, opening and debug output.
        """
        self.player = player
        self.config = config
        self.score_bounds = config.SCORE_BOUNDS

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

        # (move, score) for every root move of the last search
        self.last_scores: List[Tuple[Tuple[int, int], int]] = []

    def get_best_move(self, state: BoardState) -> Tuple[int, int]:
        """
        Get the best move for the current position.

        The state passed in is never modified; all exploration
        happens on clones. If it is not this player's turn the move is
        still scored for this player, with the other side moving first.

        Args:
            state: Current board state.

        Returns:
            (row, col) of the best move.

        Raises:
            NoLegalMoves: The game is already over.
        """
        self.positions_evaluated = 0
        self.last_scores = []

        valid_moves = state.legal_moves()
        if not valid_moves:
            raise NoLegalMoves("No legal moves: the game is already over")

        if state.turn != self.player:
            print(f"Warning: It's not {self.player.name}'s turn!")

        center = self._opening_center(state)
        if center is not None:
            if self.config.DEBUG_MODE:
                print(f"AI takes the center on the opening move: {center}")
            return center

        best_score = -self.score_bounds - 1
        best_move = valid_moves[0]

        for row, col in valid_moves:
            new_state = state.clone()
            new_state.place(row, col)

            # Full window for every root move so each score is exact
            score = self._minimax(
                new_state, 1, -self.score_bounds, self.score_bounds
            )
            self.last_scores.append(((row, col), score))

            # Strictly greater: the first maximal move wins ties
            if score > best_score:
                best_score = score
                best_move = (row, col)

        if self.config.DEBUG_MODE:
            print(
                f"AI evaluated {self.positions_evaluated} positions. "
                f"Best move: {best_move} (score: {best_score})"
            )

        return best_move

    def _opening_center(self, state: BoardState) -> Optional[Tuple[int, int]]:
        """
        Center cell on a completely empty board, if the shortcut is enabled.

        Every first move is a draw under perfect play, so the center is
        always tied for best there. Mid-game boards with an empty center
        go through the full search.
        """
        if not self.config.TAKE_CENTER_ON_OPENING:
            return None

        size = state.size
        if size % 2 == 0 or state.moves_remaining != size * size:
            return None

        center = (size - 1) // 2
        return (center, center)

    def _minimax(
        self,
        state: BoardState,
        depth: int,
        alpha: int,
        beta: int
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            state: Current state to evaluate.
            depth: How far below the root this state is.
            alpha: Best score the AI can already guarantee.
            beta: Best score the opponent can already guarantee.

        Returns:
            The score of the position for the AI.
        """
        self.positions_evaluated += 1

        if state.is_terminal:
            return self._evaluate(state, depth)

        maximizing = state.turn == self.player

        for row, col in state.legal_moves():
            child = state.clone()
            child.place(row, col)
            score = self._minimax(child, depth + 1, alpha, beta)

            if maximizing:
                alpha = max(alpha, score)
                if alpha >= beta:
                    break  # Prune
            else:
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune

        return alpha if maximizing else beta

    def _evaluate(self, state: BoardState, depth: int) -> int:
        """
        Score a finished game.

        Wins score higher the sooner they happen, losses score
        higher the later they happen. A draw is 0.
        """
        if state.winner == Cell.EMPTY:
            return 0

        if state.winner == Cell.from_player(self.player):
            return self.score_bounds - depth
        return depth - self.score_bounds

    def get_move_suggestion(self, state: BoardState) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            state: Current board state.

        Returns:
            A string describing the suggested move.
        """
        if state.is_terminal:
            return "No moves available!"

        row, col = self.get_best_move(state)
        return f"Place {self.player.name} at position ({row}, {col})"


def select_move(state: BoardState, player: Player, config=GameConfig) -> Tuple[int, int]:
    """
    Pick the best move for a player.

    Meant to be called on that player's turn; otherwise the position is
    still valued for `player`, but the opponent places the next marker.

    Args:
        state: Position to search. Left unchanged.
        player: The player to find a move for.
        config: Game settings.

    Returns:
        (row, col) of an empty cell with the best minimax value.

    Raises:
        NoLegalMoves: The game is already over.
    """
    return AIPlayer(player, config).get_best_move(state)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(Player.X)

    # Test 1: AI should block a winning move
    game = BoardState.from_grid(
        [
            ["O", "O", None],
            [None, "X", None],
            [None, None, None],
        ],
        turn=Player.X,
    )

    game.print_board()
    print("\nAI is X. O is about to win with (0,2)!")

    move = ai.get_best_move(game)
    print(f"AI's move: {move}")

    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    game2 = BoardState.from_grid(
        [
            ["X", "X", None],
            [None, "O", None],
            [None, "O", "O"],
        ],
        turn=Player.X,
    )

    game2.print_board()
    print("\nAI is X. Can win with (0,2)!")

    move = ai.get_best_move(game2)
    print(f"AI's move: {move}")

    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("AI correctly takes the win!")

    print("\nAIPlayer test done!")
