"""
Main orchestration script for TicTacToe.

This script ties together:
- Board state (grid, turns, win detection)
- AI (minimax with alpha-beta pruning)
- A console game loop

Run this script to play TicTacToe against the computer!
"""

from typing import Optional, Tuple

from engine.ai_player import AIPlayer
from engine.board_state import BoardState
from engine.cells import Cell, Player
from engine.config import GameConfig
from engine.errors import InvalidMove


class TicTacToeGame:
    """
    Main controller for a game against the computer.

    Game flow:
    1. Human places a marker
    2. Move is rejected if the cell is taken or it's not the human's turn
    3. AI calculates the best response and places it
    4. Repeat until someone wins or it's a draw
    """

    def __init__(self, ai_player: Optional[Player] = None, config=GameConfig):
        """
        Initialize the game.

        Args:
            ai_player: Which player the computer controls
                (default: config.AI_PLAYER).
            config: Game settings.
        """
        if ai_player is None:
            ai_player = Player(config.AI_PLAYER)

        self.config = config
        self.ai_player = ai_player
        self.ai = AIPlayer(ai_player, config)
        self.state = BoardState(config=config)

    @property
    def human_player(self) -> Player:
        return self.ai_player.opposite()

    @property
    def winner(self) -> Cell:
        return self.state.winner

    @property
    def is_game_over(self) -> bool:
        return self.state.is_terminal

    def new_game(self, ai_first: bool = False):
        """
        Reset the board for a new round.

        Args:
            ai_first: If True the computer takes the starting side
                and moves straight away.
        """
        self.state.reset()
        starting = Player(self.config.STARTING_PLAYER)

        self.ai_player = starting if ai_first else starting.opposite()
        self.ai.player = self.ai_player

        if ai_first:
            self.trigger_ai_turn()

    def add_marker(self, row: int, col: int) -> bool:
        """
        Place a human marker, then let the AI reply.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the move was accepted, False otherwise.
        """
        if self.state.turn == self.ai_player:
            print("It's not your turn!")
            return False

        try:
            self.state.place(row, col)
        except InvalidMove as e:
            print(e.reason)
            return False

        if not self.state.is_terminal and self.state.turn == self.ai_player:
            self.trigger_ai_turn()

        return True

    def trigger_ai_turn(self) -> Tuple[int, int]:
        """
        Let the AI pick a move and apply it to the live board.

        Returns:
            (row, col) the AI played.
        """
        move = self.ai.get_best_move(self.state)
        self.state.place(*move)

        print(f">>> AI ({self.ai_player.name}) plays {move}")
        return move

    def get_end_game_text(self) -> str:
        """Text describing how the game ended."""
        if self.winner == Cell.EMPTY:
            return "Draw"
        return f"{self.winner.value} Wins!"

    def is_cell_in_winning_line(self, row: int, col: int) -> bool:
        """Check if a cell is part of the winning line (for highlighting)."""
        if self.winner == Cell.EMPTY or self.state.winning_line is None:
            return False
        return (row, col) in self.state.winning_line

    def self_play(self) -> BoardState:
        """
        Let the AI play both sides from an empty board.

        Returns:
            The final state.
        """
        self.state.reset()
        players = {player: AIPlayer(player, self.config) for player in Player}

        while not self.state.is_terminal:
            mover = self.state.turn
            move = players[mover].get_best_move(self.state)
            self.state.place(*move)
            print(f">>> {mover.name} plays {move}")

        return self.state

    def play_console(self):
        """Interactive game loop on the console."""
        print("\nEnter moves as 'row col' (e.g. '1 1').")
        print("Press 'q' to quit, 'r' to reset\n")

        while True:
            self.state.print_board()

            if self.is_game_over:
                self._show_game_result()
                answer = input("\nPlay again? [y/N]: ").strip().lower()
                if answer != "y":
                    return
                self.new_game(ai_first=self.ai_player == Player(self.config.STARTING_PLAYER))
                continue

            if self.state.turn == self.ai_player:
                self.trigger_ai_turn()
                continue

            text = input(f"\nYour move ({self.human_player.name}): ").strip().lower()
            if text == "q":
                print("\nGame quit by user.")
                return
            if text == "r":
                print("\nResetting game...")
                self.new_game(ai_first=self.ai_player == Player(self.config.STARTING_PLAYER))
                continue

            try:
                row, col = (int(part) for part in text.replace(",", " ").split())
            except ValueError:
                print("Please enter two numbers: row col")
                continue

            self.add_marker(row, col)

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        if self.winner == Cell.EMPTY:
            print("\nIt's a draw! Good game!")
        elif self.winner.player == self.human_player:
            print("\nCongratulations! You won!")
        else:
            print("\nAI wins! Better luck next time!")

        print("\n" + "="*60)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe vs. minimax AI")
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first"
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Watch the AI play against itself"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print search statistics"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.DEBUG_MODE = args.debug

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60 + "\n")

    game = TicTacToeGame(config=config)

    if args.self_play:
        final = game.self_play()
        final.print_board()
        print(f"\nResult: {game.get_end_game_text()}")
        return

    try:
        game.new_game(ai_first=args.ai_first)
        game.play_console()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
