"""
TicTacToe engine.
Handles board state, rules, and the minimax AI opponent.
"""

from .cells import Cell, Player
from .config import GameConfig
from .errors import TicTacToeError, InvalidMove, NoLegalMoves
from .win_checker import WinChecker, WINNING_LINES, build_winning_lines
from .move_validator import MoveValidator, ValidationResult
from .board_state import BoardState
from .ai_player import AIPlayer, select_move

__version__ = "1.0.0"
