"""
Game configuration for the TicTacToe engine.
All the settings for the board, the AI search, and debugging.
"""


class GameConfig:
    """
    Configuration class for game and search settings.
    Change these values to tune how the engine plays!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    GRID_SIZE = 3

    # Player ids: 0 is O, 1 is X
    # O moves first in a fresh game
    STARTING_PLAYER = 0

    # ==================== AI SETTINGS ====================
    # Which player the computer controls by default (X)
    AI_PLAYER = 1

    # Upper/lower limit of minimax scores.
    # Must be greater than the deepest possible search (GRID_SIZE ** 2)
    SCORE_BOUNDS = 10

    # Take the center straight away on a completely empty board.
    # Only ever applied to the opening move.
    TAKE_CENTER_ON_OPENING = True

    # ==================== DISPLAY SETTINGS ====================
    SYMBOLS = {
        "empty": " ",
        "O": "O",
        "X": "X",
    }

    # ==================== DEBUG SETTINGS ====================
    # Print search statistics after every AI move
    DEBUG_MODE = False
