"""
Tests for the game controller in main.py.
"""

import random
import re

import pytest

from engine.board_state import BoardState
from engine.cells import Cell, Player
from engine.config import GameConfig
from main import TicTacToeGame


class XStartsConfig(GameConfig):
    STARTING_PLAYER = 1
    AI_PLAYER = 0


class DebugConfig(GameConfig):
    DEBUG_MODE = True


def test_human_move_gets_ai_reply():
    game = TicTacToeGame()

    assert game.add_marker(0, 0)

    assert game.state.grid[0][0] == Cell.O
    assert game.state.count_markers() == 2
    assert game.state.turn == Player.O


def test_occupied_cell_is_rejected():
    game = TicTacToeGame()
    game.add_marker(0, 0)
    before = game.state.clone()

    assert not game.add_marker(0, 0)
    assert game.state == before


def test_move_rejected_on_ai_turn():
    game = TicTacToeGame(ai_player=Player.X)
    game.state = BoardState.from_grid(
        [
            ["O", None, None],
            [None, None, None],
            [None, None, None],
        ],
        turn=Player.X,
    )

    assert not game.add_marker(1, 1)
    assert game.state.grid[1][1] == Cell.EMPTY


def test_new_game_with_ai_first():
    game = TicTacToeGame()
    game.new_game(ai_first=True)

    assert game.ai_player == Player.O
    assert game.human_player == Player.X
    assert game.state.grid[1][1] == Cell.O
    assert game.state.moves_remaining == 8
    assert game.state.turn == Player.X


def test_new_game_with_human_first():
    game = TicTacToeGame()
    game.add_marker(0, 0)
    game.new_game(ai_first=False)

    assert game.ai_player == Player.X
    assert game.state == BoardState()


def test_end_game_text_and_winning_line():
    game = TicTacToeGame()
    game.state = BoardState.from_grid(
        [
            ["X", "X", "X"],
            ["O", "O", None],
            ["O", None, None],
        ],
        turn=Player.O,
    )

    assert game.is_game_over
    assert game.winner == Cell.X
    assert game.get_end_game_text() == "X Wins!"
    assert game.is_cell_in_winning_line(0, 1)
    assert not game.is_cell_in_winning_line(1, 1)
    assert not game.add_marker(2, 2)


def test_draw_text():
    game = TicTacToeGame()
    game.state = BoardState.from_grid(
        [
            ["X", "O", "X"],
            ["X", "O", "O"],
            ["O", "X", "X"],
        ],
        turn=Player.O,
    )

    assert game.get_end_game_text() == "Draw"
    assert not game.is_cell_in_winning_line(0, 0)


def test_self_play_is_a_draw():
    game = TicTacToeGame()
    final = game.self_play()

    assert final.is_draw


@pytest.mark.parametrize("seed", range(5))
def test_random_human_never_beats_ai(seed):
    rng = random.Random(seed)
    game = TicTacToeGame()
    game.new_game(ai_first=seed % 2 == 1)

    while not game.is_game_over:
        assert game.add_marker(*rng.choice(game.state.legal_moves()))

    assert game.winner != Cell.from_player(game.human_player)


def test_x_starts_with_ai_first():
    game = TicTacToeGame(config=XStartsConfig)
    game.new_game(ai_first=True)

    assert game.ai_player == Player.X
    assert game.state.grid[1][1] == Cell.X
    assert game.state.turn == Player.O


def test_x_starts_with_human_first():
    game = TicTacToeGame(config=XStartsConfig)
    game.new_game(ai_first=False)

    assert game.ai_player == Player.O
    assert game.add_marker(0, 0)
    assert game.state.grid[0][0] == Cell.X
    assert game.state.count_markers() == 2
    assert game.state.turn == Player.X


def test_x_starts_fresh_game_uses_config_sides():
    game = TicTacToeGame(config=XStartsConfig)

    assert game.ai_player == Player.O
    assert game.state.turn == Player.X
    assert game.state.config is XStartsConfig
    assert game.add_marker(2, 2)


@pytest.mark.parametrize("ai_first", [False, True])
def test_x_starts_game_plays_to_the_end(ai_first):
    rng = random.Random(7)
    game = TicTacToeGame(config=XStartsConfig)
    game.new_game(ai_first=ai_first)

    while not game.is_game_over:
        assert game.add_marker(*rng.choice(game.state.legal_moves()))

    assert game.winner != Cell.from_player(game.human_player)


def test_debug_mode_prints_search_stats(capsys):
    game = TicTacToeGame(config=DebugConfig)
    game.add_marker(0, 0)

    out = capsys.readouterr().out
    assert re.search(r"AI evaluated \d+ positions\. Best move: \(\d, \d\)", out)


def test_debug_mode_on_config_instance(capsys):
    config = GameConfig()
    config.DEBUG_MODE = True
    game = TicTacToeGame(config=config)
    game.add_marker(1, 1)

    assert "AI evaluated" in capsys.readouterr().out


def test_search_stats_hidden_without_debug(capsys):
    game = TicTacToeGame()
    game.add_marker(0, 0)

    assert "AI evaluated" not in capsys.readouterr().out
