"""
Test script for TicTacToe engine modules.
Run this to verify all components work before playing.
"""

import sys


def test_game_config():
    """Test game configuration."""
    print("\n=== Testing Game Config ===")
    from engine.config import GameConfig
    config = GameConfig()
    print(f"  Board size: {config.GRID_SIZE}x{config.GRID_SIZE}")
    print(f"  Score bounds: {config.SCORE_BOUNDS}")
    assert config.SCORE_BOUNDS > config.GRID_SIZE ** 2
    print("  ✓ Game config OK")


def test_game_logic():
    """Test game logic components."""
    print("\n=== Testing Game Logic ===")
    from engine.board_state import BoardState
    from engine.cells import Player
    from engine.move_validator import MoveValidator
    from engine.win_checker import WinChecker
    from engine.ai_player import AIPlayer

    # Test board state
    game = BoardState()
    print(f"  Initial player: {game.turn.name}")

    # Test place
    game.place(1, 1)
    print("  Made move at (1,1)")

    # Test validator
    validator = MoveValidator()
    result = validator.validate_move(game, 0, 0)
    print(f"  Validate (0,0): valid={result.is_valid}")
    assert result.is_valid
    result = validator.validate_move(game, 1, 1)
    print(f"  Validate (1,1): valid={result.is_valid}, error={result.error_message}")
    assert not result.is_valid

    # Test win checker
    checker = WinChecker()
    winner = checker.check_winner(game.grid)
    print(f"  Winner check: {winner}")

    # Test AI
    ai = AIPlayer(Player.X)
    move = ai.get_best_move(game)
    print(f"  AI suggests: {move}")
    assert move in game.legal_moves()

    print("  ✓ Game logic OK")


def test_game_controller():
    """Test the console game controller (no input needed)."""
    print("\n=== Testing Game Controller ===")
    from main import TicTacToeGame

    game = TicTacToeGame()
    final = game.self_play()
    print(f"  Self-play result: {game.get_end_game_text()}")
    assert final.is_draw

    print("  ✓ Game controller OK")


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)

    tests = {
        "Game Config": test_game_config,
        "Game Logic": test_game_logic,
        "Game Controller": test_game_controller,
    }

    results = {}
    for name, test in tests.items():
        try:
            test()
            results[name] = True
        except Exception as e:
            print(f"  ✗ {name} FAILED: {e}")
            import traceback
            traceback.print_exc()
            results[name] = False

    print("\n" + "="*60)
    print("   Test Results")
    print("="*60)

    all_passed = True
    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")
        if not passed:
            all_passed = False

    print("="*60)

    if all_passed:
        print("\n🎉 All tests passed! Ready to play TicTacToe.\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
