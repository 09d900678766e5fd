"""
Tests for the TicTacToe game logic.
Covers the board, the win checker, and the click-driven state machine.

Usage:
    python test_game_logic.py    # Run all tests with a summary
    pytest test_game_logic.py
"""

import contextlib
import io
import itertools
import sys

from logic.board import (
    BOARD_SIZE,
    CELL_WIDTH,
    CELL_HEIGHT,
    Cell,
    Status,
    empty_board,
    pixel_to_cell,
)
import logic.game_state as game_state_module
from logic.game_state import GameState, ClickResult
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker, evaluate_outcome


X, O, E = Cell.PLAYER_X, Cell.PLAYER_O, Cell.EMPTY


def click_cell(game: GameState, row: int, col: int) -> ClickResult:
    """Click the center of a cell."""
    x = col * CELL_WIDTH + CELL_WIDTH // 2
    y = row * CELL_HEIGHT + CELL_HEIGHT // 2
    return game.apply_click(x, y)


def play(game: GameState, cells):
    for row, col in cells:
        click_cell(game, row, col)


def state_of(game: GameState):
    return list(game.board), game.current_player, game.status, list(game.moves)


# ==================== BOARD ====================

def test_initial_state():
    game = GameState()
    assert game.board == [E] * (BOARD_SIZE * BOARD_SIZE)
    assert game.current_player == X
    assert game.status == Status.RUNNING
    assert game.moves == []


def test_pixel_to_cell_mapping():
    assert pixel_to_cell(0, 0) == (0, 0)
    assert pixel_to_cell(159, 159) == (0, 0)
    assert pixel_to_cell(160, 0) == (0, 1)
    assert pixel_to_cell(0, 160) == (1, 0)
    assert pixel_to_cell(479, 479) == (2, 2)
    # x is the column, y is the row
    assert pixel_to_cell(400, 10) == (0, 2)


def test_pixel_to_cell_out_of_range():
    assert pixel_to_cell(-1, 10) is None
    assert pixel_to_cell(10, -1) is None
    assert pixel_to_cell(480, 10) is None
    assert pixel_to_cell(10, 480) is None


def test_cell_opposite():
    assert X.opposite() == O
    assert O.opposite() == X
    try:
        E.opposite()
    except ValueError:
        pass
    else:
        raise AssertionError("EMPTY.opposite() should raise")


# ==================== WIN CHECKER ====================

def test_winning_lines():
    lines = WinChecker.WINNING_LINES
    assert len(lines) == 2 * BOARD_SIZE + 2
    assert lines[0] == (0, 1, 2)
    assert lines[BOARD_SIZE] == (0, 3, 6)
    assert (0, 4, 8) in lines
    assert (2, 4, 6) in lines


def test_evaluate_rows_columns_diagonals():
    assert evaluate_outcome([X, X, X,
                             O, O, E,
                             E, E, E]) == Status.PLAYER_X_WON
    assert evaluate_outcome([X, O, X,
                             E, O, X,
                             E, O, E]) == Status.PLAYER_O_WON
    assert evaluate_outcome([X, O, E,
                             O, X, E,
                             E, E, X]) == Status.PLAYER_X_WON
    assert evaluate_outcome([X, X, O,
                             E, O, E,
                             O, E, X]) == Status.PLAYER_O_WON
    assert evaluate_outcome(empty_board()) == Status.RUNNING


def test_evaluate_tie():
    assert evaluate_outcome([X, O, X,
                             X, O, O,
                             O, X, X]) == Status.TIE


def test_full_board_with_win_is_not_tie():
    board = [X, X, X,
             O, O, X,
             X, O, O]
    checker = WinChecker()
    assert not checker.check_tie(board)
    assert checker.evaluate(board) == Status.PLAYER_X_WON


def test_evaluate_is_pure_and_deterministic():
    board = [X, O, E,
             E, X, O,
             E, E, E]
    before = list(board)
    first = evaluate_outcome(board)
    second = evaluate_outcome(board)
    assert first == second == Status.RUNNING
    assert board == before


def test_tie_requires_full_board():
    checker = WinChecker()
    for cells in itertools.product((E, X, O), repeat=BOARD_SIZE * BOARD_SIZE):
        board = list(cells)
        status = checker.evaluate(board)
        if E in board:
            assert status != Status.TIE
        assert checker.evaluate(board) == status


def test_get_winning_line():
    checker = WinChecker()
    assert checker.get_winning_line([O, X, E,
                                     O, X, E,
                                     O, E, X]) == (0, 3, 6)
    assert checker.get_winning_line(empty_board()) is None


# ==================== MOVE VALIDATOR ====================

def test_validator_rejects_occupied_and_out_of_range():
    game = GameState()
    validator = MoveValidator()

    assert validator.validate_move(game, 1, 1).is_valid
    game.make_move(1, 1)

    result = validator.validate_move(game, 1, 1)
    assert not result.is_valid
    assert "occupied" in result.error_message

    result = validator.validate_move(game, 5, 5)
    assert not result.is_valid
    assert "Invalid position" in result.error_message


def test_validator_rejects_moves_after_game_over():
    game = GameState()
    play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    validator = MoveValidator()

    result = validator.validate_move(game, 2, 2)
    assert not result.is_valid
    assert not game.make_move(2, 2)


# ==================== STATE MACHINE ====================

def test_turn_alternation():
    game = GameState()
    assert click_cell(game, 0, 0) == ClickResult.PLACED
    assert game.current_player == O
    assert click_cell(game, 1, 1) == ClickResult.PLACED
    assert game.current_player == X
    assert game.cell_at(0, 0) == X
    assert game.cell_at(1, 1) == O
    assert [m.move_number for m in game.moves] == [0, 1]


def test_scenario_row_win():
    game = GameState()
    play(game, [(0, 0), (1, 0), (0, 1), (1, 1)])
    assert game.status == Status.RUNNING

    click_cell(game, 0, 2)
    assert game.status == Status.PLAYER_X_WON
    # Winner keeps the turn
    assert game.current_player == X


def test_scenario_tie():
    game = GameState()
    play(game, [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
                (1, 2), (2, 1), (2, 0), (2, 2)])
    assert game.board == [X, O, X,
                          X, O, O,
                          O, X, X]
    assert game.status == Status.TIE


def test_scenario_diagonal_win():
    game = GameState()
    play(game, [(0, 0), (0, 1), (1, 1), (0, 2), (2, 2)])
    assert game.status == Status.PLAYER_X_WON
    assert game.snapshot().winning_line == (0, 4, 8)


def test_scenario_occupied_click_is_noop():
    game = GameState()
    play(game, [(0, 0), (1, 1), (2, 2)])
    before = state_of(game)

    assert click_cell(game, 1, 1) == ClickResult.IGNORED
    assert click_cell(game, 0, 0) == ClickResult.IGNORED
    assert state_of(game) == before


def test_off_board_click_is_noop():
    game = GameState()
    click_cell(game, 0, 0)
    before = state_of(game)

    assert game.apply_click(-20, 50) == ClickResult.IGNORED
    assert game.apply_click(50, 1000) == ClickResult.IGNORED
    assert state_of(game) == before


def test_scenario_reset_after_o_win():
    game = GameState()
    play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (2, 2), (1, 2)])
    assert game.status == Status.PLAYER_O_WON

    # Coordinates do not matter, even off the board
    assert game.apply_click(-100, 9999) == ClickResult.RESET
    assert game.board == empty_board()
    assert game.current_player == X
    assert game.status == Status.RUNNING
    assert game.moves == []


def test_reset_click_places_nothing():
    game = GameState()
    play(game, [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
                (1, 2), (2, 1), (2, 0), (2, 2)])
    assert game.status == Status.TIE

    assert click_cell(game, 1, 1) == ClickResult.RESET
    assert game.board == empty_board()

    # Next click plays normally
    assert click_cell(game, 1, 1) == ClickResult.PLACED
    assert game.cell_at(1, 1) == X


def test_snapshot_is_read_only_copy():
    game = GameState()
    click_cell(game, 0, 0)
    snapshot = game.snapshot()

    click_cell(game, 1, 1)
    assert snapshot.cell_at(1, 1) == E
    assert snapshot.current_player == O
    assert snapshot.winning_line is None

    try:
        snapshot.status = Status.TIE
    except AttributeError:
        pass
    else:
        raise AssertionError("snapshot should be frozen")


def test_winning_line_found_once_per_move():
    game = GameState()
    play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert game.winning_line == (0, 1, 2)

    # Count line scans while the finished game is redrawn
    checker = game_state_module._win_checker
    original = checker.get_winning_line
    calls = []

    def counting(board):
        calls.append(board)
        return original(board)

    checker.get_winning_line = counting
    try:
        for _ in range(60):
            assert game.snapshot().winning_line == (0, 1, 2)
    finally:
        del checker.get_winning_line

    assert calls == []


def test_winning_line_cleared_on_reset():
    game = GameState()
    play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (2, 2), (1, 2)])
    assert game.winning_line == (3, 4, 5)

    game.apply_click(0, 0)
    assert game.winning_line is None
    assert game.snapshot().winning_line is None


def test_tie_has_no_winning_line():
    game = GameState()
    play(game, [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
                (1, 2), (2, 1), (2, 0), (2, 2)])
    assert game.status == Status.TIE
    assert game.winning_line is None


def test_print_board():
    game = GameState()
    play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])

    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        game.print_board()

    assert " X | X | X " in out.getvalue()
    assert "X WINS!" in out.getvalue()


def run_all_tests():
    """Run all tests in this module."""
    print("="*60)
    print("   TicTacToe - Game Logic Tests")
    print("="*60)

    tests = [(name, func) for name, func in sorted(globals().items())
             if name.startswith("test_") and callable(func)]

    failed = 0
    for name, func in tests:
        try:
            func()
            print(f"  ✓ {name}")
        except AssertionError as e:
            failed += 1
            print(f"  ✗ {name}: {e}")

    print("="*60)
    print(f"   {len(tests) - failed}/{len(tests)} passed")
    print("="*60)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(run_all_tests())
