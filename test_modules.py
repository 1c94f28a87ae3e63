"""
Tests for the TicTacToe logic modules.
Run this to verify the game rules and the time-travel history.

Usage:
    python -m pytest test_modules.py
    python test_modules.py
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic.board import Mark, empty_board, place, index_to_row_col, render_board
from logic.exceptions import CellOutOfRangeError, OutOfRangeError, PositionOutOfRangeError
from logic.game_state import (
    GameState,
    apply_move,
    jump_to,
    move_list,
    new_history,
    status,
)
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker, winner, winning_line

X, O = Mark.X, Mark.O


def play_moves(cells, history=None, position=0):
    """Apply a sequence of cell moves and return (history, position)."""
    if history is None:
        history = new_history()
    for cell in cells:
        history, position = apply_move(history, position, cell)
    return history, position


# ==================== BOARD ====================

def test_empty_board():
    board = empty_board()
    assert len(board) == 9
    assert all(cell is None for cell in board)


def test_place_returns_new_snapshot():
    board = empty_board()
    marked = place(board, 4, X)
    assert marked[4] == X
    assert board[4] is None


def test_row_col_conversion():
    assert index_to_row_col(0) == (0, 0)
    assert index_to_row_col(5) == (1, 2)
    assert index_to_row_col(8) == (2, 2)

    with pytest.raises(CellOutOfRangeError):
        index_to_row_col(9)


def test_render_board_numbers_empty_cells():
    text = render_board(place(empty_board(), 0, X))
    assert "│ X │ 1 │ 2 │" in text
    assert "│ 6 │ 7 │ 8 │" in text


# ==================== WIN CHECKER ====================

def test_no_winner_on_empty_board():
    assert winner(empty_board()) is None


def test_no_winner_without_three_in_a_row():
    board = (X, O, X,
             X, O, O,
             O, X, X)
    assert winner(board) is None
    assert winning_line(board) is None


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_every_line_wins(line):
    board = empty_board()
    for cell in line:
        board = place(board, cell, O)
    assert winner(board) == O
    assert winning_line(board) == line


def test_first_matching_line_is_returned():
    # Row 0 and column 0 both complete; rows are checked first
    board = (X, X, X,
             X, O, O,
             X, O, O)
    assert winning_line(board) == (0, 1, 2)


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_move(empty_board(), 4)
    assert result.is_valid
    assert result.error_message is None


def test_validator_rejects_occupied_cell():
    result = MoveValidator().validate_move(place(empty_board(), 4, X), 4)
    assert not result.is_valid
    assert "occupied" in result.error_message


def test_validator_rejects_move_after_win():
    board = (X, X, X,
             O, O, None,
             None, None, None)
    result = MoveValidator().validate_move(board, 5)
    assert not result.is_valid
    assert "over" in result.error_message


def test_validator_rejects_out_of_range():
    assert not MoveValidator().validate_move(empty_board(), 9).is_valid
    assert not MoveValidator().validate_move(empty_board(), -1).is_valid


# ==================== APPLY MOVE ====================

def test_new_history_starts_empty():
    history = new_history()
    assert len(history) == 1
    assert history[0] == empty_board()


def test_marks_alternate_by_position():
    history, position = play_moves([4, 0, 8])
    assert position == 3
    assert history[1][4] == X
    assert history[2][0] == O
    assert history[3][8] == X


def test_move_changes_exactly_one_cell():
    history, position = play_moves([4, 0])
    new_history_, new_position = apply_move(history, position, 7)

    before, after = new_history_[-2], new_history_[-1]
    changed = [i for i in range(9) if before[i] != after[i]]
    assert changed == [7]
    assert before[7] is None
    assert after[7] == X
    assert new_position == len(new_history_) - 1


def test_occupied_cell_is_ignored_at_any_position():
    history, position = play_moves([4, 0, 8])
    for pos in range(1, len(history)):
        taken = next(i for i, cell in enumerate(history[pos]) if cell is not None)
        result = apply_move(history, pos, taken)
        assert result[0] is history
        assert result[1] == pos


def test_move_after_win_is_ignored():
    history, position = play_moves([0, 1, 3, 4, 6])
    assert winner(history[position]) == X

    for cell in range(9):
        new_history_, new_position = apply_move(history, position, cell)
        assert new_history_ is history
        assert new_position == position


def test_apply_move_rejects_bad_arguments():
    history = new_history()
    with pytest.raises(CellOutOfRangeError):
        apply_move(history, 0, 9)
    with pytest.raises(PositionOutOfRangeError):
        apply_move(history, 1, 0)


def test_list_history_is_accepted():
    history = [empty_board()]
    new_history_, new_position = apply_move(history, 0, 4)
    assert isinstance(new_history_, tuple)
    assert new_history_[1][4] == X
    assert new_position == 1
    assert history == [empty_board()]

    taken = [empty_board(), place(empty_board(), 4, X)]
    assert apply_move(taken, 1, 4)[0] is taken


def test_history_is_not_mutated():
    history, position = play_moves([4, 0])
    copy = tuple(history)
    apply_move(history, 1, 8)
    assert history == copy


# ==================== SCENARIOS ====================

def test_column_win_scenario():
    history, position = play_moves([0, 1, 3, 4, 6])
    assert winner(history[position]) == X
    assert winning_line(history[position]) == (0, 3, 6)


def test_alternating_scenario_has_no_winner_yet():
    # 4X 0O 8X 2O 6X: O holds cell 2, so 2-4-6 is not complete
    history, position = play_moves([4, 0, 8, 2, 6])
    assert history[position][2] == O
    assert winner(history[position]) is None


def test_diagonal_win_scenario():
    history, position = play_moves([4, 0, 2, 1, 6])
    assert winner(history[position]) == X
    assert winning_line(history[position]) == (2, 4, 6)


def test_jump_back_then_play_discards_branch():
    history, position = play_moves([0, 1, 3, 4, 6])
    assert len(history) == 6

    position = jump_to(history, 0)
    history, position = apply_move(history, position, 1)
    assert len(history) == 2
    assert position == 1
    assert history[1][1] == X
    assert history[0] == empty_board()


def test_jump_then_play_truncates_to_position():
    history, _ = play_moves([0, 1, 3, 4])
    position = jump_to(history, 2)
    new_history_, new_position = apply_move(history, position, 8)
    assert len(new_history_) == position + 2
    assert new_history_[:position + 1] == history[:position + 1]
    assert new_history_[-1][8] == X
    assert new_position == 3
    assert len(new_history_) >= 1
    assert new_history_[0] == empty_board()


# ==================== JUMP ====================

def test_jump_to_returns_target():
    history, _ = play_moves([0, 1, 2])
    for target in range(len(history)):
        assert jump_to(history, target) == target


def test_jump_to_out_of_range():
    history, _ = play_moves([0, 1])
    with pytest.raises(PositionOutOfRangeError):
        jump_to(history, 3)
    with pytest.raises(PositionOutOfRangeError):
        jump_to(history, -1)
    with pytest.raises(OutOfRangeError):
        jump_to(history, 10)


def test_jump_leaves_won_branch():
    history, position = play_moves([0, 1, 3, 4, 6])
    position = jump_to(history, 4)
    history, position = apply_move(history, position, 2)
    assert winner(history[position]) is None
    assert len(history) == 6


# ==================== STATUS AND LABELS ====================

def test_status_next_player():
    assert status(empty_board(), 0) == "Next Player: X"
    assert status(place(empty_board(), 0, X), 1) == "Next Player: O"


def test_status_winner():
    history, position = play_moves([0, 1, 3, 4, 6])
    assert status(history[position], position) == "Winner: X"


def test_move_list_labels():
    history, _ = play_moves([0, 1])
    assert move_list(history) == [
        (0, "Go to game start"),
        (1, "Go to move #1"),
        (2, "Go to move #2"),
    ]


# ==================== GAME STATE ====================

def test_game_state_play_and_jump():
    game = GameState.new()
    assert game.current_player == X

    game = game.play(4)
    assert game.position == 1
    assert game.current_player == O
    assert game.current_snapshot[4] == X

    same = game.play(4)
    assert same is game

    earlier = game.jump_to(0)
    assert earlier.history is game.history
    assert earlier.status() == "Next Player: X"


def test_game_state_winner_and_game_over():
    game = GameState.new()
    for cell in [0, 1, 3, 4, 6]:
        game = game.play(cell)
    assert game.is_game_over
    assert game.winner == X
    assert game.winning_line == (0, 3, 6)
    assert game.play(8) is game


def test_game_state_last_move():
    game = GameState.new()
    assert game.last_move() is None

    game = game.play(5).play(1)
    move = game.last_move()
    assert move.player == O
    assert move.cell_index == 1
    assert (move.row, move.col) == (0, 1)
    assert move.move_number == 2


def test_game_state_rejects_bad_history():
    with pytest.raises(ValueError):
        GameState(history=(place(empty_board(), 0, X),))
    with pytest.raises(PositionOutOfRangeError):
        GameState(history=new_history(), position=1)


def test_game_state_from_list_history():
    game = GameState(history=[empty_board()])
    assert isinstance(game.history, tuple)

    game = game.play(4)
    assert game.position == 1
    assert game.current_snapshot[4] == X
    assert game.history[0] == empty_board()


def test_game_state_moves():
    game = GameState.new().play(0)
    assert game.moves() == [(0, "Go to game start"), (1, "Go to move #1")]


def test_print_board(capsys):
    GameState.new().play(4).print_board()
    out = capsys.readouterr().out
    assert "Next Player: O" in out
    assert "Move #1: X at (1, 1)" in out


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
