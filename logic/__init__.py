"""
Logic module for TicTacToe.
Handles board snapshots, rules, and the time-travel move history.
"""

from .config import GameConfig
from .board import Mark, Snapshot, empty_board, render_board
from .exceptions import OutOfRangeError, CellOutOfRangeError, PositionOutOfRangeError
from .win_checker import WinChecker, winner, winning_line
from .move_validator import MoveValidator, ValidationResult
from .game_state import (
    GameState,
    History,
    Move,
    apply_move,
    jump_to,
    move_list,
    new_history,
    status,
)
