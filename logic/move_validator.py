"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional
from dataclasses import dataclass

from .board import Snapshot
from .config import GameConfig
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Cell must be on the board (0-8)
    2. Can only place on empty cells
    3. Game must not be over
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_move(self, snapshot: Snapshot, cell_index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            snapshot: Board the move would be played on.
            cell_index: Cell to mark (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if cell is in valid range
        if not 0 <= cell_index < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell_index}. Must be 0-8."
            )

        # Check if game is over
        winner = self.win_checker.check_winner(snapshot)
        if winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over! {winner} won."
            )

        # Check if cell is empty
        if snapshot[cell_index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell_index} is already occupied by {snapshot[cell_index]}"
            )

        return ValidationResult(is_valid=True)

