"""
Win checker for TicTacToe.
Checks if a mark has three in a row on a board snapshot.
"""

from typing import Optional, Tuple

from .board import Mark, Snapshot


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as cell index triples).
    # Checked in this order, so the first match is always the same one.
    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_winner(self, snapshot: Snapshot) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            snapshot: The board to check.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(snapshot)
        if line is None:
            return None
        return snapshot[line[0]]

    def get_winning_line(self, snapshot: Snapshot) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            snapshot: The board to check.

        Returns:
            The first winning line as a cell index triple, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(snapshot, line):
                return line
        return None

    def _check_line(self, snapshot: Snapshot, line: Tuple[int, int, int]) -> bool:
        """True if all 3 cells of the line hold the same mark."""
        a, b, c = line
        return snapshot[a] is not None and snapshot[a] == snapshot[b] == snapshot[c]


_checker = WinChecker()


def winner(snapshot: Snapshot) -> Optional[Mark]:
    """Get the winning Mark of a snapshot, or None."""
    return _checker.check_winner(snapshot)


def winning_line(snapshot: Snapshot) -> Optional[Tuple[int, int, int]]:
    """Get the cells of the winning line of a snapshot, or None."""
    return _checker.get_winning_line(snapshot)


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    X, O = Mark.X, Mark.O
    checker = WinChecker()

    # Test 1: Horizontal win
    board = (X, X, X,
             O, O, None,
             None, None, None)
    print(f"Test 1 (horizontal): winner = {checker.check_winner(board)}")
    assert checker.check_winner(board) == X

    # Test 2: Vertical win
    board = (O, X, None,
             O, X, None,
             O, None, X)
    print(f"Test 2 (vertical): winner = {checker.check_winner(board)}")
    assert checker.check_winner(board) == O

    # Test 3: Anti-diagonal win
    board = (O, O, X,
             None, X, None,
             X, None, None)
    print(f"Test 3 (diagonal): line = {checker.get_winning_line(board)}")
    assert checker.get_winning_line(board) == (2, 4, 6)

    # Test 4: No winner
    board = (X, O, None,
             None, O, None,
             None, None, X)
    print(f"Test 4 (no winner): winner = {checker.check_winner(board)}")
    assert checker.check_winner(board) is None

    print("\nWinChecker test done!")
