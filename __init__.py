"""
TicTacToe with Time Travel
==========================
A two-player TicTacToe game that remembers every board it has shown.
Players can jump back to any earlier move and play on from there,
which starts a new branch and drops the moves that came after.

X always moves first; whose turn it is comes from the move number.
"""

__version__ = "1.0.0"
