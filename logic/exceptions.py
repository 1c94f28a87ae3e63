"""
Errors raised by the game logic.
Only invalid arguments are errors; illegal moves are ignored silently.
"""


class OutOfRangeError(IndexError):
    """An index fell outside the board or the history."""


class CellOutOfRangeError(OutOfRangeError):
    """Cell index is not in 0-8."""

    def __init__(self, cell_index: int):
        self.cell_index = cell_index
        super().__init__(f"Invalid cell {cell_index}. Must be 0-8.")


class PositionOutOfRangeError(OutOfRangeError):
    """History position is not in [0, length)."""

    def __init__(self, position: int, length: int):
        self.position = position
        self.length = length
        super().__init__(
            f"Invalid history position {position}. Must be 0-{length - 1}."
        )
