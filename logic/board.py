"""
Board snapshots for TicTacToe.
A snapshot is an immutable tuple of 9 cells, row by row.
"""

from enum import Enum
from typing import Optional, Tuple

from .config import GameConfig
from .exceptions import CellOutOfRangeError


class Mark(Enum):
    """The two marks a player can put on the board."""
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value


# None means empty, otherwise the Mark in that cell
Cell = Optional[Mark]
Snapshot = Tuple[Cell, ...]


def empty_board() -> Snapshot:
    """Get a board with every cell empty."""
    return (None,) * GameConfig.CELL_COUNT


def mark_for_position(position: int) -> Mark:
    """
    Get the mark that moves next from a history position.

    X moves on even positions, O on odd ones.
    """
    return Mark.X if position % 2 == 0 else Mark.O


def check_cell_index(cell_index: int):
    """Raise CellOutOfRangeError unless cell_index is 0-8."""
    if not 0 <= cell_index < GameConfig.CELL_COUNT:
        raise CellOutOfRangeError(cell_index)


def place(snapshot: Snapshot, cell_index: int, mark: Mark) -> Snapshot:
    """
    Put a mark on a cell.

    Args:
        snapshot: Board to start from. It is not modified.
        cell_index: Cell to mark (0-8).
        mark: The mark to place.

    Returns:
        A new snapshot with the cell set.
    """
    check_cell_index(cell_index)
    cells = list(snapshot)
    cells[cell_index] = mark
    return tuple(cells)


def index_to_row_col(cell_index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to (row, col)."""
    check_cell_index(cell_index)
    return divmod(cell_index, GameConfig.BOARD_SIZE)


def render_board(snapshot: Snapshot) -> str:
    """
    Render a snapshot as a text grid.

    Empty cells show their index so a console player knows what to type.
    """
    size = GameConfig.BOARD_SIZE
    lines = ["┌───┬───┬───┐"]
    for row in range(size):
        row_str = "│"
        for col in range(size):
            index = row * size + col
            cell = snapshot[index]
            symbol = cell.value if cell is not None else str(index)
            row_str += f" {symbol} │"
        lines.append(row_str)
        if row < size - 1:
            lines.append("├───┼───┼───┤")
    lines.append("└───┴───┴───┘")
    return "\n".join(lines)
