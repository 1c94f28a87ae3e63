"""
Game state management for TicTacToe.
Tracks the history of board snapshots and which one is current,
so players can jump back to any earlier move and play on from there.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, List, Tuple

from .board import (
    Mark,
    Snapshot,
    empty_board,
    index_to_row_col,
    mark_for_position,
    place,
    render_board,
    check_cell_index,
)
from .config import GameConfig
from .exceptions import PositionOutOfRangeError
from .move_validator import MoveValidator
from .win_checker import winner, winning_line

logger = logging.getLogger(__name__)

History = Tuple[Snapshot, ...]

_validator = MoveValidator()


@dataclass(frozen=True)
class Move:
    """
    A move in the game, read back from two consecutive snapshots.
    """
    player: Mark            # Who made the move
    cell_index: int         # Cell (0-8)
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # History position the move produced (1-9)


def new_history() -> History:
    """Get a history holding only the empty board."""
    return (empty_board(),)


def _check_position(history: History, position: int):
    if not 0 <= position < len(history):
        raise PositionOutOfRangeError(position, len(history))


def apply_move(history: History, position: int, cell_index: int) -> Tuple[History, int]:
    """
    Play a cell on the snapshot at `position`.

    The mover's mark comes from the parity of `position`. Any history
    after `position` is dropped before the new snapshot is appended.

    Args:
        history: All snapshots so far.
        position: Index of the current snapshot.
        cell_index: Cell to mark (0-8).

    Returns:
        (new_history, new_position). If the cell is taken or the game
        is already won, the inputs come back unchanged.

    Raises:
        PositionOutOfRangeError: position is not in the history.
        CellOutOfRangeError: cell_index is not 0-8.
    """
    _check_position(history, position)
    check_cell_index(cell_index)

    snapshot = history[position]
    result = _validator.validate_move(snapshot, cell_index)
    if not result.is_valid:
        logger.debug("Ignoring move at cell %d: %s", cell_index, result.error_message)
        return history, position

    mark = mark_for_position(position)
    next_snapshot = place(snapshot, cell_index, mark)

    dropped = len(history) - (position + 1)
    if dropped:
        logger.info("Discarding %d move(s) after position %d", dropped, position)

    next_history = tuple(history[:position + 1]) + (next_snapshot,)
    logger.info("%s played cell %d (move #%d)", mark, cell_index, len(next_history) - 1)
    return next_history, len(next_history) - 1


def jump_to(history: History, target_position: int) -> int:
    """
    Move to another snapshot in the history. The history is not changed.

    Raises:
        PositionOutOfRangeError: target_position is not in the history.
    """
    _check_position(history, target_position)
    logger.debug("Jumping to position %d of %d", target_position, len(history) - 1)
    return target_position


def status(snapshot: Snapshot, position: int) -> str:
    """Get the status line: the winner, or who plays next."""
    mark = winner(snapshot)
    if mark is not None:
        return GameConfig.WINNER_TEMPLATE.format(mark=mark)
    return GameConfig.NEXT_PLAYER_TEMPLATE.format(mark=mark_for_position(position))


def move_label(position: int) -> str:
    """Get the navigation label for a history position."""
    if position > 0:
        return GameConfig.MOVE_LABEL_TEMPLATE.format(number=position)
    return GameConfig.GAME_START_LABEL


def move_list(history: History) -> List[Tuple[int, str]]:
    """Get (position, label) for every snapshot in the history."""
    return [(position, move_label(position)) for position in range(len(history))]


@dataclass(frozen=True)
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - Every board snapshot since the start (history)
    - Which snapshot is being shown and played from (position)

    Whose turn it is and who won are always worked out from these two,
    never stored. Every change returns a new GameState.
    """

    history: History = field(default_factory=new_history)
    position: int = 0

    def __post_init__(self):
        if not self.history or any(self.history[0]):
            raise ValueError("History must start with the empty board")
        object.__setattr__(self, "history", tuple(self.history))
        _check_position(self.history, self.position)

    @classmethod
    def new(cls) -> "GameState":
        return cls()

    @property
    def current_snapshot(self) -> Snapshot:
        return self.history[self.position]

    @property
    def current_player(self) -> Mark:
        return mark_for_position(self.position)

    @property
    def winner(self) -> Optional[Mark]:
        return winner(self.current_snapshot)

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return winning_line(self.current_snapshot)

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None

    def play(self, cell_index: int) -> "GameState":
        """
        Play a cell for the current player.

        Returns:
            The new state, or this same state if the move was ignored.
        """
        history, position = apply_move(self.history, self.position, cell_index)
        if history is self.history:
            return self
        return GameState(history, position)

    def jump_to(self, position: int) -> "GameState":
        """Get the state showing another history position."""
        return GameState(self.history, jump_to(self.history, position))

    def status(self) -> str:
        return status(self.current_snapshot, self.position)

    def moves(self) -> List[Tuple[int, str]]:
        return move_list(self.history)

    def last_move(self) -> Optional[Move]:
        """
        Get the move that produced the current snapshot.

        Returns:
            The Move, or None at the game start.
        """
        if self.position == 0:
            return None

        before = self.history[self.position - 1]
        after = self.current_snapshot
        for cell_index, (old, new) in enumerate(zip(before, after)):
            if old is None and new is not None:
                row, col = index_to_row_col(cell_index)
                return Move(
                    player=new,
                    cell_index=cell_index,
                    row=row,
                    col=col,
                    move_number=self.position
                )
        return None

    def print_board(self):
        """Print the board to console."""
        print()
        print(render_board(self.current_snapshot))
        print(f"\n{self.status()}")

        move = self.last_move()
        if move:
            print(f"Move #{move.move_number}: {move.player} at ({move.row}, {move.col})")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState.new()

    # Simulate a game: X wins down the left column
    for cell in [0, 1, 3, 4, 6]:
        print(f"\n{game.current_player} plays cell {cell}")
        game = game.play(cell)
        game.print_board()

    # Travel back and branch
    game = game.jump_to(0).play(1)
    print(f"\nAfter branching from the start: {len(game.history)} snapshots")
    game.print_board()

    print("\nGame state test done!")
