"""
Main entry point for TicTacToe.

Opens the Tkinter UI by default. With --no-ui the game runs in the
console instead:
    0-8        play that cell
    j N        jump to history position N
    h          show the history
    r          start a new game
    q          quit

Run this script to play TicTacToe with time travel!
"""

import logging

from logic.exceptions import OutOfRangeError
from logic.game_state import GameState


HELP_TEXT = (
    "Commands: 0-8 play a cell | j N jump to move N | "
    "h history | r reset | q quit"
)


class TicTacToeConsole:
    """
    Console controller for TicTacToe.

    Game flow:
    1. The board is printed with empty cells numbered 0-8
    2. The player types a command
    3. The game state is replaced by the result of the command
    4. Repeat until the player quits
    """

    def __init__(self):
        self.game_state = GameState.new()
        self.is_running = False

    def start(self):
        """Read commands until the player quits."""
        self.is_running = True
        print(HELP_TEXT)
        self.game_state.print_board()

        while self.is_running:
            try:
                line = input("\n> ")
            except EOFError:
                break
            self.handle_command(line)

    def handle_command(self, line: str) -> bool:
        """
        Run one console command.

        Args:
            line: The text the player typed.

        Returns:
            True if the game state changed.
        """
        parts = line.strip().lower().split()
        if not parts:
            return False

        command, args = parts[0], parts[1:]

        if command in ("q", "quit"):
            self.is_running = False
            return False

        if command in ("h", "history"):
            self._print_history()
            return False

        if command in ("r", "reset"):
            self._reset_game()
            return True

        try:
            if command in ("j", "jump"):
                if len(args) != 1:
                    print("Usage: j N")
                    return False
                new_state = self.game_state.jump_to(int(args[0]))
            else:
                new_state = self.game_state.play(int(command))
        except ValueError:
            print(f"Unknown command: {line.strip()}")
            print(HELP_TEXT)
            return False
        except OutOfRangeError as e:
            print(e)
            return False

        if new_state is self.game_state:
            return False

        self.game_state = new_state
        self.game_state.print_board()
        return True

    def _print_history(self):
        """Print the history navigation list."""
        for position, label in self.game_state.moves():
            marker = "→" if position == self.game_state.position else " "
            print(f" {marker} {position}: {label}")

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.game_state = GameState.new()
        self.game_state.print_board()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with time travel")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every move and jump"
    )

    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI()
        ui.run()
        return

    # Console mode (--no-ui)
    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60 + "\n")

    console = TicTacToeConsole()

    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
