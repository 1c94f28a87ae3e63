"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to play it)
- Game status (winner or next player)
- Move history (click an entry to travel back to it)
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import List

from logic.config import GameConfig
from logic.game_state import GameState

logger = logging.getLogger(__name__)


class UIConfig:
    """
    Colors and fonts for the UI.
    """

    # ==================== WINDOW SETTINGS ====================
    TITLE = "TicTacToe"
    GEOMETRY = "640x420"
    MIN_WIDTH = 560
    MIN_HEIGHT = 380

    # ==================== COLORS ====================
    BACKGROUND = '#1a1a2e'
    CELL_BACKGROUND = '#16213e'
    WIN_BACKGROUND = '#065f46'
    TITLE_COLOR = '#00d4ff'
    STATUS_COLOR = '#ffd700'
    MARK_COLORS = {"X": '#f87171', "O": '#10b981'}
    CURRENT_MOVE_BACKGROUND = '#6366f1'
    MOVE_BACKGROUND = '#2d3748'

    # ==================== FONTS ====================
    FONT = 'Segoe UI'
    CELL_FONT = (FONT, 24, 'bold')
    MOVE_FONT = (FONT, 10)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Holds one GameState and swaps it for the new one on every click.
    """

    def __init__(self):
        """Initialize the UI."""
        self.game_state = GameState.new()
        self.move_buttons: List[tk.Button] = []

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(UIConfig.TITLE)
        self.root.configure(bg=UIConfig.BACKGROUND)

        self.root.geometry(UIConfig.GEOMETRY)
        self.root.minsize(UIConfig.MIN_WIDTH, UIConfig.MIN_HEIGHT)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=UIConfig.BACKGROUND)
        style.configure('TLabel', background=UIConfig.BACKGROUND, foreground='white', font=(UIConfig.FONT, 11))
        style.configure('Title.TLabel', font=(UIConfig.FONT, 16, 'bold'), foreground=UIConfig.TITLE_COLOR)
        style.configure('Status.TLabel', font=(UIConfig.FONT, 12), foreground=UIConfig.STATUS_COLOR)

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 5))

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        size = GameConfig.BOARD_SIZE
        for cell_index in range(GameConfig.CELL_COUNT):
            row, col = divmod(cell_index, size)
            cell = tk.Button(
                board_frame,
                text="",
                font=UIConfig.CELL_FONT,
                width=3,
                height=1,
                bg=UIConfig.CELL_BACKGROUND,
                fg='white',
                activebackground=UIConfig.MOVE_BACKGROUND,
                relief='ridge',
                borderwidth=2,
                command=lambda i=cell_index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Right panel - history
        right_frame = ttk.Frame(main_frame, width=240)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="🕑 History", style='Title.TLabel').pack(pady=(0, 10))

        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.BOTH, expand=True)

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        control_frame = ttk.Frame(right_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="🔄 Reset",
            font=(UIConfig.FONT, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=9,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=(UIConfig.FONT, 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=9,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, cell_index: int):
        """Play a cell for whoever's turn it is."""
        new_state = self.game_state.play(cell_index)
        if new_state is self.game_state:
            return
        self.game_state = new_state
        self._refresh()

    def _on_jump(self, position: int):
        """Travel to a history position."""
        self.game_state = self.game_state.jump_to(position)
        self._refresh()

    def _refresh(self):
        """Redraw the board, status, and history from the game state."""
        self._update_board_display()
        self.status_label.configure(text=self.game_state.status())
        self._update_history()

    def _update_board_display(self):
        """Update the board grid display."""
        snapshot = self.game_state.current_snapshot
        line = self.game_state.winning_line or ()

        for cell_index, cell in enumerate(self.board_cells):
            mark = snapshot[cell_index]
            bg_color = UIConfig.WIN_BACKGROUND if cell_index in line else UIConfig.CELL_BACKGROUND

            if mark is None:
                cell.configure(text="", bg=bg_color)
            else:
                cell.configure(
                    text=mark.value,
                    bg=bg_color,
                    fg=UIConfig.MARK_COLORS[mark.value]
                )

    def _update_history(self):
        """Rebuild the list of history buttons."""
        for button in self.move_buttons:
            button.destroy()
        self.move_buttons = []

        for position, label in self.game_state.moves():
            current = position == self.game_state.position
            button = tk.Button(
                self.history_frame,
                text=label,
                font=(UIConfig.FONT, 10, 'bold') if current else UIConfig.MOVE_FONT,
                bg=UIConfig.CURRENT_MOVE_BACKGROUND if current else UIConfig.MOVE_BACKGROUND,
                fg='white',
                anchor='w',
                command=lambda p=position: self._on_jump(p)
            )
            button.pack(fill=tk.X, pady=1)
            self.move_buttons.append(button)

    def _reset_game(self):
        """Reset the game."""
        logger.info("Resetting game")
        self.game_state = GameState.new()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
