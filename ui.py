"""
Reaction Tic-Tac-Toe UI
A graphical interface for the reaction game using Tkinter.

Shows:
- The 3x3 board with the glowing cell to hit
- Whose turn it is and a status line
- The reaction countdown (turns red in the last second)
- Start / Restart buttons
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional, Tuple

from engine.config import GameConfig
from engine.game_state import Player
from engine.renderer import Renderer
from engine.scheduler import Scheduler
from engine.turn_engine import TurnEngine


# Colors
BG_COLOR = '#1a1a2e'
CELL_COLOR = '#16213e'
ACTIVE_COLOR = '#ffd700'
WIN_COLOR = '#065f46'
COUNTDOWN_COLOR = '#00d4ff'
URGENT_COLOR = '#ef4444'
MARK_COLORS = {
    Player.X: '#8acaff',
    Player.O: '#ff8a8a',
}


class TkScheduler(Scheduler):
    """Scheduler on top of the Tk event loop (after / after_cancel)."""

    def __init__(self, root: tk.Tk):
        self.root = root

    def schedule(self, delay_ms, callback):
        return self.root.after(int(delay_ms), callback)

    def cancel(self, handle):
        self.root.after_cancel(handle)


class ReactionTicTacToeUI(Renderer):
    """
    Main UI class. Draws what the engine tells it to and forwards clicks.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """Initialize the UI."""
        self.config = config or GameConfig()

        # Create UI
        self._create_ui()

        self.engine = TurnEngine(
            renderer=self,
            scheduler=TkScheduler(self.root),
            config=self.config,
        )
        self.engine.show_welcome()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Reaction Tic-Tac-Toe")
        self.root.configure(bg=BG_COLOR)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=BG_COLOR)
        style.configure('TLabel', background=BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground=COUNTDOWN_COLOR)
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground=ACTIVE_COLOR)

        ttk.Label(main_frame, text="⚡ Reaction Tic-Tac-Toe", style='Title.TLabel').pack(pady=(0, 10))

        self.turn_label = ttk.Label(main_frame, text="")
        self.turn_label.pack()

        # Countdown
        self.countdown_label = tk.Label(
            main_frame,
            text="",
            font=('Segoe UI', 28, 'bold'),
            bg=BG_COLOR,
            fg=COUNTDOWN_COLOR
        )
        self.countdown_label.pack(pady=5)

        # Board
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(9):
            cell = tk.Label(
                self.board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg=CELL_COLOR,
                fg='white',
                relief='ridge',
                borderwidth=2
            )
            cell.grid(row=index // 3, column=index % 3, padx=2, pady=2)
            cell.bind('<Button-1>', lambda event, i=index: self.engine.on_cell_clicked(i))
            self.board_cells.append(cell)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=10)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=5)

        self.start_btn = tk.Button(
            control_frame,
            text="▶ Start Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._start_game
        )

        self.restart_btn = tk.Button(
            control_frame,
            text="🔄 Restart",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._start_game
        )

        tk.Button(
            main_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg=URGENT_COLOR,
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== RENDERER COMMANDS ====================

    def show_status(self, text: str):
        self.status_label.configure(text=text)

    def show_turn(self, text: str):
        self.turn_label.configure(text=text)

    def mark_cell(self, index: int, player: Player):
        self.board_cells[index].configure(text=player.value, fg=MARK_COLORS[player])

    def set_active(self, index: int, is_active: bool):
        self.board_cells[index].configure(bg=ACTIVE_COLOR if is_active else CELL_COLOR)

    def set_urgent(self, is_urgent: bool):
        self.countdown_label.configure(fg=URGENT_COLOR if is_urgent else COUNTDOWN_COLOR)

    def set_countdown(self, seconds: int):
        self.countdown_label.configure(text=str(seconds))

    def set_controls(self, show_start: bool, show_restart: bool):
        for button, visible in ((self.start_btn, show_start), (self.restart_btn, show_restart)):
            if visible:
                button.pack(side=tk.LEFT, padx=5)
            else:
                button.pack_forget()

    def reset_board_visuals(self):
        for cell in self.board_cells:
            cell.configure(text="", bg=CELL_COLOR, fg='white')

    def show_winning_line(self, line: Optional[Tuple[int, int, int]]):
        if line is None:
            return
        for index in line:
            self.board_cells[index].configure(bg=WIN_COLOR)

    # ==================== CONTROLS ====================

    def _start_game(self):
        """Start or restart the game."""
        print("Starting new game...")
        self.engine.on_start_requested()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.engine.end_game()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
