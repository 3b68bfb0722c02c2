"""
Renderer interface for Reaction Tic-Tac-Toe.

The engine only ever talks to the screen through these commands.
The base class ignores every command, so it doubles as a null
renderer for headless runs.
"""

from typing import Optional, Tuple

from .game_state import Player


class Renderer:
    """
    Commands the turn engine sends to whatever draws the board.
    Subclass and override the ones you need.
    """

    def show_status(self, text: str) -> None:
        """Status line (notices, results)."""

    def show_turn(self, text: str) -> None:
        """Turn banner."""

    def mark_cell(self, index: int, player: Player) -> None:
        """Draw a permanent mark."""

    def set_active(self, index: int, is_active: bool) -> None:
        """Toggle the glowing 'click me' state of a cell."""

    def set_urgent(self, is_urgent: bool) -> None:
        """Toggle the urgency style of the countdown."""

    def set_countdown(self, seconds: int) -> None:
        """Show the seconds left."""

    def set_controls(self, show_start: bool, show_restart: bool) -> None:
        """Show or hide the start and restart buttons."""

    def reset_board_visuals(self) -> None:
        """Clear all marks and highlights."""

    def show_winning_line(self, line: Optional[Tuple[int, int, int]]) -> None:
        """Highlight the winning cells (None clears the highlight)."""
