"""
Click validator for Reaction Tic-Tac-Toe.
Decides what a click on the board means for the current turn.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .game_state import GameState, Phase, BOARD_CELLS


class ClickOutcome(Enum):
    """How a click was classified."""
    ACCEPTED = "accepted"          # Active, empty cell: the move counts
    IGNORED = "ignored"            # Not waiting for input right now
    OUT_OF_RANGE = "out_of_range"  # Not a board cell at all
    OCCUPIED = "occupied"          # Cell already holds a mark
    WRONG_CELL = "wrong_cell"      # Empty, but not the glowing one


@dataclass
class ValidationResult:
    """Result of click validation."""
    is_valid: bool
    outcome: ClickOutcome
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates clicks.

    Rules:
    1. Clicks only count while the engine is awaiting input
    2. The clicked cell must be the active cell
    3. The active cell must still be empty
    """

    def validate_click(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a click.

        Args:
            game_state: Current game state.
            index: Clicked cell (0-8).

        Returns:
            ValidationResult with is_valid, outcome and error_message.
        """
        if game_state.phase != Phase.AWAITING_INPUT:
            return ValidationResult(
                is_valid=False,
                outcome=ClickOutcome.IGNORED,
                error_message=f"Not accepting clicks during {game_state.phase.value}",
            )

        if not 0 <= index < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                outcome=ClickOutcome.OUT_OF_RANGE,
                error_message=f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}.",
            )

        if game_state.board[index] is not None:
            return ValidationResult(
                is_valid=False,
                outcome=ClickOutcome.OCCUPIED,
                error_message=f"Cell {index} is already occupied by {game_state.board[index].value}",
            )

        if index != game_state.active_cell:
            return ValidationResult(
                is_valid=False,
                outcome=ClickOutcome.WRONG_CELL,
                error_message=f"Cell {index} is not the active cell ({game_state.active_cell})",
            )

        return ValidationResult(is_valid=True, outcome=ClickOutcome.ACCEPTED)
