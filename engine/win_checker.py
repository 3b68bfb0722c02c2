"""
Win checker for Reaction Tic-Tac-Toe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass

import numpy as np

from .game_state import GameState, Player, WIN_LINES


class Outcome(Enum):
    """Result of evaluating a board."""
    WIN = "win"
    DRAW = "draw"
    CONTINUE = "continue"


@dataclass
class Evaluation:
    """What the board says after a turn."""
    outcome: Outcome
    winner: Optional[Player] = None
    line: Optional[Tuple[int, int, int]] = None


class WinChecker:
    """
    Checks for win conditions.

    Win condition: 3 equal marks on one of the 8 lines
    (horizontally, vertically, or diagonally). Lines are scanned
    in WIN_LINES order and the first complete one is reported.
    """

    LINES = np.array(WIN_LINES)

    def _line_hits(self, board: List[Optional[Player]]) -> np.ndarray:
        """Indices (into WIN_LINES) of every complete line, in scan order."""
        cells = np.array([cell.value if cell else "" for cell in board])
        lines = cells[self.LINES]

        complete = (
            (lines[:, 0] != "")
            & (lines[:, 0] == lines[:, 1])
            & (lines[:, 1] == lines[:, 2])
        )
        return np.flatnonzero(complete)

    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        """
        Get the first winning line if there is one.

        Args:
            game_state: The game state.

        Returns:
            The winning index triple, or None.
        """
        hits = self._line_hits(game_state.board)
        if hits.size == 0:
            return None
        return WIN_LINES[int(hits[0])]

    def check_winner(self, game_state: GameState) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(game_state)
        if line is None:
            return None
        return game_state.board[line[0]]

    def check_draw(self, game_state: GameState) -> bool:
        """A draw is a full board with no winning line."""
        if self.get_winning_line(game_state) is not None:
            return False
        return game_state.is_full()

    def evaluate(self, game_state: GameState) -> Evaluation:
        """
        Evaluate the board: win first, then draw, otherwise play on.
        """
        line = self.get_winning_line(game_state)
        if line is not None:
            return Evaluation(Outcome.WIN, game_state.board[line[0]], line)

        if game_state.is_full():
            return Evaluation(Outcome.DRAW)

        return Evaluation(Outcome.CONTINUE)
