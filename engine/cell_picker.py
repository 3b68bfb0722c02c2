"""
Active-cell picker for Reaction Tic-Tac-Toe.
Chooses which empty cell the current player has to hit.
"""

from typing import Optional

import numpy as np

from .game_state import GameState


class CellPicker:
    """
    Picks a cell uniformly at random from the empty cells.

    A fresh draw is made every turn; the previous active cell is not
    excluded. Pass a seed to replay the same sequence of cells.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def pick(self, game_state: GameState) -> Optional[int]:
        """
        Pick the next active cell.

        Returns:
            A cell index, or None if the board has no empty cells.
        """
        empty_cells = game_state.get_empty_cells()
        if not empty_cells:
            return None
        return int(self.rng.choice(empty_cells))
