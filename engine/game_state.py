"""
Game state management for Reaction Tic-Tac-Toe.
Tracks the board, current player, active cell, countdown and phase.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


BOARD_CELLS = 9

# Winning index triples, in scan order: rows, columns, diagonals
WIN_LINES: List[Tuple[int, int, int]] = [
    # Rows
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    # Columns
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    # Diagonals
    (0, 4, 8), (2, 4, 6),
]


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class Phase(Enum):
    """Where the game is in its turn cycle."""
    IDLE = "idle"
    AWAITING_INPUT = "awaiting_input"
    RESOLVING = "resolving"
    WON = "won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self in (Phase.WON, Phase.DRAW)


@dataclass
class TurnRecord:
    """
    One resolved turn.
    """
    turn_number: int        # 1-based
    player: Player          # Whose turn it was
    cell: Optional[int]     # Cell marked, None if the turn was skipped
    skipped: bool = False   # True if the countdown ran out


@dataclass
class GameState:
    """
    The complete state of one reaction game.

    Tracks:
    - The 9 cells, row-major (None means empty)
    - Current player and the cell they must click
    - Seconds left on the countdown
    - Phase of the turn cycle and the result
    - Turn history (moves and skips)
    """

    board: List[Optional[Player]] = field(
        default_factory=lambda: [None] * BOARD_CELLS
    )

    current_player: Player = Player.X

    # The only cell that may be clicked this turn
    active_cell: Optional[int] = None

    time_remaining: int = 0

    phase: Phase = Phase.IDLE

    # Game result
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    history: List[TurnRecord] = field(default_factory=list)

    @property
    def is_game_over(self) -> bool:
        return self.phase.is_terminal

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices, in ascending order.
        """
        return [index for index, cell in enumerate(self.board) if cell is None]

    def is_full(self) -> bool:
        """True when no empty cell remains."""
        return all(cell is not None for cell in self.board)

    def count_marks(self, player: Player) -> int:
        return sum(1 for cell in self.board if cell == player)

    def place_mark(self, index: int) -> None:
        """
        Write the current player's mark into a cell.

        Args:
            index: Cell index (0-8).

        Raises:
            ValueError: If the game is over, the index is out of range,
                or the cell is already occupied.
        """
        if self.is_game_over:
            raise ValueError("Game is already over!")

        if not 0 <= index < BOARD_CELLS:
            raise ValueError(f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}.")

        if self.board[index] is not None:
            raise ValueError(f"Cell {index} is already occupied by {self.board[index].value}")

        self.board[index] = self.current_player
        self.record_turn(index)

    def record_turn(self, cell: Optional[int]) -> TurnRecord:
        """Append a history entry for the current player's turn."""
        record = TurnRecord(
            turn_number=len(self.history) + 1,
            player=self.current_player,
            cell=cell,
            skipped=cell is None,
        )
        self.history.append(record)
        return record

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            active_cell=self.active_cell,
            time_remaining=self.time_remaining,
            phase=self.phase,
            winner=self.winner,
            winning_line=self.winning_line,
            history=list(self.history),
        )

    def format_board(self) -> str:
        """Render the board as three text rows, '.' for empty cells."""
        symbols = [cell.value if cell else "." for cell in self.board]
        return "\n".join(" ".join(symbols[row * 3:row * 3 + 3]) for row in range(3))

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.format_board())

        if self.phase == Phase.WON:
            print(f"\n🏆 {self.winner.value} WINS!")
        elif self.phase == Phase.DRAW:
            print("\n🤝 It's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}  Phase: {self.phase.value}")
