"""
Turn engine for Reaction Tic-Tac-Toe.

Drives one board through alternating timed turns:

1. Pick a random empty cell and make it glow
2. Start a countdown for the current player
3. Either the player clicks the glowing cell (mark placed) or the
   countdown runs out (turn skipped)
4. After a placed mark, check for a win or draw
5. Hand the turn to the other player and repeat

All screen output goes through a Renderer, all delays through a
Scheduler, so the engine runs the same under Tkinter and in tests.
"""

from typing import Optional

from .config import GameConfig
from .game_state import GameState, Player, Phase, BOARD_CELLS
from .move_validator import MoveValidator, ValidationResult, ClickOutcome
from .win_checker import WinChecker, Outcome
from .cell_picker import CellPicker
from .renderer import Renderer
from .scheduler import Scheduler, ManualScheduler


# "No empty cell" value accepted by activate_cell alongside None
NO_CELL = -1


class TurnEngine:
    """
    State machine for one reaction game at a time.

    The engine owns its GameState; start_game() replaces it with a fresh
    one. At most one countdown is pending at any moment.
    """

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        scheduler: Optional[Scheduler] = None,
        config: Optional[GameConfig] = None,
        picker: Optional[CellPicker] = None,
    ):
        """
        Initialize the engine.

        Args:
            renderer: Receives display commands. Defaults to a null renderer.
            scheduler: Runs deferred callbacks. Defaults to a ManualScheduler.
            config: Timings and messages. Uses defaults if not provided.
            picker: Chooses the active cell. Seeded from config if not provided.
        """
        self.config = config or GameConfig()
        self.renderer = renderer or Renderer()
        self.scheduler = scheduler or ManualScheduler()
        self.picker = picker or CellPicker(self.config.RANDOM_SEED)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.state = GameState(time_remaining=self.config.REACTION_TIME_LIMIT)

        # Bumped on every start_game(); deferred callbacks from an older
        # game see a different number and abort
        self.generation = 0

        self._countdown = None

    # ==================== INPUT ====================

    def on_start_requested(self) -> GameState:
        """Start (or restart) button pressed."""
        return self.start_game()

    def on_cell_clicked(self, index: int) -> ValidationResult:
        """
        A cell was clicked.

        Only the glowing cell counts. Clicking a taken or a different empty
        cell shows a short notice and changes nothing.

        Returns:
            How the click was classified.
        """
        result = self.validator.validate_click(self.state, index)

        if result.outcome == ClickOutcome.OCCUPIED:
            self._show_notice(self.config.OCCUPIED_MESSAGE)
        elif result.outcome == ClickOutcome.WRONG_CELL:
            self._show_notice(self.config.WRONG_CELL_MESSAGE)
        elif result.is_valid:
            self._play_cell(index)

        return result

    # ==================== TURN CYCLE ====================

    def show_welcome(self):
        """Initial screen before the first game."""
        self.renderer.show_turn(self.config.WELCOME_TURN_TEXT)
        self.renderer.show_status(self.config.WELCOME_STATUS_TEXT)
        self.renderer.set_countdown(self.config.REACTION_TIME_LIMIT)
        self.renderer.set_controls(show_start=True, show_restart=False)

    def start_game(self) -> GameState:
        """
        Reset to an empty board with X to play and start the first turn.

        Returns:
            The new game state.
        """
        self._stop_countdown()
        self.generation += 1

        self.state = GameState(
            current_player=Player.X,
            phase=Phase.IDLE,
            time_remaining=self.config.REACTION_TIME_LIMIT,
        )
        self._log("new game")

        self.renderer.reset_board_visuals()
        self.renderer.show_winning_line(None)
        self.renderer.set_urgent(False)
        self.renderer.set_countdown(self.config.REACTION_TIME_LIMIT)
        self._announce_turn()
        self.renderer.set_controls(show_start=False, show_restart=False)

        self.activate_cell(self.picker.pick(self.state))
        return self.state

    def activate_cell(self, index: Optional[int]):
        """
        Make a cell the click target and start the countdown.

        Args:
            index: Cell to activate, or None (or NO_CELL) when no empty
                cell is left, in which case the board is resolved instead.

        Raises:
            ValueError: If the index is off the board or the cell is taken.
        """
        if index is None or index == NO_CELL:
            self.resolve_turn_outcome()
            return

        if self.state.is_game_over:
            return

        if not 0 <= index < BOARD_CELLS:
            raise ValueError(f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}.")
        if self.state.board[index] is not None:
            raise ValueError(f"Cell {index} is already occupied by {self.state.board[index].value}")

        previous = self.state.active_cell
        if previous is not None and previous != index:
            self.renderer.set_active(previous, False)

        self.state.active_cell = index
        self.state.phase = Phase.AWAITING_INPUT
        self.renderer.set_active(index, True)
        self._log(f"player {self.state.current_player.value} -> cell {index}")

        self._start_countdown()

    def resolve_turn_outcome(self):
        """
        Check the board after a mark: win, draw, or next turn.
        """
        if self.state.is_game_over:
            return

        evaluation = self.win_checker.evaluate(self.state)

        if evaluation.outcome == Outcome.WIN:
            self.state.phase = Phase.WON
            self.state.winner = evaluation.winner
            self.state.winning_line = evaluation.line
            self._log(f"player {evaluation.winner.value} wins on {evaluation.line}")
            self.renderer.show_status(self.config.win_message(evaluation.winner))
            self.renderer.show_winning_line(evaluation.line)
            self.end_game()
        elif evaluation.outcome == Outcome.DRAW:
            self.state.phase = Phase.DRAW
            self._log("draw")
            self.renderer.show_status(self.config.DRAW_MESSAGE)
            self.end_game()
        else:
            self.advance_turn()

    def advance_turn(self):
        """Hand the turn to the other player and activate a new cell."""
        if self.state.is_game_over:
            return

        self.state.current_player = self.state.current_player.opposite()
        self._announce_turn()

        next_cell = self.picker.pick(self.state)
        if next_cell is None:
            self.resolve_turn_outcome()
        else:
            self.activate_cell(next_cell)

    def end_game(self):
        """Stop the clock and switch the controls to 'restart'."""
        self._stop_countdown()

        if self.state.active_cell is not None:
            self.renderer.set_active(self.state.active_cell, False)
            self.state.active_cell = None

        self.renderer.set_controls(show_start=False, show_restart=True)

    @property
    def has_pending_countdown(self) -> bool:
        return self._countdown is not None

    # ==================== INTERNALS ====================

    def _play_cell(self, index: int):
        """The active cell was clicked in time."""
        self._stop_countdown()
        self.renderer.set_active(index, False)

        self.state.place_mark(index)
        self.state.active_cell = None
        self.state.phase = Phase.RESOLVING
        self.renderer.mark_cell(index, self.state.current_player)

        self.resolve_turn_outcome()

    def _start_countdown(self):
        self._stop_countdown()

        self.state.time_remaining = self.config.REACTION_TIME_LIMIT
        self.renderer.set_countdown(self.state.time_remaining)
        self.renderer.set_urgent(False)

        self._countdown = self.scheduler.schedule(self.config.TICK_INTERVAL_MS, self._on_tick)

    def _stop_countdown(self):
        if self._countdown is not None:
            self.scheduler.cancel(self._countdown)
            self._countdown = None

    def _on_tick(self):
        self._countdown = None
        if self.state.phase != Phase.AWAITING_INPUT:
            return

        self.state.time_remaining -= 1
        self.renderer.set_countdown(self.state.time_remaining)

        if self.state.time_remaining <= self.config.URGENT_THRESHOLD:
            self.renderer.set_urgent(True)

        if self.state.time_remaining <= 0:
            self._time_up()
        else:
            self._countdown = self.scheduler.schedule(self.config.TICK_INTERVAL_MS, self._on_tick)

    def _time_up(self):
        """Countdown expired: skip the turn without touching the board."""
        self.state.phase = Phase.RESOLVING

        if self.state.active_cell is not None:
            self.renderer.set_active(self.state.active_cell, False)
            self.state.active_cell = None

        self.state.record_turn(None)
        self._log(f"player {self.state.current_player.value} timed out")
        self.renderer.show_status(self.config.time_up_message(self.state.current_player))

        generation = self.generation
        self.scheduler.schedule(self.config.SKIP_DELAY_MS, lambda: self._after_skip(generation))

    def _after_skip(self, generation: int):
        if generation != self.generation:
            self._log("stale skip ignored")
            return
        self.advance_turn()

    def _show_notice(self, text: str):
        """Show a corrective message, then go back to the turn message."""
        self.renderer.show_status(text)

        generation = self.generation
        self.scheduler.schedule(self.config.NOTICE_DURATION_MS, lambda: self._revert_notice(generation))

    def _revert_notice(self, generation: int):
        if generation != self.generation or self.state.phase != Phase.AWAITING_INPUT:
            return
        self.renderer.show_status(self.config.turn_message(self.state.current_player))

    def _announce_turn(self):
        message = self.config.turn_message(self.state.current_player)
        self.renderer.show_turn(message)
        self.renderer.show_status(message)

    def _log(self, message: str):
        if self.config.DEBUG_MODE:
            print(f"[engine] {message}")
