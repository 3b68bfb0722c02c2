"""
Test script for the turn engine.
Plays games headlessly with a virtual clock and a recording renderer.
"""

import sys

from engine.config import GameConfig
from engine.game_state import Player, Phase
from engine.move_validator import ClickOutcome
from engine.renderer import Renderer
from engine.scheduler import ManualScheduler
from engine.turn_engine import TurnEngine, NO_CELL

X, O, _ = Player.X, Player.O, None
TICK = GameConfig.TICK_INTERVAL_MS


class RecordingRenderer(Renderer):
    """Keeps every command it receives."""

    def __init__(self):
        self.calls = []
        self.status = None
        self.active = set()

    def show_status(self, text):
        self.status = text
        self.calls.append(("show_status", text))

    def show_turn(self, text):
        self.calls.append(("show_turn", text))

    def mark_cell(self, index, player):
        self.calls.append(("mark_cell", index, player))

    def set_active(self, index, is_active):
        if is_active:
            self.active.add(index)
        else:
            self.active.discard(index)
        self.calls.append(("set_active", index, is_active))

    def set_urgent(self, is_urgent):
        self.calls.append(("set_urgent", is_urgent))

    def set_countdown(self, seconds):
        self.calls.append(("set_countdown", seconds))

    def set_controls(self, show_start, show_restart):
        self.calls.append(("set_controls", show_start, show_restart))

    def reset_board_visuals(self):
        self.active.clear()
        self.calls.append(("reset_board_visuals",))

    def named(self, name):
        return [call for call in self.calls if call[0] == name]


def make_engine(seed=1):
    renderer = RecordingRenderer()
    scheduler = ManualScheduler()
    engine = TurnEngine(
        renderer=renderer,
        scheduler=scheduler,
        config=GameConfig(RANDOM_SEED=seed),
    )
    return engine, renderer, scheduler


def set_board(engine, board, player, active_cell):
    """Put the running game into a hand-made position."""
    if engine.state.active_cell is not None:
        engine.renderer.set_active(engine.state.active_cell, False)

    engine.state.board = list(board)
    engine.state.current_player = player
    engine.state.active_cell = active_cell
    engine.state.phase = Phase.AWAITING_INPUT

    if active_cell is not None:
        engine.renderer.set_active(active_cell, True)


def expire_countdown(scheduler):
    scheduler.advance(GameConfig.REACTION_TIME_LIMIT * TICK)


def test_start_game():
    engine, renderer, scheduler = make_engine()
    state = engine.start_game()

    assert state.board == [None] * 9
    assert state.current_player == Player.X
    assert state.phase == Phase.AWAITING_INPUT
    assert state.active_cell is not None
    assert renderer.active == {state.active_cell}
    assert state.time_remaining == GameConfig.REACTION_TIME_LIMIT
    assert engine.has_pending_countdown
    assert scheduler.pending() == 1
    assert renderer.named("set_controls")[-1] == ("set_controls", False, False)


def test_countdown_ticks_and_urgency():
    engine, renderer, scheduler = make_engine()
    engine.start_game()

    scheduler.advance(TICK)
    assert engine.state.time_remaining == 2
    assert renderer.named("set_urgent")[-1] == ("set_urgent", False)

    scheduler.advance(TICK)
    assert engine.state.time_remaining == 1
    assert renderer.named("set_urgent")[-1] == ("set_urgent", True)
    assert engine.state.phase == Phase.AWAITING_INPUT


def test_timeout_skips_turn():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    first_cell = engine.state.active_cell

    expire_countdown(scheduler)
    assert engine.state.time_remaining == 0
    assert engine.state.phase == Phase.RESOLVING
    assert engine.state.board == [None] * 9
    assert engine.state.current_player == Player.X
    assert not engine.has_pending_countdown
    assert first_cell not in renderer.active
    assert renderer.status == "Time's up! Player X's turn skipped."
    assert engine.state.history[-1].skipped

    scheduler.advance(GameConfig.SKIP_DELAY_MS)
    assert engine.state.board == [None] * 9
    assert engine.state.current_player == Player.O
    assert engine.state.phase == Phase.AWAITING_INPUT
    assert engine.state.active_cell in range(9)
    assert engine.state.time_remaining == GameConfig.REACTION_TIME_LIMIT


def test_click_during_skip_delay_is_ignored():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    cell = engine.state.active_cell

    expire_countdown(scheduler)
    result = engine.on_cell_clicked(cell)

    assert result.outcome == ClickOutcome.IGNORED
    assert engine.state.board == [None] * 9


def test_click_on_active_cell_places_mark():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    cell = engine.state.active_cell

    result = engine.on_cell_clicked(cell)

    assert result.is_valid
    assert engine.state.board[cell] == Player.X
    assert ("mark_cell", cell, Player.X) in renderer.calls
    assert engine.state.current_player == Player.O
    assert engine.state.phase == Phase.AWAITING_INPUT
    assert engine.state.active_cell != cell
    assert renderer.active == {engine.state.active_cell}
    assert scheduler.pending() == 1


def test_wrong_cell_click_shows_notice():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    active = engine.state.active_cell
    other = next(i for i in range(9) if i != active)

    result = engine.on_cell_clicked(other)

    assert result.outcome == ClickOutcome.WRONG_CELL
    assert engine.state.board == [None] * 9
    assert engine.state.active_cell == active
    assert renderer.status == GameConfig.WRONG_CELL_MESSAGE

    scheduler.advance(GameConfig.NOTICE_DURATION_MS)
    assert renderer.status == "It's Player X's turn!"
    assert engine.state.phase == Phase.AWAITING_INPUT


def test_occupied_cell_click_shows_notice():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    set_board(engine, [X, _, _, _, O, _, _, _, _], Player.X, 8)

    result = engine.on_cell_clicked(4)

    assert result.outcome == ClickOutcome.OCCUPIED
    assert renderer.status == GameConfig.OCCUPIED_MESSAGE
    assert engine.state.board == [X, _, _, _, O, _, _, _, _]


def test_out_of_range_click():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    result = engine.on_cell_clicked(42)
    assert result.outcome == ClickOutcome.OUT_OF_RANGE
    assert engine.state.board == [None] * 9


def test_row_win_for_x():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    set_board(engine, [X, X, _, O, O, _, _, _, _], Player.X, 2)

    engine.on_cell_clicked(2)

    assert engine.state.board == [X, X, X, O, O, _, _, _, _]
    assert engine.state.phase == Phase.WON
    assert engine.state.winner == Player.X
    assert engine.state.winning_line == (0, 1, 2)
    assert renderer.status == "Player X wins! Awesome! 🎉"
    assert renderer.named("set_controls")[-1] == ("set_controls", False, True)
    assert not engine.has_pending_countdown
    assert renderer.active == set()


def test_full_board_draw():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    set_board(engine, [X, O, X, X, O, O, O, X, _], Player.X, 8)

    engine.on_cell_clicked(8)

    assert engine.state.phase == Phase.DRAW
    assert engine.state.winner is None
    assert renderer.status == GameConfig.DRAW_MESSAGE
    assert not engine.has_pending_countdown


def test_last_cell_win_beats_draw():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    set_board(engine, [O, X, O, X, X, O, X, O, _], Player.O, 8)

    engine.on_cell_clicked(8)

    # Column 2 completed on a full board
    assert engine.state.phase == Phase.WON
    assert engine.state.winning_line == (2, 5, 8)


def test_game_over_is_frozen():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    set_board(engine, [X, X, _, O, O, _, _, _, _], Player.X, 2)
    engine.on_cell_clicked(2)
    frozen = engine.state.copy()

    for index in range(9):
        assert engine.on_cell_clicked(index).outcome == ClickOutcome.IGNORED
    scheduler.advance(10 * TICK)
    engine.advance_turn()
    engine.resolve_turn_outcome()

    assert engine.state.board == frozen.board
    assert engine.state.phase == Phase.WON
    assert engine.state.current_player == frozen.current_player


def test_restart_cancels_countdown():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    scheduler.advance(TICK)
    engine.start_game()

    assert scheduler.pending() == 1
    assert engine.state.time_remaining == GameConfig.REACTION_TIME_LIMIT

    scheduler.advance(TICK)
    assert engine.state.time_remaining == 2


def test_restart_during_skip_delay():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    expire_countdown(scheduler)
    engine.start_game()

    # The old skip must not hand the new game's first turn to O
    scheduler.advance(GameConfig.SKIP_DELAY_MS)
    assert engine.state.current_player == Player.X
    assert len(engine.state.history) == 0


def test_activate_without_empty_cell_resolves():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    set_board(engine, [X, O, X, X, O, O, O, X, X], Player.O, None)
    engine.state.phase = Phase.RESOLVING

    engine.activate_cell(None)

    assert engine.state.phase == Phase.DRAW


def test_activate_minus_one_means_no_cell():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    engine.state.phase = Phase.RESOLVING

    engine.activate_cell(NO_CELL)

    # Board still has empty cells, so the turn moves on to O
    assert engine.state.current_player == Player.O
    assert engine.state.phase == Phase.AWAITING_INPUT
    assert engine.state.active_cell in range(9)
    assert renderer.active == {engine.state.active_cell}


def test_activate_rejects_bad_cells():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    cell = engine.state.active_cell
    engine.on_cell_clicked(cell)
    before = engine.state.copy()

    for bad in (cell, 9, -2):
        try:
            engine.activate_cell(bad)
        except ValueError:
            pass
        else:
            raise AssertionError(f"activated cell {bad}")

    assert engine.state.active_cell == before.active_cell
    assert engine.state.board == before.board
    assert renderer.active == {before.active_cell}


def test_activate_moves_highlight():
    engine, renderer, scheduler = make_engine()
    engine.start_game()
    first = engine.state.active_cell
    second = next(i for i in range(9) if i != first)

    engine.activate_cell(second)

    assert renderer.active == {second}
    assert ("set_active", first, False) in renderer.calls
    assert engine.state.active_cell == second
    assert scheduler.pending() == 1


def test_full_game_by_clicking():
    engine, renderer, scheduler = make_engine(seed=11)
    engine.start_game()

    for _ in range(9):
        if engine.state.is_game_over:
            break
        engine.on_cell_clicked(engine.state.active_cell)

    assert engine.state.is_game_over
    assert engine.state.phase in (Phase.WON, Phase.DRAW)
    assert not engine.has_pending_countdown
    assert scheduler.pending() == 0


def test_seeded_games_repeat():
    def play(seed):
        engine, renderer, scheduler = make_engine(seed=seed)
        engine.start_game()
        cells = []
        while not engine.state.is_game_over:
            cells.append(engine.state.active_cell)
            engine.on_cell_clicked(engine.state.active_cell)
        return cells

    assert play(5) == play(5)


def test_welcome_screen():
    engine, renderer, scheduler = make_engine()
    engine.show_welcome()
    assert ("show_turn", "Welcome!") in renderer.calls
    assert renderer.named("set_controls")[-1] == ("set_controls", True, False)
    assert engine.state.phase == Phase.IDLE


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   Reaction Tic-Tac-Toe - Turn Engine Tests")
    print("="*60)

    tests = [value for name, value in sorted(globals().items()) if name.startswith("test_")]

    all_passed = True
    for test in tests:
        try:
            test()
            print(f"  {test.__name__}: ✓ PASS")
        except AssertionError as e:
            print(f"  {test.__name__}: ✗ FAIL {e}")
            all_passed = False

    print("="*60)
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
