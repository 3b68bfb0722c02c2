"""
Engine package for Reaction Tic-Tac-Toe.
Handles game state, rules, timing and the turn state machine.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import GameState, Player, Phase, TurnRecord, WIN_LINES
from .move_validator import MoveValidator, ValidationResult, ClickOutcome
from .win_checker import WinChecker, Outcome
from .cell_picker import CellPicker
from .scheduler import Scheduler, ManualScheduler
from .renderer import Renderer
from .turn_engine import TurnEngine
