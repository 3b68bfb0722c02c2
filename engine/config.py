"""
Game configuration for Reaction Tic-Tac-Toe.
All the timings and messages used by the turn engine and the UI.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to make the game easier or harder!
    """

    # ==================== TIMING ====================
    # Seconds a player gets to click the glowing cell
    REACTION_TIME_LIMIT = 3

    # Countdown tick period (milliseconds)
    TICK_INTERVAL_MS = 1000

    # Countdown value at which the urgency style kicks in
    URGENT_THRESHOLD = 1

    # How long a "wrong cell" / "taken" notice stays up (milliseconds)
    NOTICE_DURATION_MS = 1000

    # Pause after a timeout before the next player's turn (milliseconds)
    SKIP_DELAY_MS = 1500

    # ==================== RANDOMNESS ====================
    # Seed for the active-cell picker (None = different every game)
    RANDOM_SEED = None

    # ==================== MESSAGES ====================
    WELCOME_TURN_TEXT = "Welcome!"
    WELCOME_STATUS_TEXT = "Ready for a fast-paced Tic-Tac-Toe?"
    TURN_MESSAGE = "It's Player {player}'s turn!"
    WIN_MESSAGE = "Player {player} wins! Awesome! 🎉"
    DRAW_MESSAGE = "It's a draw! Well played! 🤝"
    TIME_UP_MESSAGE = "Time's up! Player {player}'s turn skipped."
    OCCUPIED_MESSAGE = "That spot's taken! Choose an empty one!"
    WRONG_CELL_MESSAGE = "You need to click the glowing cell, hurry!"

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

    def __init__(self, **overrides):
        """
        Create a config, optionally overriding any of the constants above.

        Args:
            **overrides: Upper-case setting names and their new values.
        """
        for name, value in overrides.items():
            if not name.isupper() or not hasattr(type(self), name):
                raise ValueError(f"Unknown setting: {name}")
            setattr(self, name, value)

    def turn_message(self, player) -> str:
        return self.TURN_MESSAGE.format(player=player.value)

    def win_message(self, player) -> str:
        return self.WIN_MESSAGE.format(player=player.value)

    def time_up_message(self, player) -> str:
        return self.TIME_UP_MESSAGE.format(player=player.value)
