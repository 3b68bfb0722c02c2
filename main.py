"""
Main entry point for Reaction Tic-Tac-Toe.

Two players share one mouse. Each turn a random empty cell glows and
the current player has a few seconds to click it. Miss it and the
turn is skipped. Three in a row wins, a full board is a draw.
"""

from engine.config import GameConfig


def build_config(args) -> GameConfig:
    """Turn command line flags into a GameConfig."""
    overrides = {"DEBUG_MODE": args.debug}
    if args.time_limit is not None:
        overrides["REACTION_TIME_LIMIT"] = args.time_limit
    if args.seed is not None:
        overrides["RANDOM_SEED"] = args.seed
    return GameConfig(**overrides)


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Reaction Tic-Tac-Toe")
    parser.add_argument(
        "--time-limit",
        type=int,
        default=None,
        help=f"Seconds to click the glowing cell (default: {GameConfig.REACTION_TIME_LIMIT})"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the glowing-cell picker (replay the same game)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine events to the console"
    )

    args = parser.parse_args(argv)
    if args.time_limit is not None and args.time_limit < 1:
        parser.error("--time-limit must be at least 1 second")

    config = build_config(args)

    print("\n" + "="*60)
    print("   Reaction Tic-Tac-Toe")
    print("="*60)
    print(f"   Time limit: {config.REACTION_TIME_LIMIT}s")
    if config.RANDOM_SEED is not None:
        print(f"   Seed: {config.RANDOM_SEED}")
    print("="*60 + "\n")

    from ui import ReactionTicTacToeUI
    ui = ReactionTicTacToeUI(config=config)

    try:
        ui.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
