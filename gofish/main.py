"""Main entry point for the Go Fish simulator."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from gofish.config import load_config
from gofish.game import ConfigurationError, Game
from gofish.logging import GameLogConfig, GameLogger
from gofish.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)

DEFAULT_NAMES = ["P0", "P1", "P2"]


def generate_log_filename(log_dir: str, names: list[str]) -> str:
    """Generate log filename with timestamp and player names.

    Format: {ISO timestamp}_{player1}_{player2}_..._{playerN}.jsonl
    Player names are sorted alphabetically.

    Args:
        log_dir: Directory for log files.
        names: Player names.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    player_names = "_".join(sorted(names))
    filename = f"{timestamp}_{player_names}.jsonl"
    return str(Path(log_dir) / filename)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Go Fish card game simulator with automated players"
    )
    parser.add_argument(
        "names",
        nargs="*",
        help=f"Player names in seat order (default: {' '.join(DEFAULT_NAMES)})",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed (overrides config)",
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        help="Give up after this many ticks (overrides config)",
    )
    parser.add_argument(
        "--extra-turn-on-hit",
        action="store_true",
        help="Let a player ask again after a successful ask",
    )
    parser.add_argument(
        "--only-askable",
        action="store_true",
        help="AI players only ask opponents who still hold cards",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show player hands in output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)
    names = args.names or DEFAULT_NAMES

    # Load config
    try:
        config = load_config(args.config)
    except ValidationError as e:
        print(f"Error: invalid config {args.config}: {e}", file=sys.stderr)
        return 1

    # Apply command-line overrides
    if args.seed is not None:
        config.game.seed = args.seed
    if args.max_ticks is not None:
        config.game.max_ticks = args.max_ticks
    if args.extra_turn_on_hit:
        config.game.grant_extra_turn_on_hit = True
    if args.only_askable:
        config.policy.consider_only_askable = True
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True

    # Game log directory (CLI argument overrides config file)
    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_dir

    setup_logging(config.logging.level)
    display = GameDisplay(show_hands=config.logging.show_hands)

    if game_log_enabled:
        log_path = generate_log_filename(game_log_dir, names)
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
        print(f"Game log: {log_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)

    try:
        with GameLogger(game_log_config) as game_logger:
            game = Game(names, config, game_logger=game_logger)
            for player in game.players:
                game.attach_ai(player)

            def on_ask(result):
                display.print_ask(result, game.players)

            game.set_callbacks(
                on_ask=on_ask,
                on_book=display.print_book,
                on_game_end=display.print_scoreboard,
            )

            display.print_game_start(game.players, game.pool_size)
            game.run(max_ticks=config.game.max_ticks)

            if not game.check_game_ended():
                print(f"\nNo result after {config.game.max_ticks} ticks")
                return 1
            return 0

    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
