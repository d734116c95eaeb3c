"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gofish.models.game_state import AskResult
    from gofish.models.hand import Book
    from gofish.models.player import Player


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Display game events to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to show player hands
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_game_start(self, players: list["Player"], pool_size: int) -> None:
        """Print players and the state after the deal."""
        self.print_separator()
        print(f"GO FISH: {len(players)} players, {pool_size} cards in pool")
        self.print_separator()
        for player in players:
            kind = "manual" if player.is_manual else "AI"
            print(f"  Player {player.player_index}: {player.name} ({kind})")
        self.print_hands(players)

    def print_ask(self, result: "AskResult", players: list["Player"]) -> None:
        """Print one ask and its outcome."""
        asker = players[result.asking_player]
        asked = players[result.asked_player]
        print(f"\nTurn {result.turn_number}: {asker.name} asks {asked.name} for rank {result.rank.name}.")
        if result.is_hit:
            print(f"  -> {asked.name} had {len(result.received)} of those cards.")
        elif result.drawn is not None:
            print(f"  -> {asked.name} didn't have any such cards. {asker.name} drew a {result.drawn.rank.name}.")
        else:
            print(f"  -> {asked.name} didn't have any such cards. The pool was empty.")
        if result.kept_turn:
            print(f"  -> {asker.name} goes again.")
        self.print_hands(players)

    def print_book(self, player: "Player", book: "Book") -> None:
        """Print a completed book."""
        print(f"  ** {player.name} made a book with rank {book.rank.name}: {book}")

    def print_hands(self, players: list["Player"]) -> None:
        """Print hands for all players (if show_hands is enabled)."""
        if not self.show_hands:
            return

        for player in players:
            print(f"  P{player.player_index}: {player.hand}")

    def print_scoreboard(self, ranking: list[tuple[int, "Player"]]) -> None:
        """Print final ranking."""
        self.print_separator()
        print("Game end!")
        self.print_separator()
        for place, player in ranking:
            print(f"Place {place}: {player.name}, {player.book_count} books.")
