"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from gofish.models.game_state import AskResult
from gofish.models.hand import Book
from gofish.models.player import Player

from .formatters import format_card, format_cards, format_hands


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(
        self,
        players: list[Player],
        pool_size: int,
        seed: int | None = None,
    ) -> None:
        """Log game start with the dealt hands.

        Args:
            players: Players in seat order, after the deal.
            pool_size: Cards left in the pool.
            seed: Seed the game was created with, if any.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "players": [
                {"index": p.player_index, "name": p.name}
                for p in players
            ],
            "hands": format_hands(players),
            "books": {str(p.player_index): p.book_count for p in players},
            "pool_size": pool_size,
            "seed": seed,
        })

    def log_ask(self, result: AskResult, pool_size: int) -> None:
        """Log a single ask.

        Args:
            result: Outcome of the ask.
            pool_size: Cards left in the pool afterwards.
        """
        self._write({
            "type": "ask",
            "turn": result.turn_number,
            "player": result.asking_player,
            "asked": result.asked_player,
            "rank": result.rank.name,
            "received": format_cards(result.received),
            "drawn": format_card(result.drawn) if result.drawn is not None else None,
            "books": [b.rank.name for b in result.books],
            "next_player": result.next_player,
            "pool_size": pool_size,
        })

    def log_book(self, turn_num: int, player: Player, book: Book) -> None:
        """Log a completed book.

        Args:
            turn_num: Turn number when the book was formed.
            player: Player who completed the book.
            book: The book itself.
        """
        self._write({
            "type": "book",
            "turn": turn_num,
            "player": player.player_index,
            "rank": book.rank.name,
            "cards": format_cards(book.cards),
            "total_books": player.book_count,
        })

    def log_game_end(
        self,
        turns: int,
        ranking: list[tuple[int, Player]],
    ) -> None:
        """Log game end with results.

        Args:
            turns: Number of asks played.
            ranking: (place, player) pairs, best first.
        """
        self._write({
            "type": "game_end",
            "turns": turns,
            "ranking": [
                {"place": place, "player": p.player_index, "books": p.book_count}
                for place, p in ranking
            ],
        })
