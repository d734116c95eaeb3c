"""Game state models."""

from enum import Enum

from pydantic import BaseModel

from .card import Card, Rank
from .hand import Book


class GameStatus(str, Enum):
    """Lifecycle of a game."""

    RUNNING = "running"  # At least one hand still holds cards
    ENDED = "ended"  # Every hand is empty, terminal


class GameState(BaseModel):
    """Mutable turn bookkeeping owned by the game."""

    active_player_index: int = 0
    waiting: bool = False  # Active player has no policy and must be driven externally

    turn_number: int = 0  # Completed asks
    tick_count: int = 0

    def __str__(self) -> str:
        parts = [f"Turn {self.turn_number}", f"Player {self.active_player_index}'s turn"]
        if self.waiting:
            parts.append("[WAITING]")
        return " ".join(parts)


class AskResult(BaseModel, frozen=True):
    """Outcome of one ask."""

    turn_number: int
    asking_player: int
    asked_player: int
    rank: Rank

    received: tuple[Card, ...] = ()  # Cards handed over by the asked player
    drawn: Card | None = None  # Card taken from the pool on a miss
    books: tuple[Book, ...] = ()  # Books formed by the asker afterwards
    next_player: int = 0

    @property
    def is_hit(self) -> bool:
        """Check if the asked player had cards of the rank."""
        return len(self.received) > 0

    @property
    def kept_turn(self) -> bool:
        """Check if the asker keeps the turn."""
        return self.next_player == self.asking_player

    def __str__(self) -> str:
        if self.is_hit:
            outcome = f"got {len(self.received)}"
        elif self.drawn is not None:
            outcome = f"drew {self.drawn}"
        else:
            outcome = "pool empty"
        return (
            f"Turn {self.turn_number}: P{self.asking_player} asks P{self.asked_player} "
            f"for {self.rank.name} -> {outcome}"
        )
