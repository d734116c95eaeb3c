"""Player model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .card import Card, Rank
from .hand import Book, Hand


class Player(BaseModel):
    """Player state."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    player_index: int  # Seat position, stable for the whole game
    name: str = "Player"

    hand: Hand = Field(default_factory=Hand)
    books: list[Book] = Field(default_factory=list)

    # TurnPolicy, but Any to avoid a models -> strategy import.
    # None marks a player whose moves come from outside the engine.
    ai: Any = None

    @property
    def card_count(self) -> int:
        """Get number of cards in hand."""
        return self.hand.count

    @property
    def book_count(self) -> int:
        """Get number of books collected."""
        return len(self.books)

    @property
    def is_manual(self) -> bool:
        """Check if this player has no turn policy attached."""
        return self.ai is None

    def set_ai(self, ai: Any) -> None:
        """Attach a turn policy. Passing None makes the player manual."""
        self.ai = ai

    def can_be_asked(self) -> bool:
        """Check if this player holds any cards to be asked for."""
        return not self.hand.is_empty()

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.hand.add_card(card)

    def remove_cards_with_rank(self, rank: Rank) -> list[Card]:
        """Remove and return all cards of a rank from the hand."""
        return self.hand.remove_cards_with_rank(rank)

    def check_books(self) -> list[Book]:
        """Move completed books from the hand to this player's books.

        Returns:
            Books formed by this call (empty if none).
        """
        books = self.hand.extract_books()
        self.books.extend(books)
        return books

    def __str__(self) -> str:
        return f"Player{self.player_index}[{self.name}]"

    def __repr__(self) -> str:
        return (
            f"Player(index={self.player_index}, name={self.name!r}, "
            f"cards={self.card_count}, books={self.book_count})"
        )
