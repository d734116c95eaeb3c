"""Hand and Book models."""

from typing import Iterator

from pydantic import BaseModel, model_validator

from .card import BOOK_SIZE, Card, Rank


class Book(BaseModel, frozen=True):
    """Four cards of the same rank, extracted from a hand."""

    rank: Rank
    cards: tuple[Card, ...]

    @model_validator(mode="after")
    def _check_cards(self) -> "Book":
        if len(self.cards) != BOOK_SIZE:
            raise ValueError(f"A book needs {BOOK_SIZE} cards, got {len(self.cards)}")
        if any(c.rank != self.rank for c in self.cards):
            raise ValueError(f"All cards in a book must have rank {self.rank.name}")
        return self

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self.cards) + "]"


class Hand:
    """Cards held by one player, grouped by rank.

    Each rank group is kept sorted by suit. The groups themselves are never
    handed out; callers get copies or counts.
    """

    def __init__(self, cards: list[Card] | None = None):
        """Initialize hand.

        Args:
            cards: Initial cards. Books are not extracted automatically.
        """
        self._groups: dict[Rank, list[Card]] = {rank: [] for rank in Rank}
        self._count = 0
        for card in cards or []:
            self.add_card(card)

    @property
    def count(self) -> int:
        """Total number of cards held."""
        return self._count

    def add_card(self, card: Card) -> None:
        """Add a card to the group of its rank."""
        group = self._groups[card.rank]
        group.append(card)
        group.sort(key=lambda c: c.suit)
        self._count += 1

    def remove_cards_with_rank(self, rank: Rank) -> list[Card]:
        """Remove and return every card of the given rank.

        Returns an empty list if the hand holds none.
        """
        removed = self._groups[rank]
        self._groups[rank] = []
        self._count -= len(removed)
        return removed

    def extract_books(self) -> list[Book]:
        """Pull out every complete book.

        Ranks are scanned in ascending order and each group is reduced until
        fewer than four cards remain.

        Returns:
            Newly formed books, empty if no rank qualifies.
        """
        books: list[Book] = []
        for rank, group in self._groups.items():
            while len(group) >= BOOK_SIZE:
                cards = group[-BOOK_SIZE:]
                del group[-BOOK_SIZE:]
                self._count -= BOOK_SIZE
                books.append(Book(rank=rank, cards=tuple(cards)))
        return books

    def count_of(self, rank: Rank) -> int:
        """Get number of cards of the given rank."""
        return len(self._groups[rank])

    def rank_counts(self) -> dict[Rank, int]:
        """Get number of cards per rank, in ascending rank order."""
        return {rank: len(group) for rank, group in self._groups.items()}

    def cards_of_rank(self, rank: Rank) -> list[Card]:
        """Get a copy of the cards of the given rank."""
        return list(self._groups[rank])

    def to_list(self) -> list[Card]:
        """Get all cards, ordered by rank then suit."""
        return [card for group in self._groups.values() for card in group]

    def is_empty(self) -> bool:
        """Check if hand is empty."""
        return self._count == 0

    def __iter__(self) -> Iterator[Card]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return self._count

    def __contains__(self, card: Card) -> bool:
        return card in self._groups[card.rank]

    def __str__(self) -> str:
        if not self._count:
            return "[]"
        return "[" + ", ".join(str(c) for c in self.to_list()) + "]"

    def __repr__(self) -> str:
        return f"Hand({self.to_list()!r})"
