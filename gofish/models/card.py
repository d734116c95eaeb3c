"""Card model and standard deck helpers."""

import random
from enum import IntEnum

from pydantic import BaseModel


class Suit(IntEnum):
    """Card suit. Only used to tell otherwise identical cards apart."""

    SPADE = 0
    HEART = 1
    DIAMOND = 2
    CLUB = 3


class Rank(IntEnum):
    """Card rank. Books are formed from four cards of one rank."""

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12


NUM_SUITS = len(Suit)
NUM_RANKS = len(Rank)
DECK_SIZE = NUM_SUITS * NUM_RANKS

# Cards of one rank needed for a book
BOOK_SIZE = NUM_SUITS

# Map rank to display string
RANK_NAMES = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_SYMBOLS = {
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
}


class Card(BaseModel, frozen=True):
    """Single card representation."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{SUIT_SYMBOLS[self.suit]}{RANK_NAMES[self.rank]}"

    def __repr__(self) -> str:
        return str(self)


def make_standard_deck() -> list[Card]:
    """Create the 52-card deck in a fixed, unshuffled order.

    Returns:
        One card per (suit, rank) pair, suit-major.
    """
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


def shuffle(cards: list[Card], rng: random.Random | None = None) -> None:
    """Shuffle cards in place.

    Args:
        cards: List to permute.
        rng: Random source. Uses the module-level generator if omitted.
    """
    (rng or random).shuffle(cards)
