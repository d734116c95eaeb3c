"""Game models."""

from .card import (
    BOOK_SIZE,
    DECK_SIZE,
    NUM_RANKS,
    NUM_SUITS,
    Card,
    Rank,
    Suit,
    make_standard_deck,
    shuffle,
)
from .game_state import AskResult, GameState, GameStatus
from .hand import Book, Hand
from .player import Player

__all__ = [
    "BOOK_SIZE",
    "DECK_SIZE",
    "NUM_RANKS",
    "NUM_SUITS",
    "Card",
    "Rank",
    "Suit",
    "make_standard_deck",
    "shuffle",
    "Book",
    "Hand",
    "Player",
    "AskResult",
    "GameState",
    "GameStatus",
]
