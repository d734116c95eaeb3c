"""Shared fixtures for game tests."""

import random

import pytest

from gofish.config import Config
from gofish.game.engine import Game
from gofish.models.card import RANK_NAMES, Card, Suit

RANK_BY_NAME = {name: rank for rank, name in RANK_NAMES.items()}
SUIT_BY_CODE = {"S": Suit.SPADE, "H": Suit.HEART, "D": Suit.DIAMOND, "C": Suit.CLUB}


def parse_card(code: str) -> Card:
    """Parse a card code like "SA", "H10" or "CK"."""
    return Card(rank=RANK_BY_NAME[code[1:]], suit=SUIT_BY_CODE[code[0]])


class StackedRandom(random.Random):
    """Random source whose shuffle puts chosen cards on top of the deck.

    Cards are dealt from the end of the deck, so `top[0]` is the first card
    dealt. Everything else (opponent picks, etc.) stays seeded random.
    """

    def __init__(self, top: list[Card], seed: int = 0):
        super().__init__(seed)
        self.top = top

    def shuffle(self, x):
        rest = [c for c in x if c not in self.top]
        x[:] = rest + list(reversed(self.top))


@pytest.fixture
def card():
    return parse_card


@pytest.fixture
def make_game():
    """Build a game with known hands.

    Usage: make_game([["SA", ...], ["HA", ...]], pool_top=["SK"])
    Each hand must match the configured deal size. `pool_top` lists the
    next cards drawn from the pool, in order.
    """

    def _make(
        hands: list[list[str]],
        pool_top: list[str] | None = None,
        config: Config | None = None,
        seed: int = 0,
    ) -> Game:
        codes = [code for hand in hands for code in hand] + list(pool_top or [])
        rng = StackedRandom([parse_card(code) for code in codes], seed)
        names = [f"P{i}" for i in range(len(hands))]
        return Game(names, config, rng=rng)

    return _make


def all_cards(game: Game) -> list[Card]:
    """Every card in hands, books and the pool."""
    cards = list(game._pool)
    for player in game.players:
        cards.extend(player.hand.to_list())
        for book in player.books:
            cards.extend(book.cards)
    return cards
