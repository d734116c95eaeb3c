"""Formatters for game log output."""

from collections.abc import Iterable

from gofish.models.card import RANK_NAMES, Card, Suit
from gofish.models.player import Player

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.SPADE: "S",
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "S3" for Spade 3, "H10" for Heart 10).
    """
    return f"{SUIT_CODES[card.suit]}{RANK_NAMES[card.rank]}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to comma-separated string.

    Args:
        cards: Cards to format, in the order given.

    Returns:
        Comma-separated card strings (e.g., "S8,H8,D8").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_hands(players: list[Player]) -> dict[str, str]:
    """Format all players' hands to dict.

    Args:
        players: Players in seat order.

    Returns:
        Dict mapping player index (as string) to formatted hand string.
    """
    return {str(p.player_index): format_cards(p.hand) for p in players}
