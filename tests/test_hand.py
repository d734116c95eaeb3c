"""Tests for Hand, Book and Player."""

import pytest
from pydantic import ValidationError

from gofish.models.card import Card, Rank, Suit
from gofish.models.hand import Book, Hand
from gofish.models.player import Player


def cards_of(rank: Rank, *suits: Suit) -> list[Card]:
    return [Card(rank=rank, suit=s) for s in suits]


class TestHand:
    """Tests for Hand class."""

    def test_empty_hand(self):
        """Test empty hand."""
        hand = Hand()
        assert hand.count == 0
        assert hand.is_empty()
        assert str(hand) == "[]"

    def test_add_card(self):
        """Test adding cards updates the count and rank groups."""
        hand = Hand()
        hand.add_card(Card(rank=Rank.FIVE, suit=Suit.HEART))
        hand.add_card(Card(rank=Rank.SEVEN, suit=Suit.CLUB))

        assert hand.count == 2
        assert len(hand) == 2
        assert hand.count_of(Rank.FIVE) == 1
        assert hand.count_of(Rank.SEVEN) == 1
        assert Card(rank=Rank.FIVE, suit=Suit.HEART) in hand

    def test_group_sorted_by_suit(self):
        """Test that each rank group is kept in suit order."""
        hand = Hand()
        hand.add_card(Card(rank=Rank.FIVE, suit=Suit.CLUB))
        hand.add_card(Card(rank=Rank.FIVE, suit=Suit.SPADE))
        hand.add_card(Card(rank=Rank.FIVE, suit=Suit.DIAMOND))

        assert hand.cards_of_rank(Rank.FIVE) == cards_of(
            Rank.FIVE, Suit.SPADE, Suit.DIAMOND, Suit.CLUB
        )

    def test_remove_cards_with_rank(self):
        """Test removing a whole rank group."""
        hand = Hand(cards_of(Rank.NINE, Suit.SPADE, Suit.HEART) + cards_of(Rank.TWO, Suit.CLUB))

        removed = hand.remove_cards_with_rank(Rank.NINE)

        assert removed == cards_of(Rank.NINE, Suit.SPADE, Suit.HEART)
        assert hand.count == 1
        assert hand.count_of(Rank.NINE) == 0

    def test_remove_missing_rank(self):
        """Test that removing an absent rank returns nothing."""
        hand = Hand(cards_of(Rank.TWO, Suit.CLUB))

        assert hand.remove_cards_with_rank(Rank.KING) == []
        assert hand.count == 1

    def test_extract_book(self):
        """Test that four of a rank become a book."""
        hand = Hand(
            cards_of(Rank.JACK, Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB)
            + cards_of(Rank.THREE, Suit.SPADE)
        )

        books = hand.extract_books()

        assert len(books) == 1
        assert books[0].rank == Rank.JACK
        assert len(books[0].cards) == 4
        assert hand.count == 1
        assert hand.count_of(Rank.JACK) == 0

    def test_extract_books_idempotent(self):
        """Test that a second pass finds nothing."""
        hand = Hand(cards_of(Rank.JACK, Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB))
        hand.extract_books()

        assert hand.extract_books() == []
        assert hand.count == 0

    def test_extract_books_none_qualify(self):
        """Test a hand without a full rank."""
        hand = Hand(cards_of(Rank.QUEEN, Suit.SPADE, Suit.HEART, Suit.DIAMOND))

        assert hand.extract_books() == []
        assert hand.count == 3

    def test_extract_repeated_books(self):
        """Test that a rank group is reduced until fewer than four remain."""
        suits = [Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB]
        hand = Hand(cards_of(Rank.SIX, *suits, *suits, Suit.SPADE))

        books = hand.extract_books()

        assert len(books) == 2
        assert hand.count == 1
        assert hand.count_of(Rank.SIX) == 1

    def test_multiple_ranks_ascending(self):
        """Test that books are extracted in ascending rank order."""
        suits = [Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB]
        hand = Hand(cards_of(Rank.KING, *suits) + cards_of(Rank.TWO, *suits))

        books = hand.extract_books()

        assert [b.rank for b in books] == [Rank.TWO, Rank.KING]

    def test_count_matches_groups(self):
        """Test that count always equals the sum of the rank groups."""
        hand = Hand(cards_of(Rank.ACE, Suit.SPADE, Suit.CLUB) + cards_of(Rank.TEN, Suit.HEART))
        hand.remove_cards_with_rank(Rank.ACE)
        hand.add_card(Card(rank=Rank.FOUR, suit=Suit.DIAMOND))

        assert hand.count == sum(hand.rank_counts().values()) == len(hand.to_list())

    def test_storage_not_exposed(self):
        """Test that returned lists are copies."""
        hand = Hand(cards_of(Rank.ACE, Suit.SPADE))

        hand.cards_of_rank(Rank.ACE).clear()
        hand.to_list().clear()
        hand.rank_counts()[Rank.ACE] = 0

        assert hand.count_of(Rank.ACE) == 1
        assert hand.count == 1


class TestBook:
    """Tests for Book validation."""

    def test_book_needs_four_cards(self):
        with pytest.raises(ValidationError):
            Book(rank=Rank.ACE, cards=tuple(cards_of(Rank.ACE, Suit.SPADE, Suit.HEART)))

    def test_book_needs_single_rank(self):
        cards = cards_of(Rank.ACE, Suit.SPADE, Suit.HEART, Suit.DIAMOND) + cards_of(
            Rank.TWO, Suit.CLUB
        )
        with pytest.raises(ValidationError):
            Book(rank=Rank.ACE, cards=tuple(cards))


class TestPlayer:
    """Tests for Player class."""

    def test_new_player(self):
        player = Player(player_index=2, name="Carol")

        assert player.card_count == 0
        assert player.book_count == 0
        assert not player.can_be_asked()
        assert player.is_manual
        assert "Carol" in str(player)

    def test_check_books_appends(self):
        """Test that completed books move to the player's book list."""
        player = Player(player_index=0, name="A")
        for card in cards_of(Rank.EIGHT, Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB):
            player.add_card(card)
        player.add_card(Card(rank=Rank.NINE, suit=Suit.SPADE))

        formed = player.check_books()

        assert len(formed) == 1
        assert player.books == formed
        assert player.book_count == 1
        assert player.card_count == 1
        assert player.check_books() == []
        assert player.book_count == 1

    def test_can_be_asked(self):
        player = Player(player_index=0)
        player.add_card(Card(rank=Rank.NINE, suit=Suit.SPADE))
        assert player.can_be_asked()

        player.remove_cards_with_rank(Rank.NINE)
        assert not player.can_be_asked()

    def test_set_ai(self):
        player = Player(player_index=0)
        policy = object()

        player.set_ai(policy)
        assert player.ai is policy
        assert not player.is_manual

        player.set_ai(None)
        assert player.is_manual
