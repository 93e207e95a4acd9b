"""Tests for Card and Shoe classes."""

import pytest
from random import Random

from blackjack_practice.cards import Card, EmptyShoeError, Shoe, Rank, Suit, standard_deck


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES
        assert card.face_up

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_card_value(self):
        """Test card blackjack values."""
        assert Card(Rank.TWO, Suit.HEARTS).value == 2
        assert Card(Rank.TEN, Suit.HEARTS).value == 10
        assert Card(Rank.JACK, Suit.HEARTS).value == 10
        assert Card(Rank.QUEEN, Suit.HEARTS).value == 10
        assert Card(Rank.KING, Suit.HEARTS).value == 10
        assert Card(Rank.ACE, Suit.HEARTS).value == 11

    def test_card_is_ace(self):
        """Test ace detection."""
        assert Card(Rank.ACE, Suit.SPADES).is_ace
        assert not Card(Rank.KING, Suit.SPADES).is_ace

    def test_card_is_ten_value(self):
        """Test ten-value detection."""
        assert Card(Rank.TEN, Suit.SPADES).is_ten_value
        assert Card(Rank.JACK, Suit.SPADES).is_ten_value
        assert Card(Rank.QUEEN, Suit.SPADES).is_ten_value
        assert Card(Rank.KING, Suit.SPADES).is_ten_value
        assert not Card(Rank.NINE, Suit.SPADES).is_ten_value
        assert not Card(Rank.ACE, Suit.SPADES).is_ten_value

    def test_card_from_string(self):
        """Test creating cards from strings."""
        assert Card.from_string("AS") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("2H") == Card(Rank.TWO, Suit.HEARTS)
        assert Card.from_string("10D") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("TD") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("kc") == Card(Rank.KING, Suit.CLUBS)

    def test_card_from_string_with_symbols(self):
        """Test creating cards from strings with suit symbols."""
        assert Card.from_string("A♠") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("K♥") == Card(Rank.KING, Suit.HEARTS)

    @pytest.mark.parametrize("text", ["", "A", "1S", "AX", "11H"])
    def test_card_from_string_invalid(self, text):
        """Test that malformed strings are rejected."""
        with pytest.raises(ValueError):
            Card.from_string(text)

    def test_card_str(self):
        """Test string representation."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert str(card) == "A♠"
        assert str(Card(Rank.TEN, Suit.HEARTS)) == "10♥"

    def test_face_down_card_hides_itself(self):
        """Test that a face-down card shows nothing."""
        card = Card(Rank.ACE, Suit.SPADES).face_down()
        assert not card.face_up
        assert str(card) == "??"

    def test_revealed_returns_face_up_copy(self):
        """Test revealing a face-down card."""
        hidden = Card(Rank.QUEEN, Suit.CLUBS).face_down()
        shown = hidden.revealed()
        assert shown.face_up
        assert not hidden.face_up
        assert shown.rank == Rank.QUEEN

    def test_face_up_flag_ignored_by_equality(self):
        """Test that facing does not change card identity."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card == card.face_down()
        assert hash(card) == hash(card.face_down())

    def test_card_equality(self):
        """Test card equality."""
        card1 = Card(Rank.ACE, Suit.SPADES)
        card2 = Card(Rank.ACE, Suit.SPADES)
        card3 = Card(Rank.KING, Suit.SPADES)
        assert card1 == card2
        assert card1 != card3

    def test_card_hash(self):
        """Test that cards can be used in sets/dicts."""
        card1 = Card(Rank.ACE, Suit.SPADES)
        card2 = Card(Rank.ACE, Suit.SPADES)
        cards = {card1, card2}
        assert len(cards) == 1


class TestStandardDeck:
    """Tests for the single-deck card list."""

    def test_deck_has_all_cards(self):
        """Test that a deck contains all 52 unique cards."""
        cards = standard_deck()
        assert len(cards) == 52
        assert len(set(cards)) == 52

    def test_deck_composition(self):
        """Test four of each rank and sixteen ten-value cards."""
        cards = standard_deck()
        for rank in Rank:
            assert sum(1 for c in cards if c.rank == rank) == 4
        assert sum(1 for c in cards if c.is_ten_value) == 16


class TestShoe:
    """Tests for the Shoe class."""

    def test_shoe_creation(self):
        """Test creating a shoe with multiple decks."""
        shoe = Shoe(num_decks=6)
        assert len(shoe) == 312  # 6 * 52
        assert shoe.num_decks == 6
        assert shoe.total_cards == 312

    def test_shoe_single_deck(self):
        """Test single deck shoe."""
        shoe = Shoe(num_decks=1)
        assert len(shoe) == 52

    def test_shoe_eight_deck(self):
        """Test eight deck shoe."""
        shoe = Shoe(num_decks=8)
        assert len(shoe) == 416

    @pytest.mark.parametrize("num_decks", [0, 9, -1])
    def test_shoe_invalid_decks_raises(self, num_decks):
        """Test that invalid deck count raises error."""
        with pytest.raises(ValueError):
            Shoe(num_decks=num_decks)

    def test_shoe_invalid_penetration_raises(self):
        """Test that invalid penetration raises error."""
        with pytest.raises(ValueError):
            Shoe(num_decks=6, penetration=0)
        with pytest.raises(ValueError):
            Shoe(num_decks=6, penetration=1.5)

    def test_shoe_shuffle(self):
        """Test shuffling keeps every card."""
        shoe = Shoe(num_decks=2, rng=Random(42))
        before = sorted(map(repr, shoe))
        shoe.shuffle()
        assert len(shoe) == 104
        assert sorted(map(repr, shoe)) == before

    def test_shoe_shuffle_is_reproducible(self):
        """Test that the same seed gives the same order."""
        shoe1 = Shoe(num_decks=6, rng=Random(7))
        shoe2 = Shoe(num_decks=6, rng=Random(7))
        shoe1.shuffle()
        shoe2.shuffle()
        assert [shoe1.deal() for _ in range(20)] == [shoe2.deal() for _ in range(20)]

    def test_shoe_deal(self, shoe):
        """Test dealing from shoe."""
        card = shoe.deal()
        assert isinstance(card, Card)
        assert len(shoe) == 311

    def test_shoe_deal_empty_raises(self):
        """Test that dealing from an exhausted shoe raises."""
        shoe = Shoe(num_decks=1)
        for _ in range(52):
            shoe.deal()

        with pytest.raises(EmptyShoeError):
            shoe.deal()

    def test_empty_shoe_error_is_index_error(self):
        """Test that callers catching IndexError still work."""
        assert issubclass(EmptyShoeError, IndexError)

    def test_shoe_needs_reshuffle(self):
        """Test the penetration threshold."""
        shoe = Shoe(num_decks=1, penetration=0.75)
        shoe.shuffle()

        # 13 cards must remain before the cut: 52 * 0.25
        for _ in range(39):
            assert not shoe.needs_reshuffle
            shoe.deal()

        assert not shoe.needs_reshuffle
        shoe.deal()
        assert shoe.needs_reshuffle

    def test_full_penetration_deals_to_the_end(self):
        """Test that penetration 1.0 never asks for a reshuffle early."""
        shoe = Shoe(num_decks=1, penetration=1.0)
        for _ in range(51):
            shoe.deal()
        assert not shoe.needs_reshuffle

    def test_reshuffle_restores_full_shoe(self, shoe):
        """Test that reshuffle brings dealt cards back."""
        for _ in range(100):
            shoe.deal()
        shoe.reshuffle()
        assert shoe.remaining == 312
        assert shoe.cards_dealt == 0

    def test_set_deck_count_applies_on_reshuffle(self, shoe):
        """Test that a new deck count waits for the next reshuffle."""
        shoe.set_deck_count(2)
        assert shoe.total_cards == 312
        shoe.reshuffle()
        assert shoe.total_cards == 104
        assert shoe.num_decks == 2

    def test_set_deck_count_validates(self, shoe):
        """Test that out-of-range deck counts are rejected."""
        with pytest.raises(ValueError):
            shoe.set_deck_count(9)

    def test_set_penetration_applies_immediately(self):
        """Test that a lower penetration triggers a reshuffle sooner."""
        shoe = Shoe(num_decks=1, penetration=1.0)
        for _ in range(30):
            shoe.deal()
        assert not shoe.needs_reshuffle
        shoe.set_penetration(0.5)
        assert shoe.needs_reshuffle

    def test_shoe_decks_remaining(self, shoe):
        """Test decks remaining calculation."""
        assert shoe.decks_remaining == 6.0

        # Deal one deck worth
        for _ in range(52):
            shoe.deal()

        assert abs(shoe.decks_remaining - 5.0) < 0.01

    def test_shoe_cards_dealt(self, shoe):
        """Test cards dealt tracking."""
        assert shoe.cards_dealt == 0

        shoe.deal()
        shoe.deal()
        shoe.deal()
        assert shoe.cards_dealt == 3
        assert shoe.remaining + shoe.cards_dealt == shoe.total_cards
