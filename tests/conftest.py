"""Pytest fixtures for blackjack practice tests."""

import pytest
from random import Random

from blackjack_practice.cards import Card, Shoe, Rank, Suit
from blackjack_practice.hand import Hand
from blackjack_practice.storage import InMemoryStore
from blackjack_practice.strategy import BasicStrategy, TableSettings
from blackjack_practice.game import BlackjackGame


def stack_shoe(game, *cards):
    """Put the given cards (e.g. "AS", "10H") on top of the game's shoe.

    Cards are dealt in the order given: player, dealer up, player, dealer
    hole, then hits. The rest of a fresh shoe follows so no reshuffle is due.
    """
    stacked = [Card.from_string(c) for c in cards]
    game.shoe._cards = stacked + list(game.shoe)
    game.shoe._position = 0


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def shoe(rng):
    """A shuffled 6-deck shoe."""
    s = Shoe(num_decks=6, penetration=0.75, rng=rng)
    s.shuffle()
    return s


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    hand = Hand()
    hand.add_card(Card(Rank.ACE, Suit.SPADES))
    hand.add_card(Card(Rank.KING, Suit.HEARTS))
    return hand


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    hand = Hand()
    hand.add_card(Card(Rank.ACE, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    return hand


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    hand = Hand()
    hand.add_card(Card(Rank.TEN, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    return hand


@pytest.fixture
def pair_8s_hand():
    """A pair of 8s hand."""
    hand = Hand()
    hand.add_card(Card(Rank.EIGHT, Suit.SPADES))
    hand.add_card(Card(Rank.EIGHT, Suit.HEARTS))
    return hand


@pytest.fixture
def bust_hand():
    """A busted hand."""
    hand = Hand()
    hand.add_card(Card(Rank.TEN, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    hand.add_card(Card(Rank.KING, Suit.CLUBS))
    return hand


@pytest.fixture
def settings():
    """Default table settings."""
    return TableSettings()


@pytest.fixture
def basic_strategy():
    """Basic strategy advisor."""
    return BasicStrategy()


@pytest.fixture
def store():
    """An empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def game(rng, settings, store):
    """A new game with a 10000 balance and nothing saved."""
    return BlackjackGame(
        settings=settings,
        store=store,
        starting_balance=10000,
        rng=rng,
    )


@pytest.fixture
def events(game):
    """Every event the game emits, in order."""
    received = []
    game.subscribe(received.append)
    return received


# Hypothesis strategies for property-based testing
try:
    from hypothesis import strategies as st

    @st.composite
    def card_strategy(draw):
        """Generate a random card."""
        rank = draw(st.sampled_from(list(Rank)))
        suit = draw(st.sampled_from(list(Suit)))
        return Card(rank, suit)

    @st.composite
    def hand_strategy(draw, min_cards=2, max_cards=5):
        """Generate a random hand."""
        cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
        hand = Hand()
        for card in cards:
            hand.add_card(card)
        return hand

except ImportError:
    pass  # hypothesis not installed
