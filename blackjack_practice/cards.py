"""Card and Shoe classes - immutable card representations."""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from random import Random
from typing import Iterator

logger = logging.getLogger(__name__)

MIN_DECKS = 1
MAX_DECKS = 8
CARDS_PER_DECK = 52


class EmptyShoeError(IndexError):
    """Raised when a card is dealt from a shoe with no cards remaining."""


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks with blackjack values."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.value

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        if self in (Rank.JACK, Rank.QUEEN, Rank.KING):
            return 10
        return int(self.value)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self.blackjack_value == 10


_RANK_ALIASES = {"T": Rank.TEN}

_SUIT_ALIASES = {
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """
    Immutable playing card.

    Only the face-up flag ever varies, and it does so by copying: a dealt
    hole card is replaced in its hand by ``card.revealed()``. The flag is not
    part of equality, so a face-down ace of spades still equals a face-up one.
    """

    rank: Rank
    suit: Suit
    face_up: bool = field(default=True, compare=False)

    def __str__(self) -> str:
        if not self.face_up:
            return "??"
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        state = "" if self.face_up else ", face down"
        return f"Card({self.rank.name}, {self.suit.name}{state})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        """Check if this card has a value of 10."""
        return self.rank.is_ten_value

    def face_down(self) -> "Card":
        """Return a face-down copy of this card."""
        return replace(self, face_up=False)

    def revealed(self) -> "Card":
        """Return a face-up copy of this card."""
        return replace(self, face_up=True)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', '10h'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        try:
            rank = _RANK_ALIASES.get(rank_str) or Rank(rank_str)
        except ValueError:
            raise ValueError(f"Invalid rank: {rank_str}") from None
        if suit_str not in _SUIT_ALIASES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank, _SUIT_ALIASES[suit_str])


def standard_deck() -> list[Card]:
    """Return the 52 cards of one deck in suit/rank order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def _validate_deck_count(num_decks: int) -> None:
    if not MIN_DECKS <= num_decks <= MAX_DECKS:
        raise ValueError(f"Shoe must have between {MIN_DECKS} and {MAX_DECKS} decks")


def _validate_penetration(penetration: float) -> None:
    if not 0.0 < penetration <= 1.0:
        raise ValueError("Penetration must be between 0 and 1")


class Shoe:
    """
    A multi-deck shoe for blackjack.

    Cards are kept in dealing order with a cursor marking the next card, so
    ``remaining`` is always ``total_cards - cards_dealt``. A new deck count
    only applies when the shoe is rebuilt by ``reshuffle``.
    """

    def __init__(
        self,
        num_decks: int = 6,
        penetration: float = 0.75,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a shoe with multiple decks.

        Args:
            num_decks: Number of decks in the shoe (1-8)
            penetration: Fraction of shoe dealt before reshuffle (0.0-1.0]
            rng: Random number generator for shuffling
        """
        _validate_deck_count(num_decks)
        _validate_penetration(penetration)

        self._num_decks = num_decks
        self._penetration = penetration
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self._position = 0
        self._build()

    def _build(self) -> None:
        """Rebuild the full shoe in unshuffled order."""
        self._cards = [card for _ in range(self._num_decks) for card in standard_deck()]
        self._position = 0

    def shuffle(self) -> None:
        """Shuffle every card in the shoe and start dealing from the top."""
        self._rng.shuffle(self._cards)
        self._position = 0

    def reshuffle(self) -> None:
        """Rebuild a full shoe, discarding dealt cards, and shuffle it."""
        self._build()
        self.shuffle()
        logger.debug("Shoe reshuffled: %d decks, %d cards", self._num_decks, len(self._cards))

    def deal(self) -> Card:
        """Deal the next card from the shoe."""
        if self._position >= len(self._cards):
            raise EmptyShoeError("Cannot deal from empty shoe")
        card = self._cards[self._position]
        self._position += 1
        return card

    def set_deck_count(self, num_decks: int) -> None:
        """Change the deck count; applies on the next reshuffle."""
        _validate_deck_count(num_decks)
        self._num_decks = num_decks

    def set_penetration(self, penetration: float) -> None:
        """Change the reshuffle threshold."""
        _validate_penetration(penetration)
        self._penetration = penetration

    @property
    def needs_reshuffle(self) -> bool:
        """Check if the dealt fraction has passed the penetration point."""
        if not self._cards:
            return True
        return self.remaining / self.total_cards < 1.0 - self._penetration

    @property
    def remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards) - self._position

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards dealt since the last shuffle."""
        return self._position

    @property
    def total_cards(self) -> int:
        """Return the number of cards in the current shoe."""
        return len(self._cards)

    @property
    def num_decks(self) -> int:
        """Return the configured number of decks."""
        return self._num_decks

    @property
    def decks_remaining(self) -> float:
        """Return the estimated number of decks remaining."""
        return self.remaining / CARDS_PER_DECK

    @property
    def penetration(self) -> float:
        """Return the configured penetration."""
        return self._penetration

    def __len__(self) -> int:
        return self.remaining

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards[self._position:])
