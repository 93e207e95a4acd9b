"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator

from blackjack_practice.cards import Card


@dataclass
class Hand:
    """A blackjack hand with value calculation."""

    cards: list[Card] = field(default_factory=list)
    bet: int = 0
    is_stood: bool = False
    is_doubled: bool = False
    is_split: bool = False
    is_surrendered: bool = False
    insurance_bet: Decimal = Decimal("0")

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards and reset the wager and flags."""
        self.cards.clear()
        self.bet = 0
        self.is_stood = False
        self.is_doubled = False
        self.is_split = False
        self.is_surrendered = False
        self.insurance_bet = Decimal("0")

    def reveal_hole_card(self) -> list[Card]:
        """Turn every face-down card face up and return the flipped cards."""
        flipped = []
        for i, card in enumerate(self.cards):
            if not card.face_up:
                self.cards[i] = card.revealed()
                flipped.append(self.cards[i])
        return flipped

    @property
    def value(self) -> int:
        """
        Calculate the best hand value.

        Every ace starts at 11 and is demoted to 1, one at a time, while the
        total is over 21. Face-down cards count, since the engine evaluates
        the dealer's hole card before it is shown.
        """
        total = 0
        aces = 0

        for card in self.cards:
            if card.is_ace:
                aces += 1
            total += card.value

        while total > 21 and aces > 0:
            total -= 10
            aces -= 1

        return total

    @property
    def is_soft(self) -> bool:
        """Check if the hand counts an ace as 11 without busting."""
        if not any(card.is_ace for card in self.cards):
            return False

        total_hard = sum(1 if card.is_ace else card.value for card in self.cards)
        return total_hard + 10 <= 21

    @property
    def is_hard(self) -> bool:
        """Check if the hand is hard (not soft)."""
        return not self.is_soft

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.value == 21 and not self.is_split

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > 21

    @property
    def is_complete(self) -> bool:
        """Check if no further action can be taken on the hand."""
        return self.is_stood or self.is_surrendered or self.is_busted

    @property
    def is_pair(self) -> bool:
        """Check if the hand is two cards of equal value (any two tens pair)."""
        return len(self.cards) == 2 and self.cards[0].value == self.cards[1].value

    @property
    def pair_value(self) -> int | None:
        """Return the card value of a pair, or None if not a pair."""
        return self.cards[0].value if self.is_pair else None

    def can_split(self, resplit_aces: bool = False) -> bool:
        """
        Check if the hand's cards allow a split.

        The limit on the number of hands at the table is enforced by the
        game engine, which knows how many hands are in play.

        Args:
            resplit_aces: Whether a pair of aces produced by a split may be
                split again
        """
        if not self.is_pair or self.is_complete or self.is_doubled:
            return False
        if self.is_split and self.cards[0].is_ace and not resplit_aces:
            return False
        return True

    @property
    def can_double(self) -> bool:
        """Check if the hand can be doubled down."""
        return (
            len(self.cards) == 2
            and not self.is_doubled
            and not self.is_surrendered
            and not self.is_stood
        )

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    @property
    def value_display(self) -> str:
        """Return the hand value as shown on the table.

        While a card is face down only the face-up cards are totalled, so
        the display never gives away the hole card.
        """
        if not self.cards:
            return ""
        if not all(card.face_up for card in self.cards):
            return Hand(cards=[c for c in self.cards if c.face_up]).value_display
        if self.is_blackjack:
            return "Blackjack"
        if self.is_busted:
            return "Bust"
        if self.is_soft and self.value < 21:
            return f"soft {self.value}"
        return str(self.value)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        return f"{cards_str} ({self.value_display})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value}, bet={self.bet})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> int:
    """
    Compare a finished player hand against the dealer's.

    Naturals are settled before the player acts, so this only applies the
    showdown order: surrender, player bust, dealer bust, then totals.

    Returns:
        1 if player wins
        -1 if dealer wins
        0 if push (tie)
    """
    if player_hand.is_surrendered:
        return -1

    if player_hand.is_busted:
        return -1

    if dealer_hand.is_busted:
        return 1

    player_value = player_hand.value
    dealer_value = dealer_hand.value

    if player_value > dealer_value:
        return 1
    if dealer_value > player_value:
        return -1
    return 0
