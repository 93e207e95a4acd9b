"""Blackjack practice engine - UI-agnostic core."""

from blackjack_practice.cards import Card, EmptyShoeError, Rank, Shoe, Suit
from blackjack_practice.hand import Hand

__all__ = [
    "Card",
    "EmptyShoeError",
    "Shoe",
    "Rank",
    "Suit",
    "Hand",
]
