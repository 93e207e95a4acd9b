"""Outcome records for settled hands and rounds."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ResultKind(Enum):
    """How a hand, or a whole round, came out for the player."""

    WIN = "win"
    LOSE = "lose"
    PUSH = "push"
    BLACKJACK = "blackjack"
    SURRENDER = "surrender"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HandResult:
    """
    Settlement of one player hand.

    ``payout`` is what the settlement credits to the balance; ``net`` is the
    hand's profit or loss against its full wager. A surrendered hand has a
    zero payout here because its half-bet refund was credited on surrender.
    """

    hand_index: int
    kind: ResultKind
    bet: int
    payout: Decimal
    net: Decimal
    is_busted: bool = False
    is_doubled: bool = False


@dataclass(frozen=True)
class RoundResult:
    """Headline outcome of a round, with the per-hand detail behind it."""

    kind: ResultKind
    net: Decimal
    hands: tuple[HandResult, ...]
    insurance_net: Decimal = Decimal("0")


def classify_net(net: Decimal) -> ResultKind:
    """Headline kind for a round's total net: WIN, LOSE or PUSH."""
    if net > 0:
        return ResultKind.WIN
    if net < 0:
        return ResultKind.LOSE
    return ResultKind.PUSH
