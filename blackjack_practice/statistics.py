"""Cumulative play statistics."""

from dataclasses import dataclass, fields
from decimal import Decimal

from blackjack_practice.results import HandResult, ResultKind


@dataclass
class GameStatistics:
    """Statistics accumulated across rounds."""

    hands_played: int = 0
    hands_won: int = 0
    hands_lost: int = 0
    hands_pushed: int = 0
    blackjacks: int = 0
    total_wagered: int = 0
    net_profit: Decimal = Decimal("0")
    busts: int = 0
    doubles: int = 0
    splits: int = 0
    surrenders: int = 0
    insurance_taken: int = 0
    insurance_won: int = 0

    def record_wager(self, amount: int) -> None:
        """Add a main-bet wager (initial bet, double or split)."""
        self.total_wagered += amount

    def record_hand(self, result: HandResult) -> None:
        """
        Tally a settled hand.

        Surrendered hands count as played and feed net profit, but are not
        tallied as won, lost or pushed.
        """
        self.hands_played += 1
        self.net_profit += result.net

        if result.kind == ResultKind.BLACKJACK:
            self.hands_won += 1
            self.blackjacks += 1
        elif result.kind == ResultKind.WIN:
            self.hands_won += 1
        elif result.kind == ResultKind.LOSE:
            self.hands_lost += 1
        elif result.kind == ResultKind.PUSH:
            self.hands_pushed += 1
        elif result.kind == ResultKind.SURRENDER:
            self.surrenders += 1

        if result.is_busted:
            self.busts += 1
        if result.is_doubled:
            self.doubles += 1

    def record_insurance(self, net: Decimal, won: bool) -> None:
        """Tally a settled insurance side bet."""
        self.insurance_taken += 1
        if won:
            self.insurance_won += 1
        self.net_profit += net

    def reset(self) -> None:
        """Zero every counter."""
        for f in fields(self):
            setattr(self, f.name, f.default)

    @property
    def win_rate(self) -> float:
        """Fraction of decided hands (won or lost) that were won."""
        decided = self.hands_won + self.hands_lost
        if decided == 0:
            return 0.0
        return self.hands_won / decided
