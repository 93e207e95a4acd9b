"""Basic strategy tables for blackjack."""

from enum import Enum, auto
from typing import Mapping

from blackjack_practice.cards import Card
from blackjack_practice.hand import Hand


class Action(Enum):
    """Possible player actions."""

    HIT = auto()
    STAND = auto()
    DOUBLE = auto()
    SPLIT = auto()
    SURRENDER = auto()

    # Conditional table entries (fallback if primary not allowed)
    DOUBLE_OR_HIT = auto()  # Double if allowed, else hit
    DOUBLE_OR_STAND = auto()  # Double if allowed, else stand
    SURRENDER_OR_HIT = auto()  # Surrender if allowed, else hit

    def __str__(self) -> str:
        return self.name.replace("_", "/")


# Type aliases for clarity
DealerUpcard = int  # 2-11 (11 = Ace)
TableKey = tuple[int, int]  # (player total or pair value, dealer upcard)

DEALER_UPCARDS = range(2, 12)


class BasicStrategy:
    """
    Basic strategy lookup tables.

    Three pre-computed dictionaries, consulted in order: pairs, soft totals,
    hard totals. The first table that applies to the hand decides.
    """

    def __init__(self) -> None:
        self._pair_table = self._build_pair_table()
        self._soft_table = self._build_soft_table()
        self._hard_table = self._build_hard_table()

    def get_action(
        self,
        player_total: int,
        dealer_upcard: DealerUpcard,
        is_soft: bool = False,
        pair_value: int | None = None,
        can_double: bool = True,
        can_split: bool = True,
        can_surrender: bool = True,
    ) -> Action:
        """
        Get the basic strategy action.

        Args:
            player_total: Player's hand total
            dealer_upcard: Dealer's upcard value (2-11, Ace=11)
            is_soft: Whether the hand is soft
            pair_value: Card value of a two-card pair, None if not a pair
            can_double: Whether doubling is allowed
            can_split: Whether splitting is allowed
            can_surrender: Whether surrender is allowed

        Returns:
            One of HIT, STAND, DOUBLE, SPLIT or SURRENDER
        """
        if pair_value is not None and can_split:
            action = self._pair_table.get((pair_value, dealer_upcard))
            if action:
                return self._resolve_action(action, can_double, can_surrender)

        if is_soft:
            action = self._soft_table.get((player_total, dealer_upcard))
            if action:
                return self._resolve_action(action, can_double, can_surrender)

        action = self._hard_table.get((player_total, dealer_upcard))
        if action:
            return self._resolve_action(action, can_double, can_surrender)

        # Totals outside the tables
        if player_total >= 17:
            return Action.STAND
        return Action.HIT

    def _resolve_action(
        self,
        action: Action,
        can_double: bool,
        can_surrender: bool,
    ) -> Action:
        """Resolve conditional actions based on what's allowed."""
        if action == Action.DOUBLE_OR_HIT:
            return Action.DOUBLE if can_double else Action.HIT
        if action == Action.DOUBLE_OR_STAND:
            return Action.DOUBLE if can_double else Action.STAND
        if action == Action.SURRENDER_OR_HIT:
            return Action.SURRENDER if can_surrender else Action.HIT
        return action

    def _build_pair_table(self) -> Mapping[TableKey, Action]:
        """Build pair splitting strategy table, keyed by the pair's card value."""
        H = Action.HIT
        S = Action.STAND
        P = Action.SPLIT
        D = Action.DOUBLE_OR_HIT

        table: dict[TableKey, Action] = {}

        for dealer in DEALER_UPCARDS:
            # Aces and 8s: Always split
            table[(11, dealer)] = P
            table[(8, dealer)] = P

            # 2s, 3s and 7s: Split against 7 or lower
            for pair in (2, 3, 7):
                table[(pair, dealer)] = P if dealer <= 7 else H

            # 4s: Split only against 5 and 6
            table[(4, dealer)] = P if dealer in (5, 6) else H

            # 5s: Never split, play as hard 10
            table[(5, dealer)] = D if dealer <= 9 else H

            # 6s: Split against 6 or lower
            table[(6, dealer)] = P if dealer <= 6 else H

            # 9s: Stand against 7, 10 and Ace
            table[(9, dealer)] = S if dealer in (7, 10, 11) else P

            # Tens: Never split
            table[(10, dealer)] = S

        return table

    def _build_soft_table(self) -> Mapping[TableKey, Action]:
        """Build soft totals strategy table."""
        H = Action.HIT
        S = Action.STAND
        D = Action.DOUBLE_OR_HIT
        Ds = Action.DOUBLE_OR_STAND

        table: dict[TableKey, Action] = {}

        for dealer in DEALER_UPCARDS:
            # Soft 12 (A,A played unsplit)
            table[(12, dealer)] = H

            # Soft 13-14 (A,2 / A,3)
            for total in (13, 14):
                table[(total, dealer)] = D if dealer in (5, 6) else H

            # Soft 15-16 (A,4 / A,5)
            for total in (15, 16):
                table[(total, dealer)] = D if 4 <= dealer <= 6 else H

            # Soft 17 (A,6)
            table[(17, dealer)] = D if 3 <= dealer <= 6 else H

            # Soft 18 (A,7)
            if dealer <= 6:
                table[(18, dealer)] = Ds
            elif dealer <= 8:
                table[(18, dealer)] = S
            else:
                table[(18, dealer)] = H

            # Soft 19-21: Always stand
            for total in (19, 20, 21):
                table[(total, dealer)] = S

        return table

    def _build_hard_table(self) -> Mapping[TableKey, Action]:
        """Build hard totals strategy table."""
        H = Action.HIT
        S = Action.STAND
        D = Action.DOUBLE_OR_HIT
        Rh = Action.SURRENDER_OR_HIT

        table: dict[TableKey, Action] = {}

        for dealer in DEALER_UPCARDS:
            # Hard 4-8: Always hit
            for total in range(4, 9):
                table[(total, dealer)] = H

            # Hard 9
            table[(9, dealer)] = D if 3 <= dealer <= 6 else H

            # Hard 10
            table[(10, dealer)] = D if dealer <= 9 else H

            # Hard 11
            table[(11, dealer)] = D

            # Hard 12
            table[(12, dealer)] = S if 4 <= dealer <= 6 else H

            # Hard 13-16
            for total in range(13, 17):
                table[(total, dealer)] = S if dealer <= 6 else H

            # Hard 17+: Always stand
            for total in range(17, 22):
                table[(total, dealer)] = S

        # Surrender overrides hitting 16 vs 9/10/A and 15 vs 10
        for dealer in (9, 10, 11):
            table[(16, dealer)] = Rh
        table[(15, 10)] = Rh

        return table

    @property
    def pair_table(self) -> Mapping[TableKey, Action]:
        """Return the pair splitting strategy table."""
        return self._pair_table

    @property
    def soft_table(self) -> Mapping[TableKey, Action]:
        """Return the soft totals strategy table."""
        return self._soft_table

    @property
    def hard_table(self) -> Mapping[TableKey, Action]:
        """Return the hard totals strategy table."""
        return self._hard_table


_default_strategy = BasicStrategy()


def recommend(
    player_hand: Hand,
    dealer_up_card: Card,
    can_double: bool,
    can_split: bool,
    can_surrender: bool,
) -> Action:
    """
    Recommend the basic strategy play for a hand.

    Pure lookup: neither the hand nor the card is modified.

    Args:
        player_hand: The hand being played
        dealer_up_card: The dealer's face-up card (Ace counts 11)
        can_double: Whether doubling is currently allowed
        can_split: Whether splitting is currently allowed
        can_surrender: Whether surrender is currently allowed
    """
    return _default_strategy.get_action(
        player_total=player_hand.value,
        dealer_upcard=dealer_up_card.value,
        is_soft=player_hand.is_soft,
        pair_value=player_hand.pair_value,
        can_double=can_double,
        can_split=can_split,
        can_surrender=can_surrender,
    )
