"""Blackjack game engine with state machine."""

import copy
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from random import Random
from typing import Any, Callable

from pydantic import ValidationError
from transitions import Machine

from config import config
from blackjack_practice.cards import Card, Shoe
from blackjack_practice.hand import Hand, evaluate_hands
from blackjack_practice.results import HandResult, ResultKind, RoundResult, classify_net
from blackjack_practice.schemas import SavedState, SettingsRecord, StatisticsRecord
from blackjack_practice.statistics import GameStatistics
from blackjack_practice.storage import GameStore, InMemoryStore
from blackjack_practice.strategy.basic import Action, recommend
from blackjack_practice.strategy.rules import TableSettings
from blackjack_practice.game.events import (
    EventEmitter,
    EventType,
    GameEvent,
    GameListener,
    ListenerBridge,
)
from blackjack_practice.game.state import GameState

logger = logging.getLogger(__name__)


@dataclass
class PlayerState:
    """Player state during a round."""

    hands: list[Hand] = field(default_factory=lambda: [Hand()])
    current_hand_index: int = 0
    balance: Decimal = Decimal("10000")
    current_bet: int = 0

    @property
    def current_hand(self) -> Hand | None:
        """Get the current active hand."""
        if 0 <= self.current_hand_index < len(self.hands):
            return self.hands[self.current_hand_index]
        return None

    def reset_hands(self) -> None:
        """Reset hands and wager for a new round."""
        self.hands = [Hand()]
        self.current_hand_index = 0
        self.current_bet = 0


class BlackjackGame:
    """
    Blackjack round engine using a state machine.

    This is the core game logic, completely UI-agnostic. Communication
    happens through events and return values only: every player operation
    returns True when applied, or False after emitting INVALID_ACTION or
    INSUFFICIENT_FUNDS and leaving the game untouched.
    """

    # State machine states
    STATES = [s.value for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_dealing", "source": "betting", "dest": "dealing"},
        {"trigger": "start_player_turn", "source": "dealing", "dest": "player_turn"},
        {"trigger": "start_dealer_turn", "source": "player_turn", "dest": "dealer_turn"},
        {
            "trigger": "settle",
            "source": ["dealing", "player_turn", "dealer_turn"],
            "dest": "payout",
        },
        {"trigger": "finish_round", "source": "payout", "dest": "game_over"},
        {"trigger": "reset_round", "source": "game_over", "dest": "betting"},
    ]

    def __init__(
        self,
        settings: TableSettings | None = None,
        store: GameStore | None = None,
        starting_balance: int | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new blackjack game.

        Saved balance and statistics are restored from the store. Saved
        settings are used unless settings are given explicitly.

        Args:
            settings: Table settings (saved or configured defaults if None)
            store: Persistence for balance, settings and statistics
            starting_balance: Balance when the store has nothing saved
            rng: Random number generator for reproducible games
        """
        self._store = store or InMemoryStore()
        if starting_balance is None:
            starting_balance = config.game.starting_balance

        self.player = PlayerState(balance=Decimal(starting_balance))
        self.stats = GameStatistics()
        self._settings = settings or TableSettings.from_config()

        saved = self._load_saved_state()
        if saved is not None:
            self.player.balance = saved.balance
            self.stats = saved.statistics.to_statistics()
            if settings is None:
                self._settings = saved.settings.to_settings()

        self.shoe = Shoe(
            num_decks=self._settings.num_decks,
            penetration=self._settings.penetration,
            rng=rng,
        )
        self.shoe.shuffle()

        self.dealer_hand = Hand()
        self.events = EventEmitter()
        self._insurance_pending = False
        self._last_result: RoundResult | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial=GameState.BETTING.value,
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_emit_state_change",
        )

    # ------------------------------------------------------------------
    # Observers

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState(self._machine_state)  # type: ignore[attr-defined]

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def add_listener(self, listener: GameListener) -> ListenerBridge:
        """Route state, card, balance and result events to a listener."""
        bridge = ListenerBridge(listener)
        self.events.subscribe(bridge)
        return bridge

    def _emit_state_change(self) -> None:
        self.events.emit_new(EventType.STATE_CHANGED, state=self.state)

    def _reject(
        self,
        message: str,
        event_type: EventType = EventType.INVALID_ACTION,
        **data: Any,
    ) -> bool:
        """Report a refused operation; the game is left as it was."""
        logger.debug("Rejected in %s: %s", self.state.name, message)
        self.events.emit_new(event_type, message=message, state=self.state, **data)
        return False

    # ------------------------------------------------------------------
    # Accessors

    @property
    def balance(self) -> Decimal:
        """Return the player's balance."""
        return self.player.balance

    @property
    def current_bet(self) -> int:
        """Return the wager placed for this round."""
        return self.player.current_bet

    @property
    def player_hands(self) -> list[Hand]:
        """Return the player's hands in play order."""
        return list(self.player.hands)

    @property
    def current_hand(self) -> Hand | None:
        """Return the hand being played."""
        return self.player.current_hand

    @property
    def current_hand_index(self) -> int:
        """Return the index of the hand being played."""
        return self.player.current_hand_index

    @property
    def dealer_up_card(self) -> Card | None:
        """Return the dealer's face-up card."""
        return self.dealer_hand.cards[0] if self.dealer_hand.cards else None

    @property
    def settings(self) -> TableSettings:
        """Return the table settings."""
        return self._settings

    @property
    def statistics(self) -> GameStatistics:
        """Return the cumulative statistics."""
        return self.stats

    @property
    def last_result(self) -> RoundResult | None:
        """Return the outcome of the most recently settled round."""
        return self._last_result

    @property
    def insurance_pending(self) -> bool:
        """Check if the player owes an insurance decision."""
        return self._insurance_pending

    # ------------------------------------------------------------------
    # Persistence

    def _load_saved_state(self) -> SavedState | None:
        try:
            return self._store.load()
        except Exception:
            logger.warning("Could not load saved state; using defaults", exc_info=True)
            return None

    def _persist(self) -> None:
        try:
            snapshot = SavedState(
                balance=self.player.balance,
                settings=SettingsRecord.from_settings(self._settings),
                statistics=StatisticsRecord.from_statistics(self.stats),
            )
            self._store.save(snapshot)
        except Exception:
            logger.warning("Could not save game state", exc_info=True)

    def _change_balance(self, delta: Decimal) -> None:
        self.player.balance += delta
        self.events.emit_new(EventType.BALANCE_CHANGED, balance=self.player.balance)
        self._persist()

    # ------------------------------------------------------------------
    # Betting and dealing

    def place_bet(self, amount: int) -> bool:
        """
        Place the wager for the next round.

        Args:
            amount: Bet amount in whole units

        Returns:
            True if bet was accepted
        """
        if self.state != GameState.BETTING:
            return self._reject("Cannot bet in current state")

        if self.player.current_bet > 0:
            return self._reject("A bet is already placed for this round")

        if not isinstance(amount, int) or isinstance(amount, bool):
            return self._reject("Bet must be a whole number of units")

        if amount < self._settings.min_bet or amount > self._settings.max_bet:
            return self._reject(
                f"Bet must be between {self._settings.min_bet} and {self._settings.max_bet}"
            )

        if amount > self.player.balance:
            return self._reject(
                "Insufficient balance",
                EventType.INSUFFICIENT_FUNDS,
                required=amount,
                available=self.player.balance,
            )

        self.player.current_bet = amount
        self.player.hands[0].bet = amount
        self.stats.record_wager(amount)

        self.events.emit_new(EventType.BET_PLACED, amount=amount)
        self._change_balance(Decimal(-amount))
        return True

    def deal(self) -> bool:
        """
        Deal the opening cards for the placed bet.

        Returns:
            True if the cards were dealt
        """
        if self.state != GameState.BETTING:
            return self._reject("Cannot deal in current state")

        if self.player.current_bet == 0:
            return self._reject("Must place bet before dealing")

        if self.shoe.needs_reshuffle:
            self._reshuffle_shoe()

        self.start_dealing()

        self.player.hands = [Hand(bet=self.player.current_bet)]
        self.player.current_hand_index = 0
        self.dealer_hand.clear()

        player_hand = self.player.hands[0]

        # Deal: player, dealer, player, dealer (face down)
        self._deal_card_to_hand(player_hand)
        self._deal_card_to_hand(self.dealer_hand)
        self._deal_card_to_hand(player_hand)
        self._deal_card_to_hand(self.dealer_hand, face_up=False)

        up_card = self.dealer_hand.cards[0]

        if up_card.is_ace and self._settings.insurance_allowed:
            self._insurance_pending = True
            self.start_player_turn()
            self.events.emit_new(EventType.INSURANCE_OFFERED)
            return True

        if player_hand.is_blackjack:
            self.events.emit_new(EventType.PLAYER_BLACKJACK)
            self._settle_natural()
            return True

        self.start_player_turn()
        return True

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        if self.shoe.remaining == 0:
            logger.info("Shoe exhausted mid-round; reshuffling")
            self._reshuffle_shoe()

        card = self.shoe.deal()
        if not face_up:
            card = card.face_down()
        hand.add_card(card)
        self._emit_card(card, hand, is_reveal=False)
        return card

    def _emit_card(self, card: Card, hand: Hand, is_reveal: bool) -> None:
        is_dealer = hand is self.dealer_hand
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=card,
            hand=copy.deepcopy(hand),
            is_dealer=is_dealer,
            hand_index=None if is_dealer else self._hand_index(hand),
            is_reveal=is_reveal,
        )

    def _hand_index(self, hand: Hand) -> int:
        return next(i for i, h in enumerate(self.player.hands) if h is hand)

    def _reveal_hole_card(self) -> None:
        for card in self.dealer_hand.reveal_hole_card():
            self._emit_card(card, self.dealer_hand, is_reveal=True)

    def _reshuffle_shoe(self) -> None:
        self.shoe.reshuffle()
        logger.info("Shoe reshuffled (%d decks)", self.shoe.num_decks)
        self.events.emit_new(
            EventType.SHOE_SHUFFLED,
            num_decks=self.shoe.num_decks,
            cards=self.shoe.remaining,
        )

    # ------------------------------------------------------------------
    # Player actions

    def _turn_error(self) -> str | None:
        """Return why the active hand cannot act, or None if it can."""
        if self.state != GameState.PLAYER_TURN:
            return "Not the player's turn"
        if self._insurance_pending:
            return "Insurance decision pending"
        hand = self.player.current_hand
        if hand is None or hand.is_complete:
            return "Hand is already complete"
        return None

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        error = self._turn_error()
        if error:
            return self._reject(error, action="hit")

        hand = self.player.current_hand
        self._deal_card_to_hand(hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=hand.value)

        if hand.is_busted:
            self.events.emit_new(
                EventType.PLAYER_BUSTS, hand_index=self.player.current_hand_index
            )
            self._advance_to_next_hand()

        return True

    def stand(self) -> bool:
        """Player stands (keeps current hand)."""
        error = self._turn_error()
        if error:
            return self._reject(error, action="stand")

        hand = self.player.current_hand
        hand.is_stood = True
        self.events.emit_new(EventType.PLAYER_STAND, hand_value=hand.value)
        self._advance_to_next_hand()
        return True

    def double(self) -> bool:
        """Player doubles down: one more card, then the hand stands."""
        error = self._turn_error()
        if error:
            return self._reject(error, action="double")

        hand = self.player.current_hand
        if not hand.can_double:
            return self._reject("Cannot double this hand", action="double")

        if hand.is_split and not self._settings.double_after_split:
            return self._reject("Doubling after a split is not allowed", action="double")

        if hand.bet > self.player.balance:
            return self._reject(
                "Insufficient balance to double",
                EventType.INSUFFICIENT_FUNDS,
                required=hand.bet,
                available=self.player.balance,
            )

        additional_bet = hand.bet
        self.stats.record_wager(additional_bet)
        hand.bet *= 2
        hand.is_doubled = True
        self._change_balance(Decimal(-additional_bet))

        self._deal_card_to_hand(hand)
        hand.is_stood = True
        self.events.emit_new(
            EventType.PLAYER_DOUBLE,
            hand_value=hand.value,
            new_bet=hand.bet,
        )

        if hand.is_busted:
            self.events.emit_new(
                EventType.PLAYER_BUSTS, hand_index=self.player.current_hand_index
            )

        self._advance_to_next_hand()
        return True

    def split(self) -> bool:
        """
        Player splits a pair.

        The second card moves to a new hand right after the active one. The
        active hand is dealt its replacement card now; the new hand gets its
        second card when play reaches it.
        """
        error = self._turn_error()
        if error:
            return self._reject(error, action="split")

        hand = self.player.current_hand
        if not hand.can_split(resplit_aces=self._settings.resplit_aces):
            return self._reject("Cannot split this hand", action="split")

        if len(self.player.hands) >= self._settings.max_hands:
            return self._reject("Max splits reached", action="split")

        if hand.bet > self.player.balance:
            return self._reject(
                "Insufficient balance to split",
                EventType.INSUFFICIENT_FUNDS,
                required=hand.bet,
                available=self.player.balance,
            )

        self.stats.record_wager(hand.bet)
        self.stats.splits += 1
        self._change_balance(Decimal(-hand.bet))

        new_hand = Hand(bet=hand.bet, is_split=True)
        new_hand.add_card(hand.cards.pop())
        hand.is_split = True
        index = self.player.current_hand_index
        self.player.hands.insert(index + 1, new_hand)

        self.events.emit_new(
            EventType.PLAYER_SPLIT,
            hand_index=index,
            num_hands=len(self.player.hands),
        )

        self._deal_card_to_hand(hand)
        return True

    def surrender(self) -> bool:
        """Player surrenders: half the wager comes back, the hand is over."""
        error = self._turn_error()
        if error:
            return self._reject(error, action="surrender")

        if not self._settings.surrender_allowed:
            return self._reject("Surrender not allowed", action="surrender")

        hand = self.player.current_hand
        if len(hand.cards) != 2 or hand.is_split:
            return self._reject("Can only surrender on first action", action="surrender")

        hand.is_surrendered = True
        self._change_balance(Decimal(hand.bet) / 2)
        self.events.emit_new(EventType.PLAYER_SURRENDER, hand_index=self.player.current_hand_index)

        self._advance_to_next_hand()
        return True

    def insurance(self, take: bool) -> bool:
        """
        Answer the insurance offer made when the dealer shows an Ace.

        Taking insurance stakes half the hand's bet. If the dealer has
        blackjack the side bet is credited three times over before the
        round is settled as a dealer blackjack.

        Args:
            take: Whether to take insurance

        Returns:
            True once the decision is recorded
        """
        if self.state != GameState.PLAYER_TURN or not self._insurance_pending:
            return self._reject("Insurance is not on offer", action="insurance")

        hand = self.player.current_hand

        if take:
            insurance_amount = Decimal(hand.bet) / 2
            if insurance_amount > self.player.balance:
                return self._reject(
                    "Insufficient balance for insurance",
                    EventType.INSUFFICIENT_FUNDS,
                    required=insurance_amount,
                    available=self.player.balance,
                )
            hand.insurance_bet = insurance_amount
            self.events.emit_new(EventType.INSURANCE_TAKEN, amount=insurance_amount)
            self._change_balance(-insurance_amount)
        else:
            self.events.emit_new(EventType.INSURANCE_DECLINED)

        self._insurance_pending = False

        if self.dealer_hand.is_blackjack:
            if hand.insurance_bet > 0:
                insurance_payout = hand.insurance_bet * 3
                self.events.emit_new(EventType.INSURANCE_WINS, amount=insurance_payout)
                self._change_balance(insurance_payout)
            self.events.emit_new(EventType.DEALER_BLACKJACK)
            self._settle_dealer_blackjack()
            return True

        if hand.is_blackjack:
            self.events.emit_new(EventType.PLAYER_BLACKJACK)
            self._settle_natural()

        return True

    # ------------------------------------------------------------------
    # Hand progression and dealer play

    def _advance_to_next_hand(self) -> None:
        """Move to the next hand or to the dealer's turn."""
        if self.player.current_hand_index < len(self.player.hands) - 1:
            self.player.current_hand_index += 1
            hand = self.player.current_hand

            # Split hands are dealt their second card when play reaches them
            if len(hand.cards) == 1:
                self._deal_card_to_hand(hand)

            self.events.emit_new(
                EventType.HAND_ADVANCED, hand_index=self.player.current_hand_index
            )
            return

        self._play_dealer()

    def _play_dealer(self) -> None:
        """Dealer plays their hand, unless no player hand is still live."""
        if all(h.is_busted or h.is_surrendered for h in self.player.hands):
            self._reveal_hole_card()
            self._resolve_hands()
            return

        self.start_dealer_turn()
        self._reveal_hole_card()

        # Dealer hits until 17+ (or soft 17 if H17 rules)
        while self._dealer_should_hit():
            self._deal_card_to_hand(self.dealer_hand)

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)

        self._resolve_hands()

    def _dealer_should_hit(self) -> bool:
        """Determine if dealer should hit."""
        value = self.dealer_hand.value
        if value < 17:
            return True
        if value == 17 and self.dealer_hand.is_soft and self._settings.dealer_hits_soft_17:
            return True
        return False

    # ------------------------------------------------------------------
    # Settlement

    def _settle_natural(self) -> None:
        """Settle a player blackjack against the dealer's hidden hand."""
        self._reveal_hole_card()
        self.settle()

        hand = self.player.hands[0]
        bet = Decimal(hand.bet)

        if self.dealer_hand.is_blackjack:
            result = HandResult(0, ResultKind.PUSH, hand.bet, payout=bet, net=Decimal("0"))
        else:
            winnings = bet * Decimal(str(self._settings.blackjack_payout))
            result = HandResult(
                0, ResultKind.BLACKJACK, hand.bet, payout=bet + winnings, net=winnings
            )

        self._change_balance(result.payout)
        kind = ResultKind.BLACKJACK if result.kind == ResultKind.BLACKJACK else None
        self._finish_round([result], kind=kind)

    def _settle_dealer_blackjack(self) -> None:
        """Settle every hand against a dealer blackjack."""
        self._reveal_hole_card()
        self.settle()

        results = []
        for i, hand in enumerate(self.player.hands):
            bet = Decimal(hand.bet)
            if hand.is_blackjack:
                results.append(HandResult(i, ResultKind.PUSH, hand.bet, payout=bet, net=Decimal("0")))
            else:
                results.append(HandResult(i, ResultKind.LOSE, hand.bet, payout=Decimal("0"), net=-bet))

        total_payout = sum((r.payout for r in results), Decimal("0"))
        if total_payout > 0:
            self._change_balance(total_payout)
        self._finish_round(results)

    def _resolve_hands(self) -> None:
        """Resolve all hands and calculate payouts."""
        self.settle()

        results = []
        for i, hand in enumerate(self.player.hands):
            bet = Decimal(hand.bet)
            flags = {"is_busted": hand.is_busted, "is_doubled": hand.is_doubled}

            if hand.is_surrendered:
                # The refund was credited when the hand was surrendered
                results.append(
                    HandResult(i, ResultKind.SURRENDER, hand.bet, Decimal("0"), -bet / 2, **flags)
                )
                continue

            outcome = evaluate_hands(hand, self.dealer_hand)
            if outcome == 1:
                results.append(HandResult(i, ResultKind.WIN, hand.bet, bet * 2, bet, **flags))
            elif outcome == -1:
                results.append(HandResult(i, ResultKind.LOSE, hand.bet, Decimal("0"), -bet, **flags))
            else:
                results.append(HandResult(i, ResultKind.PUSH, hand.bet, bet, Decimal("0"), **flags))

        total_payout = sum((r.payout for r in results), Decimal("0"))
        if total_payout > 0:
            self._change_balance(total_payout)
        self._finish_round(results)

    def _finish_round(
        self,
        results: list[HandResult],
        kind: ResultKind | None = None,
    ) -> None:
        """Record statistics, announce the round result and end the round."""
        insurance_net = Decimal("0")
        insurance_bet = self.player.hands[0].insurance_bet
        if insurance_bet > 0:
            insurance_won = self.dealer_hand.is_blackjack
            insurance_net = insurance_bet * 2 if insurance_won else -insurance_bet
            self.stats.record_insurance(insurance_net, insurance_won)

        for result in results:
            self.stats.record_hand(result)

        net = sum((r.net for r in results), insurance_net)
        round_result = RoundResult(
            kind=kind or classify_net(net),
            net=net,
            hands=tuple(results),
            insurance_net=insurance_net,
        )
        self._last_result = round_result
        logger.info("Round settled: %s (%s)", round_result.kind, net)

        self.events.emit_new(
            EventType.HAND_RESULT,
            result=round_result.kind,
            amount=net,
            round=round_result,
        )
        self._persist()
        self.finish_round()

    # ------------------------------------------------------------------
    # Between rounds

    def new_round(self) -> bool:
        """Clear the table and return to betting."""
        if self.state != GameState.GAME_OVER:
            return self._reject("Round still in progress")

        self.player.reset_hands()
        self.dealer_hand.clear()
        self._insurance_pending = False
        self.reset_round()
        return True

    def _between_rounds(self) -> bool:
        if self.state == GameState.GAME_OVER:
            return True
        return self.state == GameState.BETTING and self.player.current_bet == 0

    def reshuffle(self) -> bool:
        """Reshuffle the shoe on request."""
        if not self._between_rounds():
            return self._reject("Cannot reshuffle during a hand")
        self._reshuffle_shoe()
        return True

    def add_chips(self, amount: int) -> bool:
        """Top up the practice balance."""
        if not isinstance(amount, int) or isinstance(amount, bool) or amount <= 0:
            return self._reject("Chip amount must be a positive whole number")
        logger.info("Adding %d chips", amount)
        self._change_balance(Decimal(amount))
        return True

    def reset_stats(self) -> None:
        """Zero the cumulative statistics."""
        self.stats.reset()
        self.events.emit_new(EventType.STATS_RESET)
        self._persist()

    def update_settings(self, **changes: Any) -> bool:
        """
        Change table settings between rounds.

        Values are checked against the saved-settings schema before they
        take effect, so a wrongly typed value is refused like any other.
        A new deck count applies at the next reshuffle; penetration applies
        immediately.
        """
        if not self._between_rounds():
            return self._reject("Cannot change settings during a hand")

        try:
            candidate = self._settings.with_changes(**changes)
            new_settings = SettingsRecord.from_settings(candidate).to_settings()
        except (ValidationError, ValueError, TypeError) as exc:
            return self._reject(str(exc))

        self._settings = new_settings
        self.shoe.set_deck_count(new_settings.num_decks)
        self.shoe.set_penetration(new_settings.penetration)
        self.events.emit_new(EventType.SETTINGS_CHANGED, settings=new_settings)
        self._persist()
        return True

    # ------------------------------------------------------------------
    # Availability and hints

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self._turn_error() is None

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self._turn_error() is None

    @property
    def can_double(self) -> bool:
        """Check if doubling is allowed."""
        if self._turn_error() is not None:
            return False
        hand = self.player.current_hand
        if not hand.can_double:
            return False
        if hand.is_split and not self._settings.double_after_split:
            return False
        return hand.bet <= self.player.balance

    @property
    def can_split(self) -> bool:
        """Check if splitting is allowed."""
        if self._turn_error() is not None:
            return False
        hand = self.player.current_hand
        if not hand.can_split(resplit_aces=self._settings.resplit_aces):
            return False
        if len(self.player.hands) >= self._settings.max_hands:
            return False
        return hand.bet <= self.player.balance

    @property
    def can_surrender(self) -> bool:
        """Check if surrender is allowed."""
        if self._turn_error() is not None or not self._settings.surrender_allowed:
            return False
        hand = self.player.current_hand
        return len(hand.cards) == 2 and not hand.is_split

    @property
    def can_insure(self) -> bool:
        """Check if insurance is on offer and affordable."""
        if self.state != GameState.PLAYER_TURN or not self._insurance_pending:
            return False
        hand = self.player.current_hand
        return Decimal(hand.bet) / 2 <= self.player.balance

    def strategy_hint(self) -> Action | None:
        """Return the basic strategy play for the active hand, if it can act."""
        if self._turn_error() is not None:
            return None
        return recommend(
            self.player.current_hand,
            self.dealer_up_card,
            can_double=self.can_double,
            can_split=self.can_split,
            can_surrender=self.can_surrender,
        )
