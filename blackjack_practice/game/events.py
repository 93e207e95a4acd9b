"""Game events for the event system."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from blackjack_practice.cards import Card
    from blackjack_practice.results import ResultKind
    from blackjack_practice.game.state import GameState
    from blackjack_practice.hand import Hand


class EventType(Enum):
    """Types of game events."""

    # Presentation ports: every listener gets these
    STATE_CHANGED = auto()
    CARD_DEALT = auto()
    BALANCE_CHANGED = auto()
    HAND_RESULT = auto()

    # Betting and shoe events
    BET_PLACED = auto()
    SHOE_SHUFFLED = auto()

    # Player action events
    PLAYER_HIT = auto()
    PLAYER_STAND = auto()
    PLAYER_DOUBLE = auto()
    PLAYER_SPLIT = auto()
    PLAYER_SURRENDER = auto()
    PLAYER_BUSTS = auto()
    PLAYER_BLACKJACK = auto()
    HAND_ADVANCED = auto()

    # Insurance events
    INSURANCE_OFFERED = auto()
    INSURANCE_TAKEN = auto()
    INSURANCE_DECLINED = auto()
    INSURANCE_WINS = auto()

    # Dealer events
    DEALER_BLACKJACK = auto()
    DEALER_BUSTS = auto()

    # Between-round events
    SETTINGS_CHANGED = auto()
    STATS_RESET = auto()

    # Error events
    INVALID_ACTION = auto()
    INSUFFICIENT_FUNDS = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    Events are the primary communication mechanism between the core engine
    and the presentation layer.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Type alias for event handlers
EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Simple event emitter for game events.

    Allows subscribing to specific event types or all events. Handlers run
    synchronously, in subscription order, before ``emit`` returns.
    """

    def __init__(self) -> None:
        """Initialize the event emitter."""
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: list[GameEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Unsubscribe from events.

        Args:
            handler: Handler to remove
            event_type: Event type to unsubscribe from
        """
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """
        Emit an event to all subscribers.

        Args:
            event: The event to emit
        """
        self._event_history.append(event)

        for handler in list(self._handlers.get(event.event_type, [])):
            handler(event)

        for handler in list(self._handlers.get(None, [])):
            handler(event)

    def emit_new(
        self,
        event_type: EventType,
        **data: Any,
    ) -> GameEvent:
        """
        Create and emit a new event.

        Args:
            event_type: Type of event
            **data: Event data

        Returns:
            The created event
        """
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return the event history."""
        return self._event_history.copy()

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()


class GameListener:
    """
    Observer for the four presentation ports.

    Subclass and override the callbacks of interest; the defaults do
    nothing. Hands passed to ``on_card_dealt`` are snapshots, so a listener
    cannot change the engine's hands.
    """

    def on_state_change(self, state: "GameState") -> None:
        pass

    def on_card_dealt(self, card: "Card", hand: "Hand", is_reveal: bool) -> None:
        pass

    def on_hand_result(self, result: "ResultKind", net_amount: Decimal) -> None:
        pass

    def on_balance_change(self, balance: Decimal) -> None:
        pass


class ListenerBridge:
    """Routes port events from an emitter to a GameListener."""

    def __init__(self, listener: GameListener) -> None:
        self.listener = listener

    def __call__(self, event: GameEvent) -> None:
        data = event.data
        if event.event_type == EventType.STATE_CHANGED:
            self.listener.on_state_change(data["state"])
        elif event.event_type == EventType.CARD_DEALT:
            self.listener.on_card_dealt(data["card"], data["hand"], data["is_reveal"])
        elif event.event_type == EventType.HAND_RESULT:
            self.listener.on_hand_result(data["result"], data["amount"])
        elif event.event_type == EventType.BALANCE_CHANGED:
            self.listener.on_balance_change(data["balance"])
