"""Game engine and state management."""

from blackjack_practice.game.events import EventEmitter, EventType, GameEvent, GameListener
from blackjack_practice.game.state import GameState
from blackjack_practice.game.engine import BlackjackGame

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "GameListener",
    "GameState",
    "BlackjackGame",
]
