"""Game state enumeration."""

from enum import Enum


class GameState(Enum):
    """
    Round state machine states.

    Flow: BETTING → DEALING → PLAYER_TURN → DEALER_TURN → PAYOUT → GAME_OVER → BETTING
    """

    # Waiting for a wager; also between rounds once new_round() is called
    BETTING = "betting"

    # Initial cards being dealt
    DEALING = "dealing"

    # Player actions (including a pending insurance decision)
    PLAYER_TURN = "player_turn"

    # Dealer plays
    DEALER_TURN = "dealer_turn"

    # Settling wagers
    PAYOUT = "payout"

    # Round finished, results on display
    GAME_OVER = "game_over"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.BETTING: [GameState.DEALING],
    # PAYOUT straight from the deal on a natural
    GameState.DEALING: [GameState.PLAYER_TURN, GameState.PAYOUT],
    # PAYOUT without a dealer turn when every hand busted or surrendered
    GameState.PLAYER_TURN: [GameState.DEALER_TURN, GameState.PAYOUT],
    GameState.DEALER_TURN: [GameState.PAYOUT],
    GameState.PAYOUT: [GameState.GAME_OVER],
    GameState.GAME_OVER: [GameState.BETTING],
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
