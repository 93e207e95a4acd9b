"""Table settings: the rule variations a player can configure."""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any

from config import GameConfig, config
from blackjack_practice.cards import MAX_DECKS, MIN_DECKS


@dataclass(frozen=True)
class TableSettings:
    """
    Blackjack table rules configuration.

    Settings persist across rounds; the engine swaps in a new instance
    rather than mutating this one.
    """

    # Shoe configuration
    num_decks: int = 6
    penetration: float = 0.75

    # Betting limits
    min_bet: int = 10
    max_bet: int = 100_000

    # Dealer rules
    dealer_hits_soft_17: bool = True  # H17 vs S17

    # Blackjack payout (3:2 = 1.5, 6:5 = 1.2)
    blackjack_payout: float = 1.5

    # Double and split rules
    double_after_split: bool = True  # DAS
    resplit_aces: bool = False  # RSA
    max_hands: int = 4

    # Side decisions
    surrender_allowed: bool = True
    insurance_allowed: bool = True

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if not MIN_DECKS <= self.num_decks <= MAX_DECKS:
            raise ValueError(f"num_decks must be between {MIN_DECKS} and {MAX_DECKS}")
        if not 0.0 < self.penetration <= 1.0:
            raise ValueError("penetration must be between 0 and 1")
        if self.min_bet < 1:
            raise ValueError("min_bet must be positive")
        if self.min_bet > self.max_bet:
            raise ValueError("min_bet cannot exceed max_bet")
        if self.blackjack_payout < 1.0:
            raise ValueError("blackjack_payout must be at least 1.0")
        if self.max_hands < 1:
            raise ValueError("max_hands must be at least 1")

    def with_changes(self, **changes: Any) -> "TableSettings":
        """
        Return a copy with the given fields replaced.

        Raises:
            ValueError: On unknown field names or invalid values
        """
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_config(cls, game_config: GameConfig | None = None) -> "TableSettings":
        """Build settings from the environment-driven game configuration."""
        game_config = game_config or config.game
        return cls(
            num_decks=game_config.num_decks,
            penetration=game_config.penetration,
            min_bet=game_config.min_bet,
            max_bet=game_config.max_bet,
            dealer_hits_soft_17=game_config.dealer_hits_soft_17,
            blackjack_payout=game_config.blackjack_payout,
            double_after_split=game_config.double_after_split,
            resplit_aces=game_config.resplit_aces,
            max_hands=game_config.max_hands,
            surrender_allowed=game_config.surrender_allowed,
            insurance_allowed=game_config.insurance_allowed,
        )

    @classmethod
    def vegas_strip(cls) -> "TableSettings":
        """Standard Vegas Strip rules."""
        return cls(
            num_decks=6,
            dealer_hits_soft_17=False,
            blackjack_payout=1.5,
            double_after_split=True,
            resplit_aces=False,
            surrender_allowed=True,
        )

    @classmethod
    def single_deck(cls) -> "TableSettings":
        """Single deck rules."""
        return cls(
            num_decks=1,
            dealer_hits_soft_17=True,
            blackjack_payout=1.5,
            double_after_split=False,
            resplit_aces=False,
            surrender_allowed=False,
        )

    @classmethod
    def atlantic_city(cls) -> "TableSettings":
        """Atlantic City rules."""
        return cls(
            num_decks=8,
            dealer_hits_soft_17=False,
            blackjack_payout=1.5,
            double_after_split=True,
            resplit_aces=False,
            surrender_allowed=True,
        )
