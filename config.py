"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: bool) -> bool:
    """Read a true/false environment variable."""
    return os.getenv(name, str(default)).lower() == "true"


@dataclass(frozen=True)
class StorageConfig:
    """Where balance, settings and statistics are saved between sessions."""

    path: str = field(
        default_factory=lambda: os.path.expanduser(
            os.getenv("BLACKJACK_DATA_PATH", "~/.blackjack_practice.json")
        )
    )


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    num_decks: int = field(default_factory=lambda: int(os.getenv("BLACKJACK_DECKS", "6")))
    penetration: float = field(
        default_factory=lambda: float(os.getenv("BLACKJACK_PENETRATION", "0.75"))
    )
    min_bet: int = 10
    max_bet: int = 100_000
    blackjack_payout: float = 1.5
    dealer_hits_soft_17: bool = field(
        default_factory=lambda: _env_bool("BLACKJACK_DEALER_HITS_SOFT_17", True)
    )
    double_after_split: bool = True
    resplit_aces: bool = False
    surrender_allowed: bool = True
    insurance_allowed: bool = True
    max_hands: int = 4
    starting_balance: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_STARTING_BALANCE", "10000"))
    )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)


# Global configuration instance
config = AppConfig()
