"""Pydantic schemas for persisted game state."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from blackjack_practice.cards import MAX_DECKS, MIN_DECKS
from blackjack_practice.statistics import GameStatistics
from blackjack_practice.strategy.rules import TableSettings


class SettingsRecord(BaseModel):
    """Saved table settings."""

    model_config = ConfigDict(extra="ignore")

    num_decks: int = Field(default=6, ge=MIN_DECKS, le=MAX_DECKS)
    penetration: float = Field(default=0.75, gt=0.0, le=1.0)
    min_bet: int = Field(default=10, ge=1)
    max_bet: int = Field(default=100_000, ge=1)
    dealer_hits_soft_17: bool = True
    blackjack_payout: float = Field(default=1.5, ge=1.0)
    double_after_split: bool = True
    resplit_aces: bool = False
    max_hands: int = Field(default=4, ge=1)
    surrender_allowed: bool = True
    insurance_allowed: bool = True

    @model_validator(mode="after")
    def check_bet_limits(self) -> "SettingsRecord":
        """Reject a minimum bet above the maximum."""
        if self.min_bet > self.max_bet:
            raise ValueError("min_bet cannot exceed max_bet")
        return self

    def to_settings(self) -> TableSettings:
        """Convert to the engine's settings type."""
        return TableSettings(**self.model_dump())

    @classmethod
    def from_settings(cls, settings: TableSettings) -> "SettingsRecord":
        """Create from the engine's settings type."""
        return cls(**settings.to_dict())


class StatisticsRecord(BaseModel):
    """Saved cumulative statistics."""

    model_config = ConfigDict(extra="ignore")

    hands_played: int = Field(default=0, ge=0)
    hands_won: int = Field(default=0, ge=0)
    hands_lost: int = Field(default=0, ge=0)
    hands_pushed: int = Field(default=0, ge=0)
    blackjacks: int = Field(default=0, ge=0)
    total_wagered: int = Field(default=0, ge=0)
    net_profit: Decimal = Decimal("0")
    busts: int = Field(default=0, ge=0)
    doubles: int = Field(default=0, ge=0)
    splits: int = Field(default=0, ge=0)
    surrenders: int = Field(default=0, ge=0)
    insurance_taken: int = Field(default=0, ge=0)
    insurance_won: int = Field(default=0, ge=0)

    def to_statistics(self) -> GameStatistics:
        """Convert to the engine's statistics type."""
        return GameStatistics(**self.model_dump())

    @classmethod
    def from_statistics(cls, stats: GameStatistics) -> "StatisticsRecord":
        """Create from the engine's statistics type."""
        return cls.model_validate(stats, from_attributes=True)


class SavedState(BaseModel):
    """Everything that survives between sessions."""

    balance: Decimal = Field(ge=0)
    settings: SettingsRecord = Field(default_factory=SettingsRecord)
    statistics: StatisticsRecord = Field(default_factory=StatisticsRecord)
