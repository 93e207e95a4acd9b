"""Table rules and the basic strategy advisor."""

from blackjack_practice.strategy.rules import TableSettings
from blackjack_practice.strategy.basic import BasicStrategy, Action, recommend

__all__ = [
    "TableSettings",
    "BasicStrategy",
    "Action",
    "recommend",
]
