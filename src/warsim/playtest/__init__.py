"""Console play for War."""

from warsim.playtest.display import RoundRenderer, format_card, format_cards
from warsim.playtest.session import SessionConfig, WarSession

__all__ = [
    "RoundRenderer",
    "format_card",
    "format_cards",
    "SessionConfig",
    "WarSession",
]
