"""Players holding a hand of cards."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable, Optional

from warsim.cards.schema import Card


class PlayerKind(Enum):
    """Who controls a player. Both kinds play identically from the front of the hand."""

    HUMAN = "human"
    AI = "ai"


class Player:
    """A named hand of cards plus a score.

    Cards are received at the back and played from the front, so the hand
    behaves as a queue.
    """

    def __init__(
        self,
        name: str,
        kind: PlayerKind = PlayerKind.HUMAN,
        hand: Iterable[Card] = (),
    ) -> None:
        self._name = name
        self.kind = kind
        self._hand: deque[Card] = deque(hand)
        self.score = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def hand(self) -> tuple[Card, ...]:
        """Snapshot of the hand, next card to play first."""
        return tuple(self._hand)

    @property
    def hand_size(self) -> int:
        return len(self._hand)

    def has_cards(self) -> bool:
        return bool(self._hand)

    def play_card(self) -> Optional[Card]:
        """Remove and return the front card, or None if the hand is empty."""
        if not self._hand:
            return None
        return self._hand.popleft()

    def receive_card(self, card: Card) -> None:
        """Append a card to the back of the hand."""
        self._hand.append(card)

    def __repr__(self) -> str:
        return (
            f"Player(name={self._name!r}, kind={self.kind.value}, "
            f"cards={len(self._hand)}, score={self.score})"
        )


def human_player(name: str) -> Player:
    return Player(name, kind=PlayerKind.HUMAN)


def ai_player(name: str) -> Player:
    return Player(name, kind=PlayerKind.AI)
