"""Standard 52-card deck."""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import Iterable, Optional

from warsim.cards.schema import Card, Rank, Suit

logger = logging.getLogger(__name__)

DECK_SIZE = len(Suit) * len(Rank)


def generate_full_deck() -> list[Card]:
    """All 52 cards, suit by suit, each suit from TWO to ACE."""
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


class Deck:
    """Ordered pile of cards dealt from the front.

    Drawing from an empty deck returns None rather than raising.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self._cards: deque[Card] = deque()
        self.reset()

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> Deck:
        """Build a deck in the given order, without shuffling."""
        ordered = list(cards)
        if len(set(ordered)) != len(ordered):
            raise ValueError("Deck cannot contain duplicate cards")

        deck = cls.__new__(cls)
        deck.rng = random.Random()
        deck._cards = deque(ordered)
        return deck

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the remaining cards, front first."""
        return tuple(self._cards)

    @property
    def count(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def shuffle(self) -> None:
        """Shuffle in place (Fisher-Yates via random.Random.shuffle)."""
        cards = list(self._cards)
        self.rng.shuffle(cards)
        self._cards = deque(cards)

    def draw(self) -> Optional[Card]:
        """Remove and return the front card, or None if the deck is empty."""
        if not self._cards:
            return None
        return self._cards.popleft()

    def reset(self) -> None:
        """Regenerate all 52 cards and shuffle them."""
        self._cards = deque(generate_full_deck())
        self.shuffle()
        logger.debug(f"Deck reset: {len(self._cards)} cards shuffled")
